"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from contextlib import AbstractContextManager
from datetime import datetime
from pathlib import Path

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    def locked(self) -> AbstractContextManager:
        return self._collection.locked()

    def get_by_email(self, email: str) -> User | None:
        for raw in self._collection.read():
            if raw["email"] == email:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._collection.read()]

    def save(self, user: User) -> None:
        with self._collection.mutate() as records:
            for i, raw in enumerate(records):
                if raw["email"] == user.email:
                    records[i] = self._to_raw(user)
                    break
            else:
                records.append(self._to_raw(user))

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "email": user.email,
            "password": user.password_hash,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            email=raw["email"],
            password_hash=raw["password"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
