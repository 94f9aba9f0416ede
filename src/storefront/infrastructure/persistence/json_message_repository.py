"""JSON-file-backed implementation of MessageRepository."""

from __future__ import annotations

import uuid
from contextlib import AbstractContextManager
from datetime import datetime
from pathlib import Path

from storefront.domain.model.support_message import SupportMessage
from storefront.domain.repository.message_repository import MessageRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonMessageRepository(MessageRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    def locked(self) -> AbstractContextManager:
        return self._collection.locked()

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def list_all(self) -> list[SupportMessage]:
        return [self._to_domain(raw) for raw in self._collection.read()]

    def save(self, message: SupportMessage) -> None:
        with self._collection.mutate() as records:
            for i, raw in enumerate(records):
                if raw["id"] == message.id:
                    records[i] = self._to_raw(message)
                    break
            else:
                records.append(self._to_raw(message))

    @staticmethod
    def _to_raw(message: SupportMessage) -> dict:
        return {
            "id": message.id,
            "sender": message.sender,
            "message": message.message,
            "reply": message.reply,
            "created_at": message.created_at.isoformat(),
            "replied_at": message.replied_at.isoformat() if message.replied_at else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> SupportMessage:
        replied_at = raw.get("replied_at")
        return SupportMessage(
            id=raw["id"],
            sender=raw["sender"],
            message=raw["message"],
            reply=raw.get("reply"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            replied_at=datetime.fromisoformat(replied_at) if replied_at else None,
        )
