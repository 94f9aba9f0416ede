"""Abstract repository for registered users."""

from __future__ import annotations

from abc import abstractmethod

from storefront.domain.model.user import User
from storefront.domain.repository.base import LockableRepository


class UserRepository(LockableRepository):

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the user with this (normalised) e-mail, or None."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every registered user."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""
