"""Abstract repository for support messages."""

from __future__ import annotations

from abc import abstractmethod

from storefront.domain.model.support_message import SupportMessage
from storefront.domain.repository.base import LockableRepository


class MessageRepository(LockableRepository):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh, unique message ID."""

    @abstractmethod
    def list_all(self) -> list[SupportMessage]:
        """Return every message, oldest first."""

    @abstractmethod
    def save(self, message: SupportMessage) -> None:
        """Persist a new or updated message."""
