"""Abstract append-only log of notifications."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.notification import Notification


class NotificationRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh, unique notification ID."""

    @abstractmethod
    def append(self, notification: Notification) -> None:
        """Add a notification to the log. There is no update or delete."""

    @abstractmethod
    def list_for_recipient(self, recipient: str) -> list[Notification]:
        """Return every notification addressed to *recipient*, oldest first."""

    @abstractmethod
    def list_all(self) -> list[Notification]:
        """Return the whole log, oldest first."""
