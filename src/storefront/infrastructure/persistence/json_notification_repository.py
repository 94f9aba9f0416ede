"""JSON-file-backed, append-only implementation of NotificationRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path

from storefront.domain.model.notification import Notification
from storefront.domain.repository.notification_repository import NotificationRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonNotificationRepository(NotificationRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def append(self, notification: Notification) -> None:
        with self._collection.mutate() as records:
            records.append(
                {
                    "id": notification.id,
                    "recipient": notification.recipient,
                    "message": notification.message,
                    "created_at": notification.created_at.isoformat(),
                }
            )

    def list_for_recipient(self, recipient: str) -> list[Notification]:
        wanted = recipient.strip().lower()
        return [n for n in self.list_all() if n.recipient.lower() == wanted]

    def list_all(self) -> list[Notification]:
        return [
            Notification(
                id=raw["id"],
                recipient=raw["recipient"],
                message=raw["message"],
                created_at=datetime.fromisoformat(raw["created_at"]),
            )
            for raw in self._collection.read()
        ]
