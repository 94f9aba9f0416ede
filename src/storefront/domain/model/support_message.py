"""SupportMessage: a customer question and, eventually, the admin's answer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ConflictError, ValidationError


@dataclass
class SupportMessage:
    id: str
    sender: str
    message: str
    reply: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    replied_at: datetime | None = None

    @staticmethod
    def create(message_id: str, sender: str, message: str) -> SupportMessage:
        if not sender or not sender.strip():
            raise ValidationError("Message sender is required")
        if not message or not message.strip():
            raise ValidationError("Message text is required")
        return SupportMessage(id=message_id, sender=sender.strip(), message=message.strip())

    @property
    def is_answered(self) -> bool:
        return self.reply is not None

    def answer(self, reply: str) -> None:
        if self.is_answered:
            raise ConflictError(f"Message {self.id} has already been answered")
        if not reply or not reply.strip():
            raise ValidationError("Reply text is required")
        self.reply = reply.strip()
        self.replied_at = datetime.now(timezone.utc)
