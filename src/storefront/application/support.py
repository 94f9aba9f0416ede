"""Application services: customer support messages."""

from __future__ import annotations

import logging

from storefront.application.dto import SupportMessageDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.support_message import SupportMessage
from storefront.domain.repository.message_repository import MessageRepository

logger = logging.getLogger(__name__)


class SendSupportMessageHandler:

    def __init__(self, message_repo: MessageRepository) -> None:
        self._message_repo = message_repo

    def handle(self, sender: str, message: str) -> SupportMessageDTO:
        msg = SupportMessage.create(
            message_id=self._message_repo.next_id(),
            sender=sender,
            message=message,
        )
        self._message_repo.save(msg)
        logger.info("Support message %s received from %s", msg.id, msg.sender)
        return SupportMessageDTO.from_domain(msg)


class ReplyToMessageHandler:

    def __init__(self, message_repo: MessageRepository) -> None:
        self._message_repo = message_repo

    def handle(self, sender: str, reply: str) -> SupportMessageDTO:
        """Answer the oldest unanswered message from *sender*."""
        with self._message_repo.locked():
            pending = [
                m for m in self._message_repo.list_all()
                if m.sender == sender and not m.is_answered
            ]
            if not pending:
                raise EntityNotFoundError(f"No unanswered message from {sender}")
            msg = min(pending, key=lambda m: m.created_at)
            msg.answer(reply)
            self._message_repo.save(msg)
        return SupportMessageDTO.from_domain(msg)


class ListMessagesHandler:

    def __init__(self, message_repo: MessageRepository) -> None:
        self._message_repo = message_repo

    def handle(self, sender: str | None = None) -> list[SupportMessageDTO]:
        messages = self._message_repo.list_all()
        if sender is not None:
            messages = [m for m in messages if m.sender == sender]
        return [SupportMessageDTO.from_domain(m) for m in messages]
