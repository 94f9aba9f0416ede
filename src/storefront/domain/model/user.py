"""User: a registered customer account."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError

MIN_PASSWORD_LENGTH = 6


@dataclass
class User:
    email: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def normalize_email(email: str) -> str:
    """E-mail addresses identify customers; compare them case-insensitively."""
    if not email or not email.strip():
        raise ValidationError("E-mail is required")
    cleaned = email.strip().lower()
    if "@" not in cleaned:
        raise ValidationError(f"Invalid e-mail address: {email!r}")
    return cleaned


def validate_password(password: str) -> None:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
