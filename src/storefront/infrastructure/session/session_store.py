"""In-memory session tokens.

A session token stands for a ``Principal``: either a signed-in customer
or the admin.  Tokens are random, expire after a fixed TTL and can be
revoked on logout.
"""

from __future__ import annotations

import secrets
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from storefront.domain.exceptions import AuthError, ForbiddenError


@dataclass(frozen=True)
class Principal:
    customer_id: str | None = None
    is_admin: bool = False

    @staticmethod
    def customer(customer_id: str) -> Principal:
        return Principal(customer_id=customer_id)

    @staticmethod
    def admin() -> Principal:
        return Principal(is_admin=True)

    def require_customer(self) -> str:
        if self.customer_id is None:
            raise ForbiddenError("A customer session is required")
        return self.customer_id

    def require_admin(self) -> None:
        if not self.is_admin:
            raise ForbiddenError("Admin privileges are required")


class SessionStore:

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: dict[str, tuple[Principal, float]] = {}

    def issue(self, principal: Principal) -> str:
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[token] = (principal, self._clock() + self._ttl)
        return token

    def resolve(self, token: str | None) -> Principal:
        if not token:
            raise AuthError("Not signed in")
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                raise AuthError("Invalid or expired session")
            principal, expires_at = entry
            if self._clock() >= expires_at:
                del self._sessions[token]
                raise AuthError("Invalid or expired session")
            return principal

    def revoke(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)
