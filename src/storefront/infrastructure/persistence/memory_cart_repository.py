"""In-memory, per-process cart store with sliding expiry.

Carts are session state: they survive between requests of the same
customer but are forgotten after ``ttl_seconds`` without activity and
never reach the disk.
"""

from __future__ import annotations

import copy
import threading
import time
from collections.abc import Callable
from contextlib import AbstractContextManager

from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository


class InMemoryCartRepository(CartRepository):

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = threading.RLock()
        self._carts: dict[str, tuple[Cart, float]] = {}

    def locked(self) -> AbstractContextManager:
        return self._lock

    def get(self, customer_id: str) -> Cart:
        with self._lock:
            self._evict_expired()
            entry = self._carts.get(customer_id)
            if entry is None:
                return Cart(customer_id=customer_id)
            return copy.deepcopy(entry[0])

    def save(self, cart: Cart) -> None:
        with self._lock:
            if cart.is_empty:
                self._carts.pop(cart.customer_id, None)
            else:
                self._carts[cart.customer_id] = (copy.deepcopy(cart), self._clock())

    def _evict_expired(self) -> None:
        now = self._clock()
        stale = [cid for cid, (_, touched) in self._carts.items() if now - touched > self._ttl]
        for cid in stale:
            del self._carts[cid]
