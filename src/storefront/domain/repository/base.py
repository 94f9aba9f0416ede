"""Shared base for repositories whose records are read-modified-written.

Concrete repositories serialise writers per collection; ``locked()``
lets an application handler stretch that critical section over a whole
load → transition → save sequence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class LockableRepository(ABC):

    @abstractmethod
    def locked(self) -> AbstractContextManager:
        """Hold the collection's writer lock for the duration of a ``with`` block.

        The lock is re-entrant, so ``save()`` may be called inside the block.
        """
