"""One JSON file holding one collection, with a single writer at a time.

Every collection is read and rewritten as a whole.  To keep concurrent
read-modify-write sequences from overwriting each other, all access to a
given file goes through one re-entrant lock shared by every
``JsonCollection`` pointing at that file in this process.  Writes land in
a temporary sibling first and are moved into place with ``os.replace``.

A missing file is an empty collection.  A file that exists but cannot be
parsed is NOT treated as empty: that would silently wipe the data on the
next write.  It raises ``StorageError`` instead.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        lock = _locks.get(path)
        if lock is None:
            lock = _locks[path] = threading.RLock()
        return lock


class StorageError(Exception):
    """A collection file is unreadable, corrupt, or cannot be written."""


class JsonCollection:

    def __init__(self, file_path: Path, default_factory: type = list) -> None:
        self._file_path = file_path.resolve()
        self._default_factory = default_factory
        self._lock = _lock_for(self._file_path)

    @property
    def path(self) -> Path:
        return self._file_path

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def read(self) -> Any:
        """Return the decoded collection (a fresh copy each call)."""
        with self._lock:
            return self._load()

    @contextmanager
    def mutate(self) -> Iterator[Any]:
        """Yield the decoded collection and persist it when the block exits.

        Nothing is written if the block raises.
        """
        with self._lock:
            data = self._load()
            yield data
            self._persist(data)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> Any:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self._default_factory()
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

        if not text.strip():
            return self._default_factory()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.error("Corrupt collection file %s: %s", self._file_path, exc)
            raise StorageError(f"Corrupt JSON in {self._file_path}: {exc}") from exc

        if not isinstance(data, self._default_factory):
            logger.error(
                "Collection file %s holds a %s, expected a %s",
                self._file_path, type(data).__name__, self._default_factory.__name__,
            )
            raise StorageError(
                f"Unexpected top-level {type(data).__name__} in {self._file_path}"
            )
        return data

    def _persist(self, data: Any) -> None:
        payload = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc
