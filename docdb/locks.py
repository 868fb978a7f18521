from __future__ import annotations

import threading


class DocumentLockRegistry:
    """
    Hands out one stable lock per document path so writes to unrelated
    documents never contend.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, segments: tuple[str, ...]) -> threading.Lock:
        key = "/".join(segments)
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock


GLOBAL_DOCUMENT_LOCKS = DocumentLockRegistry()
