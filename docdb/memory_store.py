from __future__ import annotations

import copy
import threading
from typing import Any, Mapping

from .interfaces import DocumentStore
from .records import StoredDocument


class MemoryDocumentStore(DocumentStore):
    """Process-local store; contents vanish with the process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._docs: dict[tuple[str, ...], StoredDocument] = {}

    def read(self, segments: tuple[str, ...]) -> StoredDocument | None:
        with self._lock:
            doc = self._docs.get(segments)
            return doc.model_copy(deep=True) if doc is not None else None

    def write(self, segments: tuple[str, ...], fields: Mapping[str, Any]) -> StoredDocument:
        with self._lock:
            doc = StoredDocument.overwrite(self._docs.get(segments), copy.deepcopy(dict(fields)))
            self._docs[segments] = doc
            return doc.model_copy(deep=True)
