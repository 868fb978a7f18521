from __future__ import annotations

from typing import Any, Mapping, Protocol

from .records import StoredDocument


class DocumentStore(Protocol):
    """
    Backing storage for the client: whole documents addressed by path segments.
    """

    def read(self, segments: tuple[str, ...]) -> StoredDocument | None:
        """Return the stored document, or None if it does not exist."""
        ...

    def write(self, segments: tuple[str, ...], fields: Mapping[str, Any]) -> StoredDocument:
        """Overwrite the full document and return what was stored."""
        ...
