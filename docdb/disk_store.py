from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from .errors import Error, FirestoreError
from .interfaces import DocumentStore
from .json_store import atomic_write_json, read_json
from .locks import GLOBAL_DOCUMENT_LOCKS
from .paths import document_file
from .records import StoredDocument

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(DocumentStore):
    """
    Stores each document as its own JSON file under a root directory.

    - Missing files read as None.
    - Corrupt files surface as DATA_LOSS instead of silently reading empty.
    - Writes are atomic and serialized per document path.
    """

    def __init__(self, root: Path):
        self._root = root

    def read(self, segments: tuple[str, ...]) -> StoredDocument | None:
        lock = GLOBAL_DOCUMENT_LOCKS.lock_for(segments)
        with lock:
            return self._read_unlocked(segments)

    def write(self, segments: tuple[str, ...], fields: Mapping[str, Any]) -> StoredDocument:
        lock = GLOBAL_DOCUMENT_LOCKS.lock_for(segments)
        with lock:
            previous = self._read_unlocked(segments)
            doc = StoredDocument.overwrite(previous, fields)
            path = document_file(self._root, segments)
            logger.debug("writing %s", path)
            try:
                atomic_write_json(path, doc.to_disk_doc())
            except PermissionError as e:
                raise FirestoreError(Error.PERMISSION_DENIED, f"cannot write {path}: {e}") from e
            except OSError as e:
                raise FirestoreError(Error.UNAVAILABLE, f"cannot write {path}: {e}") from e
            return doc

    def _read_unlocked(self, segments: tuple[str, ...]) -> StoredDocument | None:
        path = document_file(self._root, segments)
        try:
            raw = read_json(path)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise FirestoreError(Error.DATA_LOSS, f"corrupt document file {path}: {e}") from e
        except PermissionError as e:
            raise FirestoreError(Error.PERMISSION_DENIED, f"cannot read {path}: {e}") from e
        except OSError as e:
            raise FirestoreError(Error.UNAVAILABLE, f"cannot read {path}: {e}") from e

        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise FirestoreError(Error.DATA_LOSS, f"corrupt document file {path}: expected an object")
        try:
            return StoredDocument.from_disk_doc(raw)
        except ValidationError as e:
            raise FirestoreError(Error.DATA_LOSS, f"corrupt document file {path}: {e}") from e
