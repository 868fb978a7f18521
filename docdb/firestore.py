from __future__ import annotations

import copy
import enum
import logging
import math
import re
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeVar

from .app import App
from .errors import Error, FirestoreError, FirestoreInitError
from .future import Future
from .paths import parse_document_path
from .records import StoredDocument

logger = logging.getLogger(__name__)

T = TypeVar("T")

_RESERVED_FIELD_RE = re.compile(r"^__.*__$")


class Source(enum.Enum):
    DEFAULT = "default"
    SERVER = "server"
    CACHE = "cache"


@dataclass(frozen=True)
class SnapshotMetadata:
    from_cache: bool


class DocumentSnapshot:
    def __init__(self, reference: "DocumentReference", stored: StoredDocument | None, *, from_cache: bool):
        self._reference = reference
        self._stored = stored
        self._metadata = SnapshotMetadata(from_cache=from_cache)

    @property
    def id(self) -> str:
        return self._reference.id

    @property
    def reference(self) -> "DocumentReference":
        return self._reference

    @property
    def exists(self) -> bool:
        return self._stored is not None

    @property
    def metadata(self) -> SnapshotMetadata:
        return self._metadata

    @property
    def create_time(self) -> float | None:
        return self._stored.create_time if self._stored is not None else None

    @property
    def update_time(self) -> float | None:
        return self._stored.update_time if self._stored is not None else None

    def get_data(self) -> dict[str, Any]:
        """Field map of the document; empty when it does not exist."""
        if self._stored is None:
            return {}
        return copy.deepcopy(self._stored.fields)

    def get(self, field: str, default: Any = None) -> Any:
        if self._stored is None:
            return default
        return copy.deepcopy(self._stored.fields.get(field, default))


class DocumentReference:
    def __init__(self, firestore: "Firestore", segments: tuple[str, ...]):
        self._firestore = firestore
        self._segments = segments

    @property
    def id(self) -> str:
        return self._segments[-1]

    @property
    def path(self) -> str:
        return "/".join(self._segments)

    @property
    def parent_path(self) -> str:
        return "/".join(self._segments[:-1])

    def get(self, source: Source = Source.DEFAULT) -> Future[DocumentSnapshot]:
        return self._firestore._submit(f"get {self.path}", lambda: self._firestore._read(self, source))

    def set(self, data: Mapping[str, Any]) -> Future[None]:
        """Overwrite the whole document with ``data``."""
        return self._firestore._submit(f"set {self.path}", lambda: self._firestore._write(self, data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentReference):
            return NotImplemented
        return self._firestore is other._firestore and self._segments == other._segments

    def __hash__(self) -> int:
        return hash((id(self._firestore), self._segments))

    def __repr__(self) -> str:
        return f"DocumentReference({self.path!r})"


class Firestore:
    """
    Client bound to one App.

    Every call runs on a single client-owned worker thread and returns a
    Future that the worker completes.
    """

    _instances_lock = threading.Lock()
    _instances: dict[App, "Firestore"] = {}

    def __init__(self, app: App):
        self._app = app
        self._lock = threading.Lock()
        self._terminated = False
        self._cache: dict[tuple[str, ...], StoredDocument | None] = {}
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="docdb-worker")

    @classmethod
    def get_instance(cls, app: App | None) -> "Firestore":
        if app is None:
            raise FirestoreInitError("an App is required")
        if app.is_deleted:
            raise FirestoreInitError(f"app {app.name} has been deleted")
        with cls._instances_lock:
            instance = cls._instances.get(app)
            if instance is None:
                instance = cls(app)
                cls._instances[app] = instance
                app.add_delete_hook(instance.terminate)
            return instance

    @property
    def app(self) -> App:
        return self._app

    def document(self, path: str) -> DocumentReference:
        return DocumentReference(self, parse_document_path(path))

    def terminate(self) -> None:
        """Drain queued calls and stop the worker. Later calls fail with FAILED_PRECONDITION."""
        with self._lock:
            if self._terminated:
                return
            self._terminated = True
        with Firestore._instances_lock:
            if Firestore._instances.get(self._app) is self:
                del Firestore._instances[self._app]
        self._executor.shutdown(wait=True)

    def _submit(self, name: str, fn: Callable[[], T]) -> Future[T]:
        future: Future[T] = Future()
        with self._lock:
            if self._terminated:
                return Future.failed(Error.FAILED_PRECONDITION, "The client has already been terminated.")
            try:
                self._executor.submit(self._run, name, future, fn)
            except RuntimeError:
                return Future.failed(Error.FAILED_PRECONDITION, "The client has already been terminated.")
        logger.debug("submitted %s", name)
        return future

    def _run(self, name: str, future: Future[T], fn: Callable[[], T]) -> None:
        try:
            result = fn()
        except FirestoreError as e:
            logger.debug("%s failed: %s %s", name, e.code.name, e.message)
            future.set_error(e.code, e.message)
        except Exception as e:
            logger.exception("unexpected error serving %s", name)
            future.set_error(Error.INTERNAL, f"{type(e).__name__}: {e}")
        else:
            future.set_result(result)

    def _read(self, ref: DocumentReference, source: Source) -> DocumentSnapshot:
        key = ref._segments
        if source is Source.CACHE:
            with self._lock:
                if key not in self._cache:
                    raise FirestoreError(
                        Error.UNAVAILABLE,
                        "Failed to get document from cache. "
                        "(However, this document may exist on the server. "
                        "Run again without setting source to CACHE to attempt "
                        "to retrieve the document from the server.)",
                    )
                stored = self._cache[key]
            return DocumentSnapshot(ref, stored, from_cache=True)

        stored = self._app.store.read(key)
        with self._lock:
            self._cache[key] = stored
        return DocumentSnapshot(ref, stored, from_cache=False)

    def _write(self, ref: DocumentReference, data: Mapping[str, Any]) -> None:
        fields = _validated_fields(data)
        stored = self._app.store.write(ref._segments, fields)
        with self._lock:
            self._cache[ref._segments] = stored


def _validated_fields(data: Any) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        raise FirestoreError(Error.INVALID_ARGUMENT, f"document data must be a mapping, got {type(data).__name__}")
    fields: dict[str, Any] = {}
    for name, value in data.items():
        if not isinstance(name, str) or not name:
            raise FirestoreError(Error.INVALID_ARGUMENT, f"invalid field name: {name!r}")
        if _RESERVED_FIELD_RE.match(name):
            raise FirestoreError(Error.INVALID_ARGUMENT, f"field name {name!r} is reserved")
        _check_value(name, value)
        fields[name] = copy.deepcopy(value)
    return fields


def _check_value(field: str, value: Any) -> None:
    if value is None or isinstance(value, (str, bool, int)):
        return
    if isinstance(value, float):
        if not math.isfinite(value):
            raise FirestoreError(Error.INVALID_ARGUMENT, f"field {field!r}: non-finite number {value!r}")
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            _check_value(field, item)
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise FirestoreError(Error.INVALID_ARGUMENT, f"field {field!r}: map keys must be strings")
            _check_value(field, item)
        return
    raise FirestoreError(Error.INVALID_ARGUMENT, f"field {field!r}: unsupported value type {type(value).__name__}")
