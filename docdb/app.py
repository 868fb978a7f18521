from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .disk_store import DiskJsonDocumentStore
from .errors import AppInitError
from .interfaces import DocumentStore
from .memory_store import MemoryDocumentStore
from .paths import ensure_dir

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "[DEFAULT]"


class AppOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_id: str = Field(min_length=1)
    data_dir: Path | None = None
    persist_to_disk: bool = True


class App:
    """
    Application handle. Owns the backing store every client bound to it uses.
    """

    def __init__(self, name: str, options: AppOptions, store: DocumentStore):
        self._name = name
        self._options = options
        self._store = store
        self._lock = threading.Lock()
        self._deleted = False
        self._on_delete: list[Callable[[], None]] = []

    @classmethod
    def create(cls, options: AppOptions | Mapping[str, Any], name: str = DEFAULT_APP_NAME) -> "App":
        try:
            opts = options if isinstance(options, AppOptions) else AppOptions.model_validate(options)
        except ValidationError as e:
            raise AppInitError(f"invalid app options: {e}") from e

        if not opts.persist_to_disk:
            logger.debug("app %s: using in-memory store", name)
            return cls(name, opts, MemoryDocumentStore())

        if opts.data_dir is None:
            raise AppInitError("data_dir is required when persist_to_disk is enabled")
        data_dir = opts.data_dir.expanduser()
        if data_dir.exists() and not data_dir.is_dir():
            raise AppInitError(f"data_dir {data_dir} is not a directory")
        try:
            ensure_dir(data_dir)
        except OSError as e:
            raise AppInitError(f"cannot create data_dir {data_dir}: {e}") from e

        logger.debug("app %s: using disk store at %s", name, data_dir)
        return cls(name, opts, DiskJsonDocumentStore(data_dir))

    @property
    def name(self) -> str:
        return self._name

    @property
    def options(self) -> AppOptions:
        return self._options

    @property
    def store(self) -> DocumentStore:
        return self._store

    @property
    def is_deleted(self) -> bool:
        with self._lock:
            return self._deleted

    def add_delete_hook(self, hook: Callable[[], None]) -> None:
        with self._lock:
            self._on_delete.append(hook)

    def delete(self) -> None:
        """Release the app and every client bound to it. Idempotent."""
        with self._lock:
            if self._deleted:
                return
            self._deleted = True
            hooks, self._on_delete = self._on_delete, []
        for hook in hooks:
            hook()
