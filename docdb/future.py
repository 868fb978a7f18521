from __future__ import annotations

import enum
import logging
import threading
from typing import Callable, Generic, TypeVar

from .errors import Error

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FutureStatus(enum.Enum):
    COMPLETE = "complete"
    PENDING = "pending"


class Future(Generic[T]):
    """
    One-shot handle for an asynchronous client call.

    - Moves from PENDING to COMPLETE exactly once.
    - Holds a single completion callback; registering again replaces it.
    - A callback registered after completion runs immediately on the
      registering thread. Otherwise it runs on the completing thread.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._status = FutureStatus.PENDING
        self._error = Error.OK
        self._error_message = ""
        self._result: T | None = None
        self._callback: Callable[[Future[T]], None] | None = None

    @classmethod
    def failed(cls, code: Error, message: str) -> "Future[T]":
        future: Future[T] = cls()
        future.set_error(code, message)
        return future

    @property
    def status(self) -> FutureStatus:
        with self._lock:
            return self._status

    @property
    def error(self) -> int:
        with self._lock:
            return int(self._error)

    @property
    def error_message(self) -> str:
        with self._lock:
            return self._error_message

    @property
    def result(self) -> T | None:
        with self._lock:
            if self._status is FutureStatus.PENDING:
                raise RuntimeError("result accessed before the future completed")
            return self._result

    def on_completion(self, callback: Callable[[Future[T]], None]) -> None:
        with self._lock:
            if self._status is FutureStatus.PENDING:
                self._callback = callback
                return
        callback(self)

    def set_result(self, result: T | None = None) -> None:
        self._complete(Error.OK, "", result)

    def set_error(self, code: Error | int, message: str) -> None:
        if int(code) == Error.OK:
            raise ValueError("set_error requires a non-OK code")
        self._complete(code, message, None)

    def _complete(self, code: Error | int, message: str, result: T | None) -> None:
        with self._lock:
            if self._status is not FutureStatus.PENDING:
                raise RuntimeError("future already completed")
            try:
                self._error = Error(code)
            except ValueError:
                self._error = code  # type: ignore[assignment]
            self._error_message = message
            self._result = result
            self._status = FutureStatus.COMPLETE
            callback, self._callback = self._callback, None

        if callback is not None:
            try:
                callback(self)
            except Exception:
                logger.exception("completion callback raised")
