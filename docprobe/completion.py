from __future__ import annotations

import threading
from typing import Any

from docdb import Future, FutureStatus


class AwaitableCompletion:
    """
    Lets a sequential caller block until a docdb Future completes.

    The completion callback may run on the client's worker thread, or
    immediately during construction if the future is already complete. The
    wait re-checks the future's status under the condition lock, so a
    callback that fires before ``wait`` starts cannot be missed.

    Each instance owns its condition; unrelated pending calls never wake
    each other.
    """

    def __init__(self, future: Future[Any]):
        self._future = future
        self._condition = threading.Condition()
        future.on_completion(self._on_completion)

    def _on_completion(self, _future: Future[Any]) -> None:
        with self._condition:
            self._condition.notify_all()

    def _is_complete(self) -> bool:
        return self._future.status is not FutureStatus.PENDING

    def wait(self, timeout: float | None = None) -> bool:
        """
        Block until the future leaves PENDING. Returns False only if
        ``timeout`` seconds pass first; with no timeout it waits indefinitely.
        """
        with self._condition:
            return self._condition.wait_for(self._is_complete, timeout)
