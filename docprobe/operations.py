from __future__ import annotations

import logging
from typing import Any, Mapping

from docdb import DocumentReference, DocumentSnapshot, Error, Future, Source

from .completion import AwaitableCompletion
from .status import error_name

logger = logging.getLogger(__name__)


def await_completion(future: Future[Any], name: str, *, timeout: float | None = None) -> bool:
    """
    Block until ``future`` completes and log how it ended.

    Returns True on OK. A failed call or an expired deadline is logged and
    reported as False; neither raises.
    """
    logger.info("%s start", name)
    completion = AwaitableCompletion(future)
    if not completion.wait(timeout):
        logger.warning(
            "%s FAILED: %s no completion after %s seconds",
            name,
            error_name(Error.DEADLINE_EXCEEDED),
            timeout,
        )
        return False

    if future.error != Error.OK:
        logger.warning("%s FAILED: %s %s", name, error_name(future.error), future.error_message)
        return False

    logger.info("%s done", name)
    return True


def do_read(doc: DocumentReference, *, timeout: float | None = None) -> bool:
    logger.info("*** DoRead() doc=%s", doc.path)
    future = doc.get(Source.SERVER)
    if not await_completion(future, "DocumentReference.get()", timeout=timeout):
        return False

    snapshot: DocumentSnapshot | None = future.result
    data = snapshot.get_data() if snapshot is not None else {}
    logger.info("Document # key/value pairs: %d", len(data))
    for index, (name, value) in enumerate(sorted(data.items()), start=1):
        logger.info("Entry #%d: %s=%r", index, name, value)
    return True


def do_write(doc: DocumentReference, payload: Mapping[str, Any], *, timeout: float | None = None) -> bool:
    logger.info("*** DoWrite() doc=%s data=%s", doc.path, dict(payload))
    future = doc.set(payload)
    return await_completion(future, "DocumentReference.set()", timeout=timeout)
