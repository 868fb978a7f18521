from __future__ import annotations

from enum import IntEnum


class Error(IntEnum):
    """Canonical status codes carried by every completed Future."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class DocDbError(Exception):
    """Base class for errors raised synchronously by the client."""


class AppInitError(DocDbError):
    pass


class FirestoreInitError(DocDbError):
    pass


class InvalidDocumentPathError(DocDbError, ValueError):
    pass


class FirestoreError(DocDbError):
    """
    Raised on the worker thread while serving a call.

    Never reaches the caller directly: the worker turns it into the
    terminal status of the call's Future.
    """

    def __init__(self, code: Error, message: str):
        super().__init__(message)
        self.code = Error(code)
        self.message = message
