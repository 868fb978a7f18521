from __future__ import annotations

from .app import App, AppOptions
from .errors import AppInitError, DocDbError, Error, FirestoreError, FirestoreInitError, InvalidDocumentPathError
from .firestore import DocumentReference, DocumentSnapshot, Firestore, SnapshotMetadata, Source
from .future import Future, FutureStatus

__all__ = [
    "App",
    "AppOptions",
    "AppInitError",
    "DocDbError",
    "Error",
    "FirestoreError",
    "FirestoreInitError",
    "InvalidDocumentPathError",
    "DocumentReference",
    "DocumentSnapshot",
    "Firestore",
    "SnapshotMetadata",
    "Source",
    "Future",
    "FutureStatus",
]
