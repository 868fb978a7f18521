from __future__ import annotations

import re
from pathlib import Path

from .errors import InvalidDocumentPathError

_RESERVED_ID_RE = re.compile(r"^__.*__$")


def parse_document_path(path: str) -> tuple[str, ...]:
    """
    Split "collection/doc[/collection/doc...]" into segments.

    A document path always has an even number of non-empty segments.
    """
    if not isinstance(path, str) or not path.strip("/"):
        raise InvalidDocumentPathError(f"invalid document path: {path!r}")

    segments = tuple(path.strip("/").split("/"))
    for segment in segments:
        if not segment:
            raise InvalidDocumentPathError(f"document path {path!r} contains an empty segment")
        if segment in (".", ".."):
            raise InvalidDocumentPathError(f"document path {path!r} contains {segment!r}")
        if _RESERVED_ID_RE.match(segment):
            raise InvalidDocumentPathError(f"document path {path!r} uses reserved id {segment!r}")
    if len(segments) % 2 != 0:
        raise InvalidDocumentPathError(
            f"invalid document path {path!r}: must have an even number of segments, got {len(segments)}"
        )
    return segments


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def document_file(root: Path, segments: tuple[str, ...]) -> Path:
    # users/alice/posts/p1 -> <root>/users/alice/posts/p1.json
    return root.joinpath(*segments[:-1], f"{segments[-1]}.json")
