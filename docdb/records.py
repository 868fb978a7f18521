from __future__ import annotations

import time
from typing import Any, Mapping

from pydantic import BaseModel, Field


class StoredDocument(BaseModel):
    """
    On-disk form of one document:
      { "fields": { "<name>": <json value>, ... }, "create_time": 1.0, "update_time": 2.0 }
    """

    fields: dict[str, Any] = Field(default_factory=dict)
    create_time: float
    update_time: float

    @classmethod
    def from_disk_doc(cls, doc: Mapping[str, Any]) -> "StoredDocument":
        return cls.model_validate(doc)

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def overwrite(cls, previous: "StoredDocument | None", fields: Mapping[str, Any], now: float | None = None) -> "StoredDocument":
        """Replace every field; keep the original create_time when the document existed."""
        ts = time.time() if now is None else float(now)
        created = previous.create_time if previous is not None else ts
        return cls(fields=dict(fields), create_time=created, update_time=ts)
