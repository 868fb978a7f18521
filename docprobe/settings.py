from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT_PATH = "DocProbeTestApp/TestDoc"
DEFAULT_WRITE_KEY = "TestKey"
DEFAULT_WRITE_VALUE = "TestValue"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not a number", name, raw)
        return None
    # Zero or negative means "no deadline".
    return value if value > 0 else None


@dataclass(frozen=True)
class Settings:
    # Client / app
    project_id: str
    data_dir: Path
    persist_to_disk: bool

    # Target
    document_path: str
    default_write_key: str
    default_write_value: str

    # Waiting
    wait_timeout_seconds: float | None

    # Logging
    log_level: str


def get_settings() -> Settings:
    project_id = os.getenv("DOCPROBE_PROJECT_ID", "docprobe-local")
    data_dir = Path(os.getenv("DOCPROBE_DATA_DIR", str(Path.home() / ".docprobe" / "data"))).expanduser()

    # A one-shot CLI only sees its own writes if they outlive the process.
    persist_to_disk = _env_bool("DOCPROBE_PERSIST_TO_DISK", True)

    document_path = os.getenv("DOCPROBE_DOCUMENT_PATH", DEFAULT_DOCUMENT_PATH)

    wait_timeout_seconds = _env_timeout("DOCPROBE_WAIT_TIMEOUT_SECONDS")

    log_level = os.getenv("DOCPROBE_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        project_id=project_id,
        data_dir=data_dir,
        persist_to_disk=persist_to_disk,
        document_path=document_path,
        default_write_key=DEFAULT_WRITE_KEY,
        default_write_value=DEFAULT_WRITE_VALUE,
        wait_timeout_seconds=wait_timeout_seconds,
        log_level=log_level,
    )
