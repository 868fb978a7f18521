from __future__ import annotations

import logging
import os
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for `import docdb` / `import docprobe` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point the CLI at a temp data directory so tests never touch ~/.docprobe.

    Also runs from tmp_path so no stray local.env is picked up.
    """
    for name in list(os.environ):
        if name.startswith("DOCPROBE_"):
            monkeypatch.delenv(name)
    data = tmp_path / "data"
    monkeypatch.setenv("DOCPROBE_DATA_DIR", str(data))
    monkeypatch.chdir(tmp_path)
    return data


@pytest.fixture
def disk_firestore(tmp_path: Path):
    from docdb import App, AppOptions, Firestore

    app = App.create(AppOptions(project_id="test-project", data_dir=tmp_path / "db"))
    try:
        yield Firestore.get_instance(app)
    finally:
        app.delete()


@pytest.fixture
def memory_firestore():
    from docdb import App, AppOptions, Firestore

    app = App.create(AppOptions(project_id="test-project", persist_to_disk=False))
    try:
        yield Firestore.get_instance(app)
    finally:
        app.delete()


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    """
    cli.main() installs a stdout handler on the root logger; remove it so the
    next test does not write into a stale capture stream.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
