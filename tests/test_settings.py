from __future__ import annotations

from pathlib import Path

import pytest

from docprobe.settings import DEFAULT_DOCUMENT_PATH, get_settings


def test_defaults(sandbox_env):
    settings = get_settings()
    assert settings.data_dir == sandbox_env
    assert settings.project_id == "docprobe-local"
    assert settings.persist_to_disk is True
    assert settings.document_path == DEFAULT_DOCUMENT_PATH
    assert settings.default_write_key == "TestKey"
    assert settings.default_write_value == "TestValue"
    assert settings.wait_timeout_seconds is None
    assert settings.log_level == "INFO"


def test_default_data_dir_is_under_home(sandbox_env, monkeypatch):
    monkeypatch.delenv("DOCPROBE_DATA_DIR")
    assert get_settings().data_dir == Path.home() / ".docprobe" / "data"


@pytest.mark.parametrize("raw, expected", [("0", False), ("no", False), ("1", True), ("YES", True), ("on", True)])
def test_persist_flag(sandbox_env, monkeypatch, raw, expected):
    monkeypatch.setenv("DOCPROBE_PERSIST_TO_DISK", raw)
    assert get_settings().persist_to_disk is expected


@pytest.mark.parametrize("raw, expected", [("2.5", 2.5), ("10", 10.0), ("0", None), ("-1", None), ("soon", None), ("", None)])
def test_wait_timeout(sandbox_env, monkeypatch, raw, expected):
    monkeypatch.setenv("DOCPROBE_WAIT_TIMEOUT_SECONDS", raw)
    assert get_settings().wait_timeout_seconds == expected


def test_overrides(sandbox_env, monkeypatch):
    monkeypatch.setenv("DOCPROBE_PROJECT_ID", "proj")
    monkeypatch.setenv("DOCPROBE_DOCUMENT_PATH", "a/b")
    monkeypatch.setenv("DOCPROBE_LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.project_id == "proj"
    assert settings.document_path == "a/b"
    assert settings.log_level == "DEBUG"
