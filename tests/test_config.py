# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from taskkeeper.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "LOG_TO_FILE", "DATA_DIR"):
        monkeypatch.delenv(f"TASKKEEPER_{name}", raising=False)

    s = Settings.from_env()
    assert s.app_name == "taskkeeper"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.data_dir == Path(".local/taskkeeper")


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKKEEPER_APP_NAME", "todo")
    monkeypatch.setenv("TASKKEEPER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKKEEPER_LOG_TO_FILE", "off")
    monkeypatch.setenv("TASKKEEPER_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.data_dir == tmp_path
