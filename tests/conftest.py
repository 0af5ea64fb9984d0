# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from remindme.store import TaskStore


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point HOME and XDG_CONFIG_HOME at a tmp dir so no test touches the real
    ~/.reminders or ~/.config/remindme.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("REMINDME_FILE", raising=False)
    monkeypatch.delenv("REMINDME_LOG_LEVEL", raising=False)
    return home


@pytest.fixture()
def reminders_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Reminders file used by TaskStore.default() in CLI / MCP tests."""
    path = tmp_path / "reminders.txt"
    monkeypatch.setenv("REMINDME_FILE", str(path))
    return path


@pytest.fixture()
def store(tmp_path: Path) -> TaskStore:
    return TaskStore(tmp_path / ".reminders")
