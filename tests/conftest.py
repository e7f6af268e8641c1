# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from .fakes import FakeRunner


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with resolve_options/import_tasks.

    We intentionally use a SimpleNamespace rather than the env-backed
    Settings, to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        tasks_dir="tasks",
        extensions=(".py",),
        attribute="task",
        log_level="WARNING",
        debug=False,
    )


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def tasks_dir(tmp_path: Path) -> Path:
    """tmp_path/tasks with a js-style layout: a.js, b.ts, c.js and a sub-directory d/."""
    d = tmp_path / "tasks"
    d.mkdir()
    (d / "a.js").write_text("a", "utf-8")
    (d / "b.ts").write_text("b", "utf-8")
    (d / "c.js").write_text("c", "utf-8")
    (d / "d").mkdir()
    return d

