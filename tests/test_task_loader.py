# tests/test_task_loader.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from task_importer.core.options import resolve_options
from task_importer.errors import InvalidTaskError, MissingTaskError
from task_importer.tasks.task_loader import as_loaded_task, load_task_module, module_name_for
from task_importer.tasks.task_models import TaskCallable, TaskList

from .fakes import write_task


@pytest.mark.parametrize("value", [["a", "b"], ("a",), []])
def test_sequences_become_task_lists(value) -> None:
    loaded = as_loaded_task(value, source="x")
    assert isinstance(loaded, TaskList)
    assert loaded.items is value


def test_callables_become_task_callables() -> None:
    def fn(runner):
        return None

    loaded = as_loaded_task(fn, source="x")
    assert isinstance(loaded, TaskCallable)
    assert loaded.fn is fn


@pytest.mark.parametrize("value", ["build", b"build", 3, None, {"a": 1}])
def test_other_values_fail_the_shape_check(value) -> None:
    with pytest.raises(InvalidTaskError) as ei:
        as_loaded_task(value, source="tasks/x.py")
    assert "tasks/x.py" in str(ei.value)
    assert isinstance(ei.value, TypeError)


def test_loads_callable_from_python_file(tmp_path: Path, settings) -> None:
    path = write_task(
        tmp_path,
        "build.py",
        "def task(runner, done):\n    return ('built', runner, done)\n",
    )
    loaded = load_task_module(path, resolve_options(None, defaults=settings))
    assert isinstance(loaded, TaskCallable)
    assert loaded.fn("r", "d") == ("built", "r", "d")


def test_loads_list_and_custom_attribute(tmp_path: Path, settings) -> None:
    path = write_task(tmp_path, "default.py", "TASKS = ['clean', 'build']\n")
    loaded = load_task_module(path, resolve_options({"attribute": "TASKS"}, defaults=settings))
    assert isinstance(loaded, TaskList)
    assert loaded.items == ["clean", "build"]


def test_any_extension_is_loaded_as_python(tmp_path: Path, settings) -> None:
    path = write_task(tmp_path, "lint.task", "task = ['flake', 'mypy']\n")
    loaded = load_task_module(path, resolve_options(None, defaults=settings))
    assert isinstance(loaded, TaskList)


def test_module_is_executed_once_per_path(tmp_path: Path, settings) -> None:
    path = write_task(
        tmp_path,
        "count.py",
        "import itertools\ncounter = itertools.count()\nnext(counter)\ntask = ['x']\n",
    )
    opts = resolve_options(None, defaults=settings)
    first = load_task_module(path, opts)
    second = load_task_module(path, opts)
    assert isinstance(first, TaskList)
    assert first.items is second.items  # type: ignore[union-attr]


def test_missing_attribute(tmp_path: Path, settings) -> None:
    path = write_task(tmp_path, "empty.py", "x = 1\n")
    with pytest.raises(MissingTaskError) as ei:
        load_task_module(path, resolve_options(None, defaults=settings))
    assert ei.value.attribute == "task"
    assert isinstance(ei.value, AttributeError)


def test_errors_during_import_propagate_and_leave_no_module(tmp_path: Path, settings) -> None:
    path = write_task(tmp_path, "boom.py", "raise RuntimeError('boom at import')\n")
    with pytest.raises(RuntimeError, match="boom at import"):
        load_task_module(path, resolve_options(None, defaults=settings))
    assert module_name_for(path) not in sys.modules


def test_syntax_errors_propagate(tmp_path: Path, settings) -> None:
    path = write_task(tmp_path, "bad.py", "def task(:\n")
    with pytest.raises(SyntaxError):
        load_task_module(path, resolve_options(None, defaults=settings))


def test_vanished_file(tmp_path: Path, settings) -> None:
    with pytest.raises(FileNotFoundError):
        load_task_module(tmp_path / "gone.py", resolve_options(None, defaults=settings))


def test_module_names_are_distinct_per_path(tmp_path: Path) -> None:
    a = module_name_for(tmp_path / "one" / "build.py")
    b = module_name_for(tmp_path / "two" / "build.py")
    assert a != b
    assert a.startswith("task_importer.loaded.build_")
    assert module_name_for(tmp_path / "one" / "build.py") == a
