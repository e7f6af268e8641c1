# src/task_importer/tasks/task_models.py

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class FileEntry:
    """One directory entry as seen by the scanner (built per entry, then dropped)."""

    path: str  # absolute
    filename: str
    extension: str  # "" when the name has no suffix
    is_file: bool


@dataclass(slots=True, frozen=True)
class TaskList:
    """
    A pre-composed task: an ordered sequence of task references.

    Registered as-is; the runner owns the sequence object afterwards.
    """

    items: Sequence[Any]


@dataclass(slots=True, frozen=True)
class TaskCallable:
    """A task function; it receives the runner handle as its first argument."""

    fn: Callable[..., Any]


LoadedTask = TaskList | TaskCallable
