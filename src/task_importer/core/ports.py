# src/task_importer/core/ports.py

"""
Ports (interfaces) used by the importer.

The importer depends on Protocols instead of a concrete task runner or on the
import system directly. This keeps runners swappable and makes testing easier.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import LoadedTask
    from .options import Options

TaskDefinition = Callable[..., Any] | Sequence[Any]
# What a runner receives: a (bound) task function or a composite list of task names.


class TaskRunner(Protocol):
    """
    Host task runner (the thing that schedules and executes tasks).

    Implementations may raise from register_task (e.g. RegistrationError on a
    duplicate name); the importer lets it propagate.
    """

    def register_task(self, name: str, definition: TaskDefinition) -> None: ...


class ModuleLoader(Protocol):
    """Turn a task file into a LoadedTask. The default imports Python source."""

    def __call__(self, path: Path, options: Options) -> LoadedTask: ...
