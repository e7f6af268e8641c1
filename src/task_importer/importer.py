# src/task_importer/importer.py

"""
Public entry point.

One synchronous pass over a tasks directory:
- resolve options once,
- list the directory (non-recursive),
- skip anything that isn't a regular file with a known extension,
- load each task file, adapt it, register it with the runner.

The first error (filesystem, task module, runner) aborts the pass. Tasks
registered before it stay registered; there is no rollback.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from .config import Settings
from .core.options import Options, OptionsInput, resolve_options
from .core.ports import ModuleLoader, TaskRunner
from .tasks.task_adapter import adapt_task, task_name
from .tasks.task_loader import default_loader
from .tasks.task_registrar import register
from .tasks.task_scanner import describe_entry, list_entries, skip_reason

logger = logging.getLogger(__name__)

# Default for handle=: task functions receive the runner itself.
_RUNNER = object()


def import_tasks(
    runner: TaskRunner,
    options: OptionsInput | Options = None,
    *,
    handle: Any = _RUNNER,
    loader: ModuleLoader | None = None,
    cwd: str | os.PathLike | None = None,
    settings: Settings | None = None,
) -> None:
    """
    Register every task file found in <cwd>/<options.dir> with runner.

    handle is what task functions receive as their first argument; it
    defaults to the runner itself (an explicit None is bound as None).
    loader defaults to importing the file as Python source and reading its
    `task` attribute (see Options.attribute).
    settings supplies the defaults (get_settings() when omitted).
    """
    opts = resolve_options(options, defaults=settings)
    if handle is _RUNNER:
        handle = runner
    if loader is None:
        loader = default_loader

    directory = os.path.join(os.fspath(cwd) if cwd is not None else os.getcwd(), opts.dir)

    count = 0
    for filename in list_entries(directory):
        entry = describe_entry(directory, filename)
        logger.debug("Found %s", entry.path)

        reason = skip_reason(entry, opts)
        if reason is not None:
            logger.debug("Skipped %s (%s)", filename, reason)
            continue

        loaded = loader(Path(entry.path), opts)
        definition = adapt_task(loaded, opts, handle)
        register(task_name(entry), definition, runner)
        count += 1

    logger.info("Imported %d task(s) from %s", count, directory)
