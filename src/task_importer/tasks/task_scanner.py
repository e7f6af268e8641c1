# src/task_importer/tasks/task_scanner.py

"""
Directory scanner.

One flat listing of the tasks directory, then a per-entry check:
- regular file (stat follows symlinks: a link to a directory is skipped)
- extension is one of the configured ones

Nothing here raises for a skipped entry; filesystem errors propagate as-is.
"""

from __future__ import annotations

import logging
import os
import stat

from ..core.options import Options
from .task_models import FileEntry

logger = logging.getLogger(__name__)


def list_entries(path: str | os.PathLike) -> list[str]:
    """
    Names of the immediate entries of path, in whatever order the OS gives.

    Raises FileNotFoundError / NotADirectoryError / PermissionError unchanged.
    """
    names = os.listdir(path)
    logger.debug("Listed %d entries in %s", len(names), path)
    return names


def describe_entry(directory: str | os.PathLike, filename: str) -> FileEntry:
    path = os.path.abspath(os.path.join(directory, filename))
    _, extension = os.path.splitext(filename)
    st = os.stat(path)
    return FileEntry(
        path=path,
        filename=filename,
        extension=extension,
        is_file=stat.S_ISREG(st.st_mode),
    )


def skip_reason(entry: FileEntry, options: Options) -> str | None:
    """Why an entry is not a task file, or None if it is one."""
    if not entry.is_file:
        return "not a regular file"
    if entry.extension not in options.extensions:
        return f"extension {entry.extension!r} not in {list(options.extensions)}"
    return None


def classify(filename: str, options: Options, directory: str | os.PathLike) -> bool:
    return skip_reason(describe_entry(directory, filename), options) is None
