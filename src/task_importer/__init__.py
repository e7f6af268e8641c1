"""
Import build tasks from a directory instead of defining them all in one file.

    from task_importer import import_tasks

    import_tasks(runner)                      # ./tasks/*.py
    import_tasks(runner, "build/tasks")       # another directory
    import_tasks(runner, {"params": [cfg]})   # task(handle, cfg, ...)
"""

from .core.options import Options, resolve_options
from .errors import InvalidTaskError, MissingTaskError, RegistrationError, TaskImportError
from .importer import import_tasks
from .logging_setup import setup_logging

__all__ = [
    "InvalidTaskError",
    "MissingTaskError",
    "Options",
    "RegistrationError",
    "TaskImportError",
    "import_tasks",
    "resolve_options",
    "setup_logging",
]
