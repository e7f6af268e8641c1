# src/task_importer/errors.py

"""
Exceptions raised by task_importer itself.

Filesystem failures (FileNotFoundError, NotADirectoryError, PermissionError)
and errors raised while executing a task module are not wrapped: they reach
the caller exactly as the OS / import machinery raised them.
"""

from __future__ import annotations


class TaskImportError(Exception):
    """Base class for errors raised by this package."""


class InvalidTaskError(TaskImportError, TypeError):
    """A task module exported something that is neither a sequence nor a callable."""

    def __init__(self, source: str, value: object) -> None:
        self.source = source
        self.value = value
        super().__init__(
            f"{source}: task must be a list/tuple of task names or a callable, "
            f"got {type(value).__name__}"
        )


class MissingTaskError(TaskImportError, AttributeError):
    """A task module does not define the configured attribute."""

    def __init__(self, source: str, attribute: str) -> None:
        self.source = source
        self.attribute = attribute
        super().__init__(f"{source}: module has no attribute {attribute!r}")


class RegistrationError(TaskImportError):
    """
    Raised by a task runner that refuses a definition (duplicate name, bad shape).

    import_tasks never raises this on its own; runners are free to raise it
    (or anything else) from register_task and it propagates unchanged.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"cannot register task {name!r}: {reason}")
