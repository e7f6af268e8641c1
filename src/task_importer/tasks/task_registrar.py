# src/task_importer/tasks/task_registrar.py

from __future__ import annotations

import logging

from ..core.ports import TaskDefinition, TaskRunner

logger = logging.getLogger(__name__)


def register(name: str, definition: TaskDefinition, runner: TaskRunner) -> None:
    # Whatever the runner raises (duplicate name, bad definition) goes straight up.
    runner.register_task(name, definition)
    logger.debug("Registered task %s", name)
