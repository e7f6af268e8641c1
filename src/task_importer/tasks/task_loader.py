# src/task_importer/tasks/task_loader.py

from __future__ import annotations

import hashlib
import importlib.util
import logging
import re
import sys
from collections.abc import Callable, Sequence
from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType
from typing import Any

from ..core.options import Options
from ..errors import InvalidTaskError, MissingTaskError
from ..logging_setup import LOADED_NAMESPACE
from .task_models import LoadedTask, TaskCallable, TaskList

logger = logging.getLogger(__name__)


def as_loaded_task(value: Any, *, source: str) -> LoadedTask:
    """
    Decide once what a task module exported.

    list/tuple (any non-string Sequence) -> TaskList, callable -> TaskCallable.
    """
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return TaskList(value)
    if callable(value):
        return TaskCallable(value)
    raise InvalidTaskError(source, value)


def module_name_for(path: Path) -> str:
    """Stable, unique sys.modules key for a task file (same file -> same name)."""
    stem = re.sub(r"\W", "_", path.stem) or "task"
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:10]
    return f"{LOADED_NAMESPACE}.{stem}_{digest}"


def _exec_module(path: Path) -> ModuleType:
    name = module_name_for(path)
    cached = sys.modules.get(name)
    if cached is not None:
        logger.debug("Reusing already imported %s", path)
        return cached

    # SourceFileLoader does not care about the suffix, so ".task" etc. work too.
    loader = SourceFileLoader(name, str(path))
    spec = importlib.util.spec_from_loader(name, loader)
    module = importlib.util.module_from_spec(spec)

    sys.modules[name] = module
    try:
        loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
    return module


def load_task_module(path: Path, options: Options) -> LoadedTask:
    """
    Import a task file and pick up its task definition.

    The module is executed once per path and process; later calls reuse it.
    Any error raised while executing the file propagates unchanged.
    """
    path = Path(path)
    logger.debug("Import started: %s", path)
    module = _exec_module(path)
    logger.debug("Import finished: %s", path)

    try:
        value = getattr(module, options.attribute)
    except AttributeError:
        raise MissingTaskError(str(path), options.attribute) from None
    return as_loaded_task(value, source=str(path))


default_loader: Callable[[Path, Options], LoadedTask] = load_task_module
