# src/task_importer/tasks/task_adapter.py

from __future__ import annotations

import functools
import inspect
import os
from collections.abc import Callable, Iterable
from typing import Any

from ..core.options import Options
from ..core.ports import TaskDefinition
from .task_models import FileEntry, LoadedTask, TaskCallable, TaskList

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _remaining_signature(fn: Callable[..., Any], nbound: int) -> inspect.Signature | None:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    params = list(sig.parameters.values())
    out: list[inspect.Parameter] = []
    for p in params:
        if nbound and p.kind in _POSITIONAL:
            nbound -= 1
            continue
        out.append(p)
    return sig.replace(parameters=out)


def bind_leading(fn: Callable[..., Any], leading: Iterable[Any]) -> Callable[..., Any]:
    """
    Fix the first arguments of fn.

    bound(*args, **kwargs) == fn(*leading, *args, **kwargs)

    The bound function keeps fn's name/doc, exposes the prefix as
    `leading_args`, and reports fn's signature minus the bound positionals so
    a runner inspecting arity sees only what it still has to pass.
    """
    prefix = tuple(leading)

    @functools.wraps(fn)
    def bound(*args: Any, **kwargs: Any) -> Any:
        return fn(*prefix, *args, **kwargs)

    bound.leading_args = prefix  # type: ignore[attr-defined]
    sig = _remaining_signature(fn, len(prefix))
    if sig is not None:
        bound.__signature__ = sig  # type: ignore[attr-defined]
    else:
        # No introspectable signature (builtins): report (*args, **kwargs)
        # rather than letting inspect follow __wrapped__ to the unbound one.
        del bound.__wrapped__
    return bound


def adapt_task(loaded: LoadedTask, options: Options, handle: Any) -> TaskDefinition:
    """
    Put a loaded task into the form the runner registers.

    A TaskList goes through untouched (same object). A TaskCallable gets
    (handle, *options.params) bound in front of whatever the runner passes.
    """
    if isinstance(loaded, TaskList):
        return loaded.items
    if isinstance(loaded, TaskCallable):
        return bind_leading(loaded.fn, (handle, *options.params))
    raise TypeError(f"expected TaskList or TaskCallable, got {type(loaded).__name__}")


def task_name(entry: FileEntry) -> str:
    """File name without directory and without its (matched) extension."""
    base = os.path.basename(entry.filename)
    if entry.extension and base.endswith(entry.extension):
        return base[: -len(entry.extension)]
    return base
