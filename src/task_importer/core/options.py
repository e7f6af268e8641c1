# src/task_importer/core/options.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..config import DEFAULT_ATTRIBUTE, Settings, get_settings

logger = logging.getLogger(__name__)

RECOGNIZED_KEYS = ("dir", "extensions", "params", "attribute")

OptionsInput = str | os.PathLike | Mapping[str, Any] | None
# A bare path is shorthand for {"dir": path}.


@dataclass(slots=True, frozen=True)
class Options:
    dir: str
    extensions: tuple[str, ...]
    params: tuple[Any, ...] = ()
    attribute: str = DEFAULT_ATTRIBUTE

    # Caller keys we don't recognize: kept, never interpreted.
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


def _extensions(raw: Any, default: tuple[str, ...]) -> tuple[str, ...]:
    if raw is None:
        return default
    if isinstance(raw, str):
        return (raw,)
    out = tuple(raw)
    return out or default


def _params(raw: Any) -> tuple[Any, ...]:
    if raw is None:
        return ()
    # A string or a mapping is one argument, not a list of them.
    if isinstance(raw, (str, bytes, bytearray, Mapping)) or not isinstance(raw, Iterable):
        return (raw,)
    return tuple(raw)


def resolve_options(raw: OptionsInput | Options = None, *, defaults: Settings | None = None) -> Options:
    """
    Merge caller options over the defaults (shallow, caller wins).

    Accepts None, a directory path, an Options instance (returned unchanged)
    or a mapping with any of "dir", "extensions", "params", "attribute".
    A key given as None keeps its default. Extension syntax and directory
    existence are not checked here; the scanner finds out soon enough.
    """
    if isinstance(raw, Options):
        return raw

    if defaults is None:
        defaults = get_settings()

    if raw is None:
        supplied: Mapping[str, Any] = {}
    elif isinstance(raw, (str, os.PathLike)):
        supplied = {"dir": raw}
    elif isinstance(raw, Mapping):
        supplied = raw
    else:
        raise TypeError(
            f"options must be a directory path or a mapping, got {type(raw).__name__}"
        )

    directory = supplied.get("dir")
    params = supplied.get("params")
    attribute = supplied.get("attribute")

    opts = Options(
        dir=defaults.tasks_dir if directory is None else os.fspath(directory),
        extensions=_extensions(supplied.get("extensions"), defaults.extensions),
        params=_params(params),
        attribute=attribute or defaults.attribute,
        extra=MappingProxyType({k: v for k, v in supplied.items() if k not in RECOGNIZED_KEYS}),
    )
    logger.debug(
        "Resolved options dir=%s extensions=%s params=%d attribute=%s",
        opts.dir,
        opts.extensions,
        len(opts.params),
        opts.attribute,
    )
    return opts
