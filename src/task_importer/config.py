# src/task_importer/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole library (normal "settings layer").
- Nothing read from the filesystem at import time except an optional .env.
- Settings only supply defaults; explicit options passed to import_tasks win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

ENV_PREFIX = "TASK_IMPORTER"

DEFAULT_DIRECTORY = "tasks"
DEFAULT_EXTENSIONS = (".py",)
DEFAULT_ATTRIBUTE = "task"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# A local .env may carry TASK_IMPORTER_* defaults; real environment wins.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


def normalize_extension(ext: str) -> str:
    """".py" and "py" both mean the same suffix."""
    ext = ext.strip()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Discovery defaults ----
    tasks_dir: str
    extensions: tuple[str, ...]
    attribute: str

    # ---- Logging ----
    log_level: str
    debug: bool

    @staticmethod
    def from_env() -> "Settings":
        tasks_dir = _env(_k("DIR"), DEFAULT_DIRECTORY)

        extensions = tuple(
            normalize_extension(e) for e in _env_list(_k("EXTENSIONS"), list(DEFAULT_EXTENSIONS))
        )

        attribute = _env(_k("ATTRIBUTE"), DEFAULT_ATTRIBUTE)

        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()
        debug = _env_bool(_k("DEBUG"), False)

        return Settings(
            tasks_dir=tasks_dir,
            extensions=extensions,
            attribute=attribute,
            log_level=log_level,
            debug=debug,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
