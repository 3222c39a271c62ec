"""Logging helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set


_LOGGER_INITIALIZED = False
_LOG_FILES: Set[Path] = set()
_FORMATTER = logging.Formatter(
    fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def get_logger(name: str, log_file: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """Get a logger; the root level follows ``level`` on every call.

    The console handler is installed once, each distinct ``log_file`` once.
    """
    global _LOGGER_INITIALIZED

    root = logging.getLogger()
    root.setLevel(level.upper())

    if not _LOGGER_INITIALIZED:
        handler = logging.StreamHandler()
        handler.setFormatter(_FORMATTER)
        root.addHandler(handler)
        _LOGGER_INITIALIZED = True

    if log_file:
        path = Path(log_file).resolve()
        if path not in _LOG_FILES:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(_FORMATTER)
            root.addHandler(file_handler)
            _LOG_FILES.add(path)

    return logging.getLogger(name)
