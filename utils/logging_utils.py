# utils/logging_utils.py

"""
Lightweight logging utilities for the mt19937-sim project.

The generator hot path (rand_u32 / twist) never logs. Seeding, reference
checks and the CLI do, through loggers obtained here:

    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.info("Something happened")
"""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional

from config import LOGS_DIR


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Multiple calls with the same name return the same logger instance.
_LOGGER_CACHE: dict[str, Logger] = {}


def _ensure_log_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def configure_root_logger(
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_stdout: bool = True,
    filename: str = "mt19937_sim.log",
) -> None:
    """
    Configure the root logger for the entire project.

    Call this once near the start of main.py. If the root logger already
    has handlers (pytest's caplog, an embedding application), only the
    level is adjusted.

    Args:
        level:
            Logging level (e.g., logging.INFO, logging.DEBUG).
        log_to_file:
            If True, write logs to LOGS_DIR / filename.
        log_to_stdout:
            If True, also log to stdout.
        filename:
            Name of the log file inside LOGS_DIR.
    """
    handlers: list[logging.Handler] = []

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if log_to_file:
        _ensure_log_dir(LOGS_DIR)
        fh = logging.FileHandler(LOGS_DIR / filename, encoding="utf-8")
        fh.setFormatter(formatter)
        handlers.append(fh)

    if log_to_stdout:
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        handlers.append(sh)

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(level=level, handlers=handlers)


def get_logger(
    name: Optional[str] = None,
    level: Optional[int] = None,
) -> Logger:
    """
    Get a (cached) logger with a given name.

    Unlike a bare logging.getLogger, this does not install any handler;
    library modules stay silent until the application calls
    configure_root_logger.

    Args:
        name:
            Logger name (usually __name__ in the caller). Defaults to
            "__main__".
        level:
            Optional level for this logger. If None, the level is inherited
            from the root logger.
    """
    if name is None:
        name = "__main__"

    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    _LOGGER_CACHE[name] = logger
    return logger
