"""
================================================================================
Logging Setup for Automation Tools
================================================================================

Centralized Loguru configuration used by the runner, the pytest hooks and the
framework modules.

Features:
    - One-time sink configuration per process
    - Console sink with backtrace/diagnose for readable failures
    - Optional rotating file sink
    - Per-worker file names when running under pytest-xdist

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_str: str = None,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Safe to call repeatedly; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path. Under pytest-xdist the worker id is
            appended to the file stem so workers never share a file.
        format_str: Custom log format string
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_format = format_str or DEFAULT_LOG_FORMAT

    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    if log_file:
        log_path = _worker_log_path(Path(log_file))
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path),
            level=level.upper(),
            format=log_format.replace("{level: <8}", "{level}"),  # No padding in files
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            enqueue=True,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def _worker_log_path(path: Path) -> Path:
    worker = os.environ.get("PYTEST_XDIST_WORKER")
    if not worker:
        return path
    return path.with_name(f"{path.stem}_{worker}{path.suffix}")


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "init_logger",
]
