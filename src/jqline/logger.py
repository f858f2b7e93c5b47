"""Logging configuration for jqline using loguru.

The terminal belongs to the TUI while it runs, so records go to a file sink.
A stderr sink is only attached when stderr is not that terminal (redirected to
a file or pipe), otherwise log lines would be drawn over the editor.
"""

import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger

DEFAULT_LOG_DIR = Path.home() / ".jqline"
LOG_FILE_ENV = "JQLINE_LOG_FILE"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_log_file_path: Optional[Path] = None


def resolve_log_file(log_file: Optional[str] = None) -> Path:
    """
    Pick the log file: explicit argument, then $JQLINE_LOG_FILE, then the
    previously configured path, then ~/.jqline/jqline.log.
    """
    candidate = log_file or os.getenv(LOG_FILE_ENV)
    if candidate:
        return Path(candidate).expanduser().absolute()
    if _log_file_path is not None:
        return _log_file_path
    return DEFAULT_LOG_DIR / "jqline.log"


def console_is_free(stream: TextIO) -> bool:
    """True when writing to ``stream`` cannot corrupt the TUI's screen."""
    isatty = getattr(stream, "isatty", None)
    return not (isatty is not None and isatty())


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> Path:
    """
    Configure loguru sinks.

    Args:
        log_file: Path to the log file (see ``resolve_log_file`` for the fallbacks)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Also log to stderr, unless stderr is the terminal

    Returns:
        The log file in use
    """
    global _log_file_path

    path = resolve_log_file(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    _log_file_path = path

    logger.remove()
    logger.add(
        path,
        level=log_level,
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        compression=compression,
        encoding="utf-8",
    )

    if console_output:
        if console_is_free(sys.stderr):
            logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=False)
        else:
            get_logger("logger").warning("stderr is the terminal in use by the TUI, console logging skipped")

    return path


def get_logger(name: Optional[str] = None):
    """
    Get a logger bound to a component name.

    Args:
        name: Component name shown in each record

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "jqline")


# Records emitted through the bare logger still need the name field
logger.configure(extra={"name": "jqline"})
setup_logger()
