"""
Logging for textmagnet.

Every module logs under the ``textmagnet`` namespace. The library installs
no handlers of its own until setup_logging() is called; that attaches a
rich handler on stderr (and optionally a plain log file) to the package
logger only, so the host application's root logger is left alone.

Index building and clustering report their matrix shapes, ranks and
cluster counts at DEBUG; degenerate numerics (zero-sum LSI columns,
k-means not converging) are WARNINGs.
"""

import logging
import os
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import InvalidConfigError

PACKAGE_LOGGER = "textmagnet"

# Read when setup_logging() gets no explicit level
LEVEL_ENV_VAR = "TEXTMAGNET_LOG_LEVEL"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Turn a level name or number into a logging level.

    None falls back to TEXTMAGNET_LOG_LEVEL, then WARNING.

    Raises:
        InvalidConfigError: If the name is not a logging level
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "WARNING")

    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise InvalidConfigError("log_level", level, "not a logging level name")
    return resolved


def setup_logging(
    level: Union[int, str, None] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route textmagnet logs to stderr through rich, and optionally to a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Level name or number; None reads TEXTMAGNET_LOG_LEVEL
        log_file: Optional file path to append logs to

    Returns:
        The configured textmagnet logger
    """
    level = resolve_level(level)
    debugging = level <= logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=debugging,
            markup=False,
            show_path=debugging,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in logger.handlers:
        old.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = False

    logger.debug(f"textmagnet logging at {logging.getLevelName(level)}")
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger inside the textmagnet namespace.

    Args:
        name: Module name (e.g., 'textmagnet.index' or just 'index');
              None returns the package logger
    """
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)
