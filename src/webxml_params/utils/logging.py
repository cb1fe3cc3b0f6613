"""Logging for the web.xml context parameter tools.

Every module logs under the ``webxml_params`` hierarchy through
:func:`get_logger`. Skipped context-param blocks are reported at WARNING,
per-descriptor summaries at INFO, and parser details at DEBUG.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "webxml_params"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console level per -v count
VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
    3: logging.DEBUG,
}


def get_logger(area: str) -> logging.Logger:
    """Get the logger for one area of the package.

    Args:
        area: Dotted area name, e.g. "extraction.reader". A name already
            under the package hierarchy is used as is.

    Returns:
        Logger named ``webxml_params.<area>``.
    """
    if area == ROOT_LOGGER or area.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(area)
    return logging.getLogger(f"{ROOT_LOGGER}.{area}")


def _console_handler(verbosity: int) -> RichHandler:
    # stderr keeps JSON written to stdout machine readable
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbosity >= 2,
        show_path=verbosity >= 2,
        rich_tracebacks=True,
        tracebacks_show_locals=verbosity >= 3,
    )
    handler.setLevel(VERBOSITY_LEVELS.get(verbosity, logging.INFO))
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(log_file: Path) -> logging.FileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure the package logger for a CLI run.

    Calling it again replaces the handlers of the previous call.

    Args:
        verbosity: 0=warnings (skipped blocks), 1=per-descriptor summaries,
            2=debug, 3=debug with locals in tracebacks.
        log_file: Optional file that receives every record at DEBUG.

    Returns:
        The package root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = _console_handler(verbosity)
    logger.addHandler(console_handler)
    logger.setLevel(console_handler.level)

    if log_file:
        logger.addHandler(_file_handler(log_file))
        logger.setLevel(logging.DEBUG)

    return logger
