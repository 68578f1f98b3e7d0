"""Logging setup for the command line entry point."""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", log_file: Path | None = None, console: bool = False) -> None:
    """Install a single handler on the root logger.

    The interactive screen owns the terminal, so records go to ``log_file``
    when one is given, to stderr only when ``console`` is set, and are
    discarded otherwise.

    Args:
        level: Logging level name (e.g. "DEBUG")
        log_file: Optional file to append records to
        console: Whether stderr may be used
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    elif console:
        handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
