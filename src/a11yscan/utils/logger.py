"""Central logger setup with rich console output on stderr."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "a11yscan"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def init_logger(verbose: bool = False) -> logging.Logger:
    """Attach a RichHandler to the package logger once and set its level."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if logger.handlers:
        return logger

    # stdout carries tool payloads
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        show_path=False,
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
