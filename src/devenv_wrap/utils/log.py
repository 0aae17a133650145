"""Logging setup shared by every layer.

Modules obtain a logger with :func:`get_logger`; only the CLI calls
:func:`configure_logging`.  Rich's handler is used when Rich is
installed, with a plain stderr handler otherwise.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "devenv_wrap"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a logger under the ``devenv_wrap`` hierarchy."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler

    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    return rich_handler


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this again only adjusts the level.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    if not logger.handlers:
        logger.addHandler(_build_handler())
    return logger
