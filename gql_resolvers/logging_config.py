"""Logging setup for gql_resolvers.

Every module asks for its logger through :func:`get_logger`; the CLI calls
:func:`configure_logging` once to attach a rich handler to the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "gql_resolvers"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a RichHandler writing to stderr and set the package log level.

    Calling it again only changes the level.

    Args:
        level: Logging level as int or level name (e.g. "DEBUG").

    Returns:
        The configured package logger.
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        _configured = True

    return logger
