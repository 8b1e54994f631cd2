"""Logging setup for waypoint.

Importing the package prints nothing: the ``waypoint`` logger only carries a
`logging.NullHandler`, and records propagate to whatever the host application
configured. The command-line entry point calls `configure_logging`, which
attaches one handler writing to standard error so that JSON printed on
standard output stays parseable.
"""

import logging
import sys
from typing import IO, Optional

_ROOT_LOGGER_NAME = "waypoint"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler attached by configure_logging; None while unconfigured
_configured_handler: Optional[logging.Handler] = None


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> IO[str]:  # type: ignore[override]
        return sys.stderr


def configure_logging(
    level: int = logging.INFO,
    stream: Optional[IO[str]] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """Attach a single output handler to the ``waypoint`` logger.

    Calling this again replaces the previous handler instead of adding a
    second one.

    Args:
        level: Level for the package logger.
        stream: Destination stream. Defaults to standard error.
        format_string: Record format. Defaults to `DEFAULT_FORMAT`.

    Returns:
        The attached handler.
    """
    global _configured_handler

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if _configured_handler is not None:
        root_logger.removeHandler(_configured_handler)

    handler = _StderrHandler() if stream is None else logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)
    _configured_handler = handler

    set_global_log_level(level)
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``waypoint`` namespace.

    Names outside the namespace (for example a plugin's ``__name__``) are
    nested under ``waypoint.`` so the package level and handler apply.
    """
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``waypoint`` logger; child loggers inherit it."""
    logging.getLogger(_ROOT_LOGGER_NAME).setLevel(level)


def reset_logging() -> None:
    """Drop the configured handler and level (mainly for testing)."""
    global _configured_handler

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if _configured_handler is not None:
        root_logger.removeHandler(_configured_handler)
        _configured_handler = None
    root_logger.setLevel(logging.NOTSET)


logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
