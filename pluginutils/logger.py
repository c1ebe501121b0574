"""Logging setup for applications embedding pluginutils.

The package logs through ``logging.getLogger("pluginutils")`` and its
children, and stays silent unless the application opts in with
``setup_logger``.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

__all__ = ["logger", "setup_logger"]

_HANDLER_NAME = "pluginutils-stream"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(
            f"Unknown log level {level!r}. Expected one of DEBUG, INFO, "
            "WARNING, ERROR or CRITICAL."
        )
    return resolved


def setup_logger(
    name: str = "pluginutils",
    level: Optional[Union[int, str]] = None,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attaches a stream handler to the ``name`` logger, and sets its
    level.

    Calling it again on the same logger reuses the existing handler,
    applying the new level and format.

    Args:
        name: Logger name, ``pluginutils`` or one of its children.
        level: Level name or number. Defaults to the ``LOG_LEVEL``
            environment variable, then ``INFO``.
        format_string: Custom record format.
        stream: Where records are written. Defaults to stdout.

    Returns:
        The configured logger.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    resolved = _resolve_level(
        level if level is not None else os.getenv("LOG_LEVEL", "INFO")
    )
    formatter = logging.Formatter(
        fmt=format_string or _FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
    )

    configured = logging.getLogger(name)
    handler = next(
        (h for h in configured.handlers if h.get_name() == _HANDLER_NAME),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.set_name(_HANDLER_NAME)
        configured.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)  # type: ignore
    handler.setFormatter(formatter)
    configured.setLevel(resolved)
    configured.propagate = False
    return configured


logger = logging.getLogger("pluginutils")
logger.addHandler(logging.NullHandler())
