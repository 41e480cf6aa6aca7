"""
Logging for the package. Every logger is a child of ``tsconcepts`` and writes through its own
stream handler, so library output does not depend on how the root logger is set up.

    >>> from utils.log import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Generated %d observations", 100)
"""

import logging
import sys
from typing import TextIO

ROOT_NAME = "tsconcepts"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# applied to loggers created from now on, and to the cached ones by configure_logging
_settings: dict = {"level": logging.WARNING, "format": DEFAULT_FORMAT, "stream": None}
_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _build_handler() -> logging.Handler:
    # stream=None means whatever sys.stderr is when the handler is built
    handler = logging.StreamHandler(_settings["stream"] or sys.stderr)
    handler.setLevel(_settings["level"])
    handler.setFormatter(logging.Formatter(_settings["format"]))
    return handler


def _attach(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(_build_handler())
    logger.setLevel(_settings["level"])
    logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Cached logger named ``tsconcepts.<name>``, set up with the current level, format and stream.
    """
    name = name or ROOT_NAME
    full_name = name if name.startswith(ROOT_NAME) else f"{ROOT_NAME}.{name}"

    if full_name not in _loggers:
        logger = logging.getLogger(full_name)
        _attach(logger)
        _loggers[full_name] = logger
    return _loggers[full_name]


def set_log_level(level: int | str) -> None:
    _settings["level"] = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(_settings["level"])
        for handler in logger.handlers:
            handler.setLevel(_settings["level"])


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Sets level, format and stream for every package logger, existing or created later.

    Calling it with no arguments goes back to WARNING on stderr with DEFAULT_FORMAT.
    """
    _settings.update(
        level=_resolve_level(level),
        format=format_string or DEFAULT_FORMAT,
        stream=stream,
    )
    for logger in _loggers.values():
        _attach(logger)
