"""Logging utilities for entityscope.

Library modules only create loggers with ``logging.getLogger(__name__)``;
hosts such as the CLI call :func:`configure_logging` once to attach a handler
to the package logger.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "entityscope"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_ATTR = "_entityscope_handler"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def _coerce_level(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(
    verbose: bool = False,
    level: Optional[Union[str, int]] = None,
    fmt: Optional[str] = None,
    file: Optional[str] = None,
) -> logging.Logger:
    """Configure the package logger.

    Repeated calls replace the handler installed by a previous call instead of
    stacking another one.

    Args:
        verbose: Force DEBUG level when True.
        level: Level name or number; defaults to WARNING.
        fmt: Format string for records.
        file: Write to this file instead of stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    handler: logging.Handler
    if file:
        handler = logging.FileHandler(file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    setattr(handler, _HANDLER_ATTR, True)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)

    if verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(_coerce_level(level if level is not None else logging.WARNING))
    return logger


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    Accepts either string levels (e.g., "INFO") or numeric constants, and
    either a full logger name or one relative to the package
    (``"api.filters"``).
    """
    name = component
    if not component.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{component}"
    logging.getLogger(name).setLevel(_coerce_level(level))
