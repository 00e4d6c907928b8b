"""Logging helpers for the qinterp package.

Library modules log fit and weight-cache transitions under the ``"qinterp"``
logger and stay silent until an application opts in with
:func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

ROOT_LOGGER_NAME = "qinterp"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_NULL_HANDLER = logging.NullHandler()
# Marks the stream handler created by configure_logging so repeat calls reuse it.
_DEFAULT_HANDLER_ATTR = "_qinterp_default"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a logger with a null handler attached.

    Args:
        name: Logger name. Names outside the ``qinterp`` hierarchy are nested
            under it, so ``"polynomial"`` becomes ``"qinterp.polynomial"``.
    """

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(_NULL_HANDLER)
    return logger


def configure_logging(
    level: int | str = logging.INFO,
    *,
    handlers: Optional[Iterable[logging.Handler]] = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Route qinterp diagnostics to the given handlers.

    Without ``handlers`` a single stream handler is attached and reused on
    later calls, so configuring twice does not duplicate output.

    Args:
        level: Level for the qinterp root logger, as a number or a name such
            as ``"DEBUG"``.
        handlers: Optional handlers to attach instead of the default stream
            handler.
        format_string: Log format for the attached handlers. Defaults to
            :data:`DEFAULT_FORMAT` for the stream handler.

    Returns:
        The configured qinterp root logger.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level {level!r}")
        level = resolved

    logger = get_logger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if handlers is None:
        existing = [h for h in logger.handlers if getattr(h, _DEFAULT_HANDLER_ATTR, False)]
        if existing:
            handlers = []
            if format_string:
                existing[0].setFormatter(logging.Formatter(format_string))
        else:
            stream = logging.StreamHandler()
            setattr(stream, _DEFAULT_HANDLER_ATTR, True)
            handlers = [stream]
            format_string = format_string or DEFAULT_FORMAT

    for handler in handlers:
        if format_string:
            handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)
    return logger


__all__ = ["DEFAULT_FORMAT", "ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
