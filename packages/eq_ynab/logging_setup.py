"""Logging for ``eq_ynab``: one handler, owned by the entry point.

Converter modules log per-row detail at DEBUG and a run summary at INFO
through ``get_logger("eq_ynab.<module>")``. Nothing is printed until the CLI
calls :func:`configure_logging`, which installs a single stderr handler on the
``eq_ynab`` logger. The level comes from the ``--log-level`` option, then
``EQ_YNAB_LOG_LEVEL`` (environment or ``.env``), then WARNING, so a plain
successful run shows only ``Success``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "eq_ynab"
LOG_LEVEL_ENV = "EQ_YNAB_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    """Resolve ``level`` to a number; ``None`` falls back to the env var."""

    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        numeric = logging.getLevelNamesMapping().get(name)
        if numeric is None:
            raise ValueError(f"unknown log level: {level!r}")
        return numeric
    env_val = os.getenv(LOG_LEVEL_ENV)
    if env_val:
        return _parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Install the ``eq_ynab`` stderr handler; later calls do nothing.

    Parameters
    ----------
    level:
        Level number or name (``"DEBUG"``, ``"info"``, ``"15"``). ``None``
        reads ``EQ_YNAB_LOG_LEVEL`` and defaults to WARNING. Unknown names
        raise ``ValueError`` so a typo on the command line is reported rather
        than ignored.
    fmt:
        Record format; :data:`DEFAULT_FORMAT` when omitted.
    stream:
        Handler target; the current ``sys.stderr`` when omitted.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved = _parse_level(level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)

    # The placeholder NullHandler from get_logger() is no longer needed.
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Undo :func:`configure_logging` so the next call starts fresh."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger; stays silent until the CLI configures output."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["LOG_LEVEL_ENV", "configure_logging", "get_logger", "reset_logging"]
