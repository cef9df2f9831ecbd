"""Log output for the tzpocket command line."""

from __future__ import annotations

import logging
import sys

__all__ = ["configure_logging", "resolve_level"]

_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def resolve_level(level: str | int) -> int:
    """Return the numeric level for a name such as ``"debug"`` or a number.

    Raises :class:`ValueError` for anything else.
    """

    if isinstance(level, int):
        return level
    candidate = level.strip().upper()
    if candidate.isdigit():
        return int(candidate)
    try:
        return logging.getLevelNamesMapping()[candidate]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def configure_logging(level: str | int) -> int:
    """Route the ``tzpocket`` loggers to stderr at ``level``.

    Calling it again swaps the level; only one handler is ever installed.
    Other loggers and the root logger are left alone.
    """

    effective = resolve_level(level)
    logger = logging.getLogger("tzpocket")
    for handler in list(logger.handlers):
        if isinstance(handler, _StderrHandler):
            logger.removeHandler(handler)
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(effective)
    return effective
