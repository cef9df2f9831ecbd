"""Conversion between signed minute offsets and ``±HH:MM`` strings."""

from __future__ import annotations

import re

from .cache import MemoCache

__all__ = [
    "OffsetCodec",
    "OffsetFormatError",
    "format_offset",
    "is_offset_text",
    "normalize_offset",
    "parse_offset",
    "strip_utc_prefix",
]

_OFFSET_RE = re.compile(r"^(?P<sign>[+-])?(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$")


class OffsetFormatError(ValueError):
    """Raised when a string does not look like a UTC offset."""


def is_offset_text(text: str) -> bool:
    """Return ``True`` when ``text`` has one of the accepted offset shapes."""

    return _OFFSET_RE.match(text.strip()) is not None


def strip_utc_prefix(text: str) -> str:
    """Drop a leading ``UTC`` marker, mapping bare ``UTC`` to ``+0``."""

    candidate = text.strip()
    if candidate[:3].lower() == "utc":
        candidate = candidate[3:].strip()
        if not candidate:
            return "+0"
    return candidate


def parse_offset(text: str) -> int:
    """Return the signed minute count encoded by ``text``.

    Accepted shapes are ``±H``, ``±HH`` and ``±HH:MM`` with an optional colon
    and an optional sign (positive when omitted).
    """

    if not isinstance(text, str):
        raise OffsetFormatError(f"Offset must be a string, got {type(text).__name__}")
    match = _OFFSET_RE.match(text.strip())
    if match is None:
        raise OffsetFormatError(f"Invalid offset format: {text!r}")
    hours = int(match.group("hours"))
    minutes = int(match.group("minutes") or 0)
    if minutes >= 60:
        raise OffsetFormatError(f"Offset minutes out of range: {text!r}")
    total = hours * 60 + minutes
    return -total if match.group("sign") == "-" else total


def format_offset(minutes: int) -> str:
    """Return ``minutes`` as a zero padded ``±HH:MM`` string."""

    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(int(minutes)), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def normalize_offset(value: int | str) -> str:
    """Return the canonical ``±HH:MM`` form of a minute count or offset string."""

    if isinstance(value, bool):
        raise OffsetFormatError("Offset must be an int or string, not bool")
    if isinstance(value, int):
        return format_offset(value)
    return format_offset(parse_offset(value))


class OffsetCodec:
    """Memoizing front-end over :func:`parse_offset` and :func:`normalize_offset`."""

    def __init__(self, parsed: MemoCache | None = None, normalized: MemoCache | None = None) -> None:
        self._parsed = parsed if parsed is not None else MemoCache("offsets", 256)
        self._normalized = normalized if normalized is not None else MemoCache("normalized", 256)

    def parse(self, text: str) -> int:
        return self._parsed.get_or_compute(text, lambda: parse_offset(text))

    def format(self, minutes: int) -> str:
        return format_offset(minutes)

    def normalize(self, value: int | str) -> str:
        if isinstance(value, bool):
            return normalize_offset(value)
        return self._normalized.get_or_compute(value, lambda: normalize_offset(value))
