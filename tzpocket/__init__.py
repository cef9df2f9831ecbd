"""Offline timezone and DST resolution from a compact embedded zone table."""

from __future__ import annotations

from .cache import CacheStats, MemoCache, TimezoneCaches
from .clock import Clock, FixedClock, SimulatedClock, SystemClock
from .dst import DstRule, DstRuleEngine, DstTransition, nth_weekday_of_month
from .geo import GeoApproximator
from .offsets import OffsetCodec, OffsetFormatError, format_offset, normalize_offset, parse_offset
from .resolver import ResolvedZoneContext, ZoneResolver, string_similarity
from .timezones import DstChange, LocalTime, LocationStatus, Timezones
from .zones import (
    UNKNOWN_ZONE,
    UnknownTimezoneError,
    ZoneRecord,
    ZoneTable,
    ZoneTableError,
    load_zone_table,
)

__version__ = "1.0.0"

__all__ = [
    "CacheStats",
    "Clock",
    "DstChange",
    "DstRule",
    "DstRuleEngine",
    "DstTransition",
    "FixedClock",
    "GeoApproximator",
    "LocalTime",
    "LocationStatus",
    "MemoCache",
    "OffsetCodec",
    "OffsetFormatError",
    "ResolvedZoneContext",
    "SimulatedClock",
    "SystemClock",
    "TimezoneCaches",
    "Timezones",
    "UNKNOWN_ZONE",
    "UnknownTimezoneError",
    "ZoneRecord",
    "ZoneResolver",
    "ZoneTable",
    "ZoneTableError",
    "format_offset",
    "load_zone_table",
    "normalize_offset",
    "nth_weekday_of_month",
    "parse_offset",
    "string_similarity",
]
