"""Public facade combining the resolver, DST engine and clock."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

from .cache import CacheStats, TimezoneCaches
from .clock import DEFAULT_CLOCK, Clock, as_utc, set_simulated_now, simulated_now
from .config.settings import Settings
from .dst import DstRuleEngine
from .geo import GeoApproximator
from .offsets import OffsetCodec, format_offset, is_offset_text, strip_utc_prefix
from .resolver import MAX_OFFSET_MINUTES, MIN_OFFSET_MINUTES, ResolvedZoneContext, ZoneResolver
from .zones import UnknownTimezoneError, ZoneRecord, ZoneTable, load_zone_table

LOG = logging.getLogger(__name__)

__all__ = ["DstChange", "LocalTime", "LocationStatus", "Timezones"]

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_HOURS_RE = re.compile(r"^[-+]\d{1,2}$")


def _raw_abbreviation(minutes: int) -> str:
    return "UTC" if minutes == 0 else f"UTC{format_offset(minutes)}"


def _fixed_zone(minutes: int, target: object) -> timezone:
    if not MIN_OFFSET_MINUTES <= minutes <= MAX_OFFSET_MINUTES:
        raise UnknownTimezoneError(f"Offset out of range: {target!r}")
    return timezone(timedelta(minutes=minutes), _raw_abbreviation(minutes))


@dataclass(frozen=True, slots=True)
class LocalTime:
    """A UTC instant viewed at a fixed offset.

    Attributes
    ----------
    utc:
        The instant itself, aware and in UTC.
    offset_minutes:
        Offset applied to obtain the wall clock reading.
    abbreviation:
        Zone abbreviation in effect, e.g. ``EDT`` or ``UTC+05:30``.
    """

    utc: datetime
    offset_minutes: int
    abbreviation: str

    @property
    def local(self) -> datetime:
        zone = timezone(timedelta(minutes=self.offset_minutes), self.abbreviation)
        return self.utc.astimezone(zone)

    @property
    def year(self) -> int:
        return self.local.year

    @property
    def month(self) -> int:
        return self.local.month

    @property
    def day(self) -> int:
        return self.local.day

    @property
    def weekday(self) -> int:
        """Day of week with Monday as ``0``."""

        return self.local.weekday()

    @property
    def hour(self) -> int:
        return self.local.hour

    @property
    def minute(self) -> int:
        return self.local.minute

    @property
    def second(self) -> int:
        return self.local.second

    @property
    def millisecond(self) -> int:
        return self.local.microsecond // 1000

    def isoformat(self) -> str:
        return self.local.strftime("%Y-%m-%dT%H:%M:%S") + format_offset(self.offset_minutes)

    def as_dict(self) -> dict[str, object]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "weekday": self.weekday,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "millisecond": self.millisecond,
            "offset": format_offset(self.offset_minutes),
            "abbreviation": self.abbreviation,
            "iso": self.isoformat(),
        }

    def __str__(self) -> str:
        local = self.local
        return (
            f"{_DAY_NAMES[local.weekday()]} {_MONTH_NAMES[local.month - 1]} "
            f"{local.day:02d} {local.year} {local:%H:%M:%S} "
            f"GMT{format_offset(self.offset_minutes)} ({self.abbreviation})"
        )


@dataclass(frozen=True, slots=True)
class LocationStatus:
    location: str
    is_dst: bool

    def as_dict(self) -> dict[str, object]:
        return {"location": self.location, "is_dst": self.is_dst}


@dataclass(frozen=True, slots=True)
class DstChange:
    next_change: datetime
    time_until_change_ms: int
    changes_to_dst: bool

    def as_dict(self) -> dict[str, object]:
        return {
            "next_change": self.next_change.isoformat(),
            "time_until_change_ms": self.time_until_change_ms,
            "changes_to_dst": self.changes_to_dst,
        }


class Timezones:
    """Local time for one timezone hint.

    Parameters
    ----------
    default_offset:
        Any hint understood by :class:`~tzpocket.resolver.ZoneResolver`: a zone
        id (misspellings are tolerated), country code, abbreviation, hour
        offset or ``±HH:MM`` string. ``None`` falls back to
        ``settings.default_hint`` and then to the host offset.
    clock:
        Source of "now". Defaults to the system clock, which honours
        :meth:`set_current_date`.
    table:
        Zone table to resolve against. Defaults to the embedded table.
    settings:
        Cache sizes, fuzzy threshold and geo precision. Defaults are used when
        omitted; nothing is read from disk.
    """

    def __init__(
        self,
        default_offset: object = None,
        *,
        clock: Clock | None = None,
        table: ZoneTable | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.hint = default_offset if default_offset is not None else self.settings.default_hint
        self.clock: Clock = clock if clock is not None else DEFAULT_CLOCK
        self.table = table if table is not None else load_zone_table()
        cache_cfg = self.settings.cache
        self.caches = TimezoneCaches.from_sizes(
            offsets=cache_cfg.offsets,
            dst=cache_cfg.dst,
            nth_weekday=cache_cfg.nth_weekday,
            offset_matches=cache_cfg.offset_matches,
        )
        self.codec = OffsetCodec(self.caches.offsets, self.caches.normalized)
        self.engine = DstRuleEngine(self.caches)
        self.resolver = ZoneResolver(
            self.table,
            engine=self.engine,
            codec=self.codec,
            caches=self.caches,
            clock=self.clock,
            threshold=self.settings.resolver.similarity_threshold,
        )
        self.geo = GeoApproximator(self.table, scale=self.settings.geo.scale)
        self._context: ResolvedZoneContext | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hint!r})"

    # ------------------------------------------------------------------
    # Resolution state
    # ------------------------------------------------------------------
    @property
    def context(self) -> ResolvedZoneContext:
        if self._context is None:
            self._context = self.resolver.resolve(self.hint)
        return self._context

    def clear_cache(self) -> None:
        """Forget the resolved zone and every memoized intermediate result."""

        self._context = None
        self.caches.clear()
        LOG.debug("Cleared caches for %r", self)

    def cache_stats(self) -> list[CacheStats]:
        return self.caches.stats()

    def _now(self) -> datetime:
        return as_utc(self.clock.now())

    def _record_is_dst(self, record: ZoneRecord, instant: datetime) -> bool:
        return record.observes_dst and self.engine.is_dst_active(instant, record.dst_rule)

    def _local_time(self, instant: datetime) -> LocalTime:
        context = self.context
        if context.record is not None:
            is_dst = self._record_is_dst(context.record, instant)
            minutes = self.codec.parse(context.record.offset_for(is_dst))
            return LocalTime(instant, minutes, context.record.abbreviation_for(is_dst))
        minutes = context.offset_minutes or 0
        return LocalTime(instant, minutes, _raw_abbreviation(minutes))

    # ------------------------------------------------------------------
    # Time queries
    # ------------------------------------------------------------------
    def get_date(self) -> LocalTime:
        return self._local_time(self._now())

    def get_time(self) -> str:
        """Return the local time as ``YYYY-MM-DDTHH:MM:SS±HH:MM``."""

        return self.get_date().isoformat()

    def get_hours(self) -> int:
        return self.get_date().hour

    def get_minutes(self) -> int:
        return self.get_date().minute

    def get_seconds(self) -> int:
        return self.get_date().second

    def get_location(self) -> str:
        return self.context.location

    def get_daylight_status(self, location: str | None = None) -> bool:
        """Return whether DST is in effect now for ``location`` or this zone.

        Fixed offsets never observe DST.
        """

        if location is None:
            record = self.context.record
        else:
            record = self.resolver.find_by_identifier(location)
            if record is None:
                record = self.resolver.resolve(location).record
        if record is None:
            return False
        return self._record_is_dst(record, self._now())

    def get_location_and_daylight_status(self) -> LocationStatus:
        return LocationStatus(self.get_location(), self.get_daylight_status())

    def convert_to_timezone(self, moment: datetime, target_tz: str | int | float) -> datetime:
        """Return ``moment`` expressed in ``target_tz``.

        ``target_tz`` may be an hour offset (``-5``, ``"+3"``), an offset string
        (``"+05:30"``, ``"UTC-4"``), a zone id, a country code or an
        abbreviation. Naive datetimes are taken as UTC.

        Raises
        ------
        UnknownTimezoneError
            If ``target_tz`` names nothing known or is an offset outside
            ``-12:00`` to ``+14:00``.
        OffsetFormatError
            If ``target_tz`` looks like an offset but its minutes are invalid.
        """

        instant = as_utc(moment)
        if isinstance(target_tz, (int, float)) and not isinstance(target_tz, bool):
            if not math.isfinite(target_tz):
                raise UnknownTimezoneError(f"Unsupported timezone target: {target_tz!r}")
            return instant.astimezone(_fixed_zone(round(target_tz * 60), target_tz))
        if not isinstance(target_tz, str):
            raise UnknownTimezoneError(f"Unsupported timezone target: {target_tz!r}")

        text = target_tz.strip()
        if _HOURS_RE.match(text):
            return instant.astimezone(_fixed_zone(int(text) * 60, target_tz))
        candidate = strip_utc_prefix(text) if text else text
        if candidate and is_offset_text(candidate):
            return instant.astimezone(_fixed_zone(self.codec.parse(candidate), target_tz))

        record = self.resolver.find_by_identifier(text)
        if record is None:
            raise UnknownTimezoneError(f"Unknown timezone: {target_tz!r}")
        is_dst = self._record_is_dst(record, instant)
        minutes = self.codec.parse(record.offset_for(is_dst))
        zone = timezone(timedelta(minutes=minutes), record.abbreviation_for(is_dst))
        return instant.astimezone(zone)

    def get_timezone_info(self, identifier: str) -> ZoneRecord | None:
        """Return the record for a zone id, country code or abbreviation."""

        return self.resolver.find_by_identifier(identifier)

    def get_approx_location(self, latitude: float, longitude: float) -> str:
        return self.geo.approximate(latitude, longitude)

    def get_time_until_next_dst_change(self) -> DstChange | None:
        record = self.context.record
        if record is None or not record.observes_dst:
            return None
        now = self._now()
        transition = self.engine.next_transition(now, record.dst_rule)
        if transition is None:
            return None
        return DstChange(
            next_change=transition.at,
            time_until_change_ms=(transition.at - now) // timedelta(milliseconds=1),
            changes_to_dst=transition.to_dst,
        )

    def format_time_until_next_dst_change(self) -> str:
        change = self.get_time_until_next_dst_change()
        if change is None:
            return "No DST changes for this timezone."
        total_seconds = change.time_until_change_ms // 1000
        days, remainder = divmod(total_seconds, 86400)
        hours, remainder = divmod(remainder, 3600)
        minutes, seconds = divmod(remainder, 60)
        phase = "starts" if change.changes_to_dst else "ends"
        return (
            f"Time until DST {phase}: {days} days, {hours} hours, "
            f"{minutes} minutes, and {seconds} seconds"
        )

    # ------------------------------------------------------------------
    # Simulated clock
    # ------------------------------------------------------------------
    @staticmethod
    def set_current_date(moment: datetime | None) -> None:
        """Pin "now" for every instance on the default clock; ``None`` resets it."""

        set_simulated_now(moment)

    @staticmethod
    def get_current_date() -> datetime:
        override = simulated_now()
        return override if override is not None else datetime.now(UTC)
