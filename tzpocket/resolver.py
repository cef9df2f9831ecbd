"""Map ambiguous timezone hints onto zone records.

A hint may be a zone identifier (possibly misspelled), a country code, an
abbreviation, an offset in hours or ``±HH:MM`` form, or nothing at all. The
resolver tries each interpretation in a fixed order and never raises: hints
that cannot be interpreted resolve to :data:`~tzpocket.zones.UNKNOWN_ZONE` at
the host's offset.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from .cache import MemoCache, TimezoneCaches
from .clock import DEFAULT_CLOCK, Clock
from .dst import DstRuleEngine
from .offsets import OffsetCodec, OffsetFormatError, is_offset_text, strip_utc_prefix
from .zones import CONTINENTS, LEGACY_ALIASES, UNKNOWN_ZONE, ZoneRecord, ZoneTable

LOG = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "MAX_OFFSET_MINUTES",
    "MIN_OFFSET_MINUTES",
    "ResolvedZoneContext",
    "ZoneResolver",
    "string_similarity",
]

DEFAULT_SIMILARITY_THRESHOLD = 0.5
MIN_OFFSET_MINUTES = -12 * 60
MAX_OFFSET_MINUTES = 14 * 60

_DECIMAL_HOURS_RE = re.compile(r"^[+-]?\d{1,2}\.\d+$")


def string_similarity(a: str, b: str) -> float:
    """Score how closely ``a`` resembles ``b``; ``1.0`` means equal.

    Characters are compared position by position, ignoring case. The score
    blends the fraction of matching positions with a bonus that favours
    matches near the start, so short left-anchored misspellings still score
    highly. Scores above ``1.0`` are possible for long near-matches.
    """

    a = a.lower()
    b = b.lower()
    if a == b:
        return 1.0
    max_len = max(len(a), len(b))
    min_len = min(len(a), len(b))
    matching = 0
    pos_score = 0.0
    for i in range(min_len):
        if a[i] == b[i]:
            matching += 1
            pos_score += (max_len - i) / max_len
    char_ratio = matching / max_len
    len_ratio = min_len / max_len
    char_weight = 0.8 + 0.15 * (1 - len_ratio)
    pos_weight = 0.2 - 0.15 * (1 - len_ratio)
    return char_ratio * char_weight + pos_score * pos_weight


@dataclass(frozen=True, slots=True)
class ResolvedZoneContext:
    """Outcome of resolving one hint.

    ``record`` is set in zone mode, where DST rules apply. Otherwise the
    context is in raw-offset mode and ``offset_minutes`` holds the fixed
    offset. ``location`` is the zone id reported to callers and ``source``
    names the resolution step that produced the context.
    """

    hint: object
    record: ZoneRecord | None
    offset_minutes: int | None
    location: str
    source: str

    @property
    def is_zone_mode(self) -> bool:
        return self.record is not None

    def as_dict(self) -> dict[str, object]:
        return {
            "hint": self.hint if isinstance(self.hint, (str, int, float)) or self.hint is None else repr(self.hint),
            "zone_id": self.record.zone_id if self.record else None,
            "offset_minutes": self.offset_minutes,
            "location": self.location,
            "source": self.source,
        }


class ZoneResolver:
    """Resolve hints against a :class:`~tzpocket.zones.ZoneTable`."""

    def __init__(
        self,
        table: ZoneTable,
        *,
        engine: DstRuleEngine | None = None,
        codec: OffsetCodec | None = None,
        caches: TimezoneCaches | None = None,
        clock: Clock | None = None,
        threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ) -> None:
        caches = caches if caches is not None else TimezoneCaches()
        self.table = table
        self.engine = engine if engine is not None else DstRuleEngine(caches)
        self.codec = codec if codec is not None else OffsetCodec(caches.offsets, caches.normalized)
        self.clock: Clock = clock if clock is not None else DEFAULT_CLOCK
        self.threshold = threshold
        self._offset_matches: MemoCache = caches.offset_matches

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def resolve(self, hint: object = None) -> ResolvedZoneContext:
        """Return the context for ``hint``, trying each interpretation in turn."""

        if hint is None or isinstance(hint, bool):
            return self._host_context(hint, "host")
        if isinstance(hint, (int, float)):
            minutes = self._hours_to_minutes(hint)
            if minutes is None:
                LOG.debug("Ignoring out of range hour offset %r", hint)
                return self._host_context(hint, "unknown")
            return self._offset_context(hint, minutes, "hours")
        if not isinstance(hint, str):
            LOG.debug("Unsupported hint type %s", type(hint).__name__)
            return self._host_context(hint, "unknown")

        text = hint.strip()
        if not text:
            return self._host_context(hint, "host")

        record = self.table.get(text)
        if record is not None:
            return self._zone_context(hint, record, "zone_id")

        record = self.table.find_by_code_or_abbreviation(text)
        if record is not None:
            return self._zone_context(hint, record, "code")

        minutes = self._parse_offset_hint(text)
        if minutes is not None:
            return self._offset_context(hint, minutes, "offset")

        if "/" in text:
            record = self.guess_from_partial_id(text)
            if record is not None:
                return self._zone_context(hint, record, "partial")

        LOG.debug("Could not resolve hint %r", hint)
        return self._host_context(hint, "unknown")

    def _zone_context(self, hint: object, record: ZoneRecord, source: str) -> ResolvedZoneContext:
        LOG.debug("Resolved %r to %s via %s", hint, record.zone_id, source)
        return ResolvedZoneContext(hint, record, None, record.zone_id, source)

    def _offset_context(self, hint: object, minutes: int, source: str) -> ResolvedZoneContext:
        location = self.locate_offset(minutes, hint)
        LOG.debug("Resolved %r to raw offset %d (%s)", hint, minutes, location)
        return ResolvedZoneContext(hint, None, minutes, location, source)

    def _host_context(self, hint: object, source: str) -> ResolvedZoneContext:
        minutes = self.host_offset_minutes()
        location = self.locate_offset(minutes) if source == "host" else UNKNOWN_ZONE
        return ResolvedZoneContext(hint, None, minutes, location, source)

    # ------------------------------------------------------------------
    # Offsets
    # ------------------------------------------------------------------
    def host_offset_minutes(self) -> int:
        return self.clock.local_offset_minutes(self.clock.now())

    @staticmethod
    def _hours_to_minutes(hours: float) -> int | None:
        if not math.isfinite(hours):
            return None
        minutes = round(hours * 60)
        if not MIN_OFFSET_MINUTES <= minutes <= MAX_OFFSET_MINUTES:
            return None
        return minutes

    def _parse_offset_hint(self, text: str) -> int | None:
        candidate = strip_utc_prefix(text)
        if _DECIMAL_HOURS_RE.match(candidate):
            return self._hours_to_minutes(float(candidate))
        if not is_offset_text(candidate):
            return None
        try:
            minutes = self.codec.parse(candidate)
        except OffsetFormatError:
            return None
        if not MIN_OFFSET_MINUTES <= minutes <= MAX_OFFSET_MINUTES:
            return None
        return minutes

    def find_by_offset(self, minutes: int, is_dst: bool = False) -> tuple[ZoneRecord, ...]:
        """Return every record whose standard (or DST) offset equals ``minutes``."""

        def compute() -> tuple[ZoneRecord, ...]:
            return tuple(
                record
                for record in self.table
                if self.codec.parse(record.offset_for(is_dst)) == minutes
            )

        return self._offset_matches.get_or_compute((minutes, bool(is_dst)), compute)

    def _offset_candidates(self, minutes: int, moment: datetime | None = None) -> list[ZoneRecord]:
        standard = list(self.find_by_offset(minutes, is_dst=False))
        if standard:
            return standard
        moment = moment if moment is not None else self.clock.now()
        daylight = self.find_by_offset(minutes, is_dst=True)
        active = [
            record
            for record in daylight
            if record.observes_dst and self.engine.is_dst_active(moment, record.dst_rule)
        ]
        return active or list(daylight)

    def locate_offset(self, minutes: int, hint: object = None) -> str:
        """Return the zone id that best represents a fixed offset."""

        record = self.select_best(self._offset_candidates(minutes), hint)
        return record.zone_id if record is not None else UNKNOWN_ZONE

    # ------------------------------------------------------------------
    # Candidate ranking
    # ------------------------------------------------------------------
    def select_best(self, candidates: Sequence[ZoneRecord], hint: object = None) -> ZoneRecord | None:
        """Pick one record out of ``candidates``.

        Canonical ids win over legacy spellings. When ``hint`` names a
        ``Continent/City``, records on that continent are preferred, then an
        exact id match, then the closest city name. Otherwise table order
        decides.
        """

        if not candidates:
            return None
        preferred = [record for record in candidates if not record.is_legacy_alias] or list(candidates)
        if isinstance(hint, str) and "/" in hint:
            continent = _match_continent(hint.split("/", 1)[0])
            if continent is not None:
                local = [record for record in preferred if record.continent == continent]
                if local:
                    for record in local:
                        if record.zone_id.lower() == hint.strip().lower():
                            return record
                    best = self.best_match(_city_token(hint), local)
                    return best if best is not None else local[0]
        return preferred[0]

    def best_match(self, city: str, records: Iterable[ZoneRecord]) -> ZoneRecord | None:
        """Return the record whose city scores highest against ``city``.

        Only scores strictly above the threshold count; the earliest record
        wins a tie.
        """

        best: ZoneRecord | None = None
        best_score = self.threshold
        for record in records:
            score = string_similarity(city, record.city)
            if score > best_score:
                best, best_score = record, score
        if best is not None:
            LOG.debug("Fuzzy matched %r to %s (score %.3f)", city, best.zone_id, best_score)
        return best

    def guess_from_partial_id(self, hint: str) -> ZoneRecord | None:
        """Guess a record for a possibly misspelled ``Continent/City`` id."""

        text = hint.strip()
        canonical = LEGACY_ALIASES.get(text)
        if canonical is not None and canonical in self.table:
            return self.table.get(canonical)

        city = _city_token(text)
        continent = _match_continent(text.split("/", 1)[0])
        if continent is None:
            needle = city.lower()
            if not needle:
                return None
            return next((r for r in self.table if needle in r.region.lower()), None)

        records = self.table.in_continent(continent)
        lowered = text.lower()
        for record in records:
            if record.zone_id.lower() == lowered:
                return record
        best = self.best_match(city, records)
        if best is not None:
            return best
        if records:
            return records[0]
        return self.select_best(self._offset_candidates(self.host_offset_minutes()), text)

    def find_by_identifier(self, identifier: str) -> ZoneRecord | None:
        """Look ``identifier`` up as a zone id, then a country code, then an abbreviation."""

        record = self.table.get(identifier)
        if record is not None:
            return record
        record = self.table.find_by_country(identifier)
        if record is not None:
            return record
        return self.table.find_by_abbreviation(identifier)


def _match_continent(token: str) -> str | None:
    token = token.strip().lower()
    return next((c for c in CONTINENTS if c.lower() == token), None)


def _city_token(hint: str) -> str:
    return hint.strip().rsplit("/", 1)[-1].replace(" ", "_")
