"""Typed zone records and the read-only table that holds them."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import lru_cache

from .dst import DstRule
from .offsets import OffsetFormatError, parse_offset

LOG = logging.getLogger(__name__)

__all__ = [
    "CONTINENTS",
    "LEGACY_ALIASES",
    "UNKNOWN_ZONE",
    "UnknownTimezoneError",
    "ZoneRecord",
    "ZoneTable",
    "ZoneTableError",
    "load_zone_table",
]

CONTINENTS: tuple[str, ...] = (
    "Africa",
    "America",
    "Antarctica",
    "Asia",
    "Atlantic",
    "Australia",
    "Europe",
    "Indian",
    "Pacific",
)

UNKNOWN_ZONE = "Unknown"

# Deprecated spellings kept by some devices, mapped to their canonical ids.
LEGACY_ALIASES: dict[str, str] = {
    "America/Buenos_Aires": "America/Argentina/Buenos_Aires",
    "America/Godthab": "America/Nuuk",
    "America/Indianapolis": "America/Indiana/Indianapolis",
    "Asia/Calcutta": "Asia/Kolkata",
    "Asia/Katmandu": "Asia/Kathmandu",
    "Asia/Rangoon": "Asia/Yangon",
    "Asia/Saigon": "Asia/Ho_Chi_Minh",
    "Europe/Kiev": "Europe/Kyiv",
    "Pacific/Truk": "Pacific/Chuuk",
}

_COUNTRY_RE = re.compile(r"^[A-Z]{2}$")
_ZONE_ID_RE = re.compile(r"^[A-Za-z_\-]+(/[A-Za-z0-9_\-+]+)+$")


class ZoneTableError(ValueError):
    """Raised when a zone table row violates the record invariants."""


class UnknownTimezoneError(LookupError):
    """Raised when a conversion target does not name any known zone."""


@dataclass(frozen=True, slots=True)
class ZoneRecord:
    """One row of the embedded timezone table."""

    country_code: str
    zone_id: str
    std_offset: str
    dst_offset: str
    std_abbr: str
    dst_abbr: str
    continent: str
    latitude: float
    longitude: float
    dst_rule: int = 0

    def __post_init__(self) -> None:
        if not _COUNTRY_RE.match(self.country_code):
            raise ZoneTableError(f"{self.zone_id}: invalid country code {self.country_code!r}")
        if not _ZONE_ID_RE.match(self.zone_id):
            raise ZoneTableError(f"Invalid zone identifier {self.zone_id!r}")
        if self.continent not in CONTINENTS:
            raise ZoneTableError(f"{self.zone_id}: unknown continent {self.continent!r}")
        if not self.zone_id.startswith(self.continent + "/"):
            raise ZoneTableError(f"{self.zone_id}: identifier does not start with {self.continent!r}")
        for label, value in (("std_offset", self.std_offset), ("dst_offset", self.dst_offset)):
            try:
                parse_offset(value)
            except OffsetFormatError as exc:
                raise ZoneTableError(f"{self.zone_id}: invalid {label} {value!r}") from exc
        for label, value in (("std_abbr", self.std_abbr), ("dst_abbr", self.dst_abbr)):
            if not value or len(value) > 6:
                raise ZoneTableError(f"{self.zone_id}: invalid {label} {value!r}")
            if value.upper() == "UTC":
                raise ZoneTableError(f"{self.zone_id}: {label} may not be 'UTC'")
        if not (math.isfinite(self.latitude) and -90.0 <= self.latitude <= 90.0):
            raise ZoneTableError(f"{self.zone_id}: latitude out of range")
        if not (math.isfinite(self.longitude) and -180.0 <= self.longitude <= 180.0):
            raise ZoneTableError(f"{self.zone_id}: longitude out of range")
        try:
            DstRule.decode(self.dst_rule)
        except ValueError as exc:
            raise ZoneTableError(f"{self.zone_id}: {exc}") from exc

    @property
    def city(self) -> str:
        return self.zone_id.rsplit("/", 1)[-1]

    @property
    def region(self) -> str:
        """Everything after the continent, e.g. ``Argentina/Buenos_Aires``."""

        return self.zone_id.split("/", 1)[1]

    @property
    def observes_dst(self) -> bool:
        return self.dst_rule != 0

    @property
    def is_legacy_alias(self) -> bool:
        return self.zone_id.startswith("Etc/") or self.zone_id in LEGACY_ALIASES

    def offset_for(self, is_dst: bool) -> str:
        return self.dst_offset if is_dst else self.std_offset

    def abbreviation_for(self, is_dst: bool) -> str:
        return self.dst_abbr if is_dst else self.std_abbr

    def as_dict(self) -> dict[str, object]:
        """Return the metadata record exposed to callers."""

        return {
            "code": self.country_code,
            "zone_id": self.zone_id,
            "std_offset": self.std_offset,
            "dst_offset": self.dst_offset,
            "std_abbr": self.std_abbr,
            "dst_abbr": self.dst_abbr,
            "continent": self.continent,
            "lat": self.latitude,
            "lon": self.longitude,
            "dst_rule": self.dst_rule,
        }


class ZoneTable(Sequence[ZoneRecord]):
    """Ordered, read-only collection of :class:`ZoneRecord` rows.

    Table order is significant: every lookup that can match several rows
    returns the earliest one.
    """

    def __init__(self, records: Iterable[ZoneRecord]) -> None:
        rows = tuple(records)
        by_id: dict[str, ZoneRecord] = {}
        for record in rows:
            if record.zone_id in by_id:
                raise ZoneTableError(f"Duplicate zone identifier {record.zone_id!r}")
            by_id[record.zone_id] = record
        self._records = rows
        self._by_id = by_id

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[object]]) -> "ZoneTable":
        records = []
        for position, row in enumerate(rows):
            if len(row) != 10:
                raise ZoneTableError(f"Row {position} has {len(row)} fields, expected 10")
            code, zone_id, std, dst, std_abbr, dst_abbr, continent, lat, lon, rule = row
            records.append(
                ZoneRecord(
                    country_code=str(code),
                    zone_id=str(zone_id),
                    std_offset=str(std),
                    dst_offset=str(dst),
                    std_abbr=str(std_abbr),
                    dst_abbr=str(dst_abbr),
                    continent=str(continent),
                    latitude=float(lat),  # type: ignore[arg-type]
                    longitude=float(lon),  # type: ignore[arg-type]
                    dst_rule=int(rule),  # type: ignore[call-overload]
                )
            )
        return cls(records)

    def __getitem__(self, index):  # type: ignore[override]
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ZoneRecord]:
        return iter(self._records)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_id
        return item in self._records

    def get(self, zone_id: str) -> ZoneRecord | None:
        return self._by_id.get(zone_id)

    def zone_ids(self) -> list[str]:
        return [record.zone_id for record in self._records]

    def find_by_country(self, code: str) -> ZoneRecord | None:
        return next((r for r in self._records if r.country_code == code), None)

    def find_by_abbreviation(self, abbr: str) -> ZoneRecord | None:
        return next((r for r in self._records if abbr in (r.std_abbr, r.dst_abbr)), None)

    def find_by_code_or_abbreviation(self, identifier: str) -> ZoneRecord | None:
        return next(
            (
                r
                for r in self._records
                if identifier in (r.country_code, r.std_abbr, r.dst_abbr)
            ),
            None,
        )

    def in_continent(self, continent: str) -> list[ZoneRecord]:
        prefix = continent + "/"
        return [r for r in self._records if r.zone_id.startswith(prefix)]


@lru_cache(maxsize=1)
def load_zone_table() -> ZoneTable:
    """Return the embedded zone table, validated on first use."""

    from .data.zones import ZONE_ROWS

    table = ZoneTable.from_rows(ZONE_ROWS)
    LOG.debug("Loaded %d zone records", len(table))
    return table
