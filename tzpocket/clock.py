"""Clock providers and the process-wide simulated instant."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable

LOG = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CLOCK",
    "Clock",
    "FixedClock",
    "SimulatedClock",
    "SystemClock",
    "as_utc",
    "set_simulated_now",
    "simulated_now",
]

_simulated: datetime | None = None


def as_utc(moment: datetime) -> datetime:
    """Return ``moment`` as an aware UTC datetime; naive values are taken as UTC."""

    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def set_simulated_now(moment: datetime | None) -> None:
    """Override "now" for every clock that honours the simulation, or reset it."""

    global _simulated
    if moment is not None and not isinstance(moment, datetime):
        raise TypeError(f"Simulated instant must be a datetime or None, got {type(moment).__name__}")
    _simulated = as_utc(moment) if moment is not None else None
    if _simulated is None:
        LOG.debug("Simulated clock cleared")
    else:
        LOG.debug("Simulated clock set to %s", _simulated.isoformat())


def simulated_now() -> datetime | None:
    return _simulated


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant and the host's UTC offset."""

    def now(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""

    def local_offset_minutes(self, moment: datetime | None = None) -> int:
        """Return the host's UTC offset in minutes at ``moment``."""


class SystemClock:
    """Wall clock of the host machine."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def local_offset_minutes(self, moment: datetime | None = None) -> int:
        reference = as_utc(moment) if moment is not None else datetime.now(UTC)
        offset = reference.astimezone().utcoffset() or timedelta(0)
        return int(offset.total_seconds() // 60)


class SimulatedClock(SystemClock):
    """System clock that yields the simulated instant whenever one is set."""

    def now(self) -> datetime:
        override = simulated_now()
        return override if override is not None else super().now()


@dataclass(slots=True)
class FixedClock:
    """Clock frozen at ``moment`` with a configurable host offset, for tests."""

    moment: datetime = field(default_factory=lambda: datetime(2024, 1, 1, tzinfo=UTC))
    offset_minutes: int = 0

    def __post_init__(self) -> None:
        self.moment = as_utc(self.moment)

    def now(self) -> datetime:
        return self.moment

    def local_offset_minutes(self, moment: datetime | None = None) -> int:
        return self.offset_minutes

    def set(self, moment: datetime) -> None:
        self.moment = as_utc(moment)

    def advance(self, delta: timedelta) -> None:
        self.moment = self.moment + delta


DEFAULT_CLOCK = SimulatedClock()
