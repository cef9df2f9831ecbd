from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from tzpocket.clock import FixedClock, set_simulated_now
from tzpocket.zones import ZoneTable, load_zone_table

US_RULE = 0x1B23
EU_RULE = 0x0A03
AU_RULE = 0x141A


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep settings files out of the real home and reset the simulated clock."""

    monkeypatch.setenv("TZPOCKET_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("TZPOCKET_SETTINGS_FILE", raising=False)
    monkeypatch.delenv("TZPOCKET_LOG_LEVEL", raising=False)
    set_simulated_now(None)
    yield
    set_simulated_now(None)


@pytest.fixture
def summer_clock() -> FixedClock:
    """Mid northern summer: US and EU zones are on daylight time."""

    return FixedClock(datetime(2024, 7, 4, 12, 0, tzinfo=UTC))


@pytest.fixture
def winter_clock() -> FixedClock:
    return FixedClock(datetime(2024, 1, 15, 12, 0, tzinfo=UTC))


@pytest.fixture
def table() -> ZoneTable:
    return load_zone_table()
