from __future__ import annotations

import math
from datetime import UTC, datetime

import pytest

from tzpocket.cache import TimezoneCaches
from tzpocket.clock import FixedClock
from tzpocket.resolver import ZoneResolver, string_similarity
from tzpocket.zones import UNKNOWN_ZONE, ZoneTable


@pytest.fixture
def resolver(table: ZoneTable, summer_clock: FixedClock) -> ZoneResolver:
    return ZoneResolver(table, clock=summer_clock)


def test_similarity_exact_and_case_insensitive() -> None:
    assert string_similarity("Warsaw", "warsaw") == 1.0


def test_similarity_single_typo() -> None:
    # five of six positions match and lengths are equal
    assert math.isclose(string_similarity("WarZaw", "Warsaw"), 0.8 * 5 / 6 + 0.2 * 3.0)


def test_similarity_length_imbalance() -> None:
    score = string_similarity("abc", "abcdef")
    char_ratio = 3 / 6
    pos_score = (6 + 5 + 4) / 6
    expected = char_ratio * (0.8 + 0.15 * 0.5) + pos_score * (0.2 - 0.15 * 0.5)
    assert math.isclose(score, expected)


def test_similarity_disjoint_and_empty() -> None:
    assert string_similarity("abc", "xyz") == 0.0
    assert string_similarity("", "x") == 0.0


def test_exact_zone_id(resolver: ZoneResolver) -> None:
    context = resolver.resolve("Asia/Tokyo")
    assert context.is_zone_mode
    assert context.location == "Asia/Tokyo"
    assert context.source == "zone_id"
    assert context.offset_minutes is None


@pytest.mark.parametrize(
    ("hint", "expected"),
    [("GB", "Europe/London"), ("US", "America/New_York"), ("EST", "America/New_York"), ("AEDT", "Australia/Sydney")],
)
def test_country_code_and_abbreviation(resolver: ZoneResolver, hint: str, expected: str) -> None:
    context = resolver.resolve(hint)
    assert context.location == expected
    assert context.source == "code"


def test_misspelled_city_resolves() -> None:
    resolver = ZoneResolver(ZoneTable.from_rows(_europe_rows()), clock=FixedClock())
    assert resolver.resolve("Europe/WarZaw").location == "Europe/Warsaw"


def test_misspelled_city_against_embedded_table(resolver: ZoneResolver) -> None:
    context = resolver.resolve("Europe/WarZaw")
    assert context.location == "Europe/Warsaw"
    assert context.source == "partial"


def test_wrong_country_and_city_is_unknown(resolver: ZoneResolver) -> None:
    context = resolver.resolve("WrongCountry/WrongCity")
    assert context.location == UNKNOWN_ZONE
    assert not context.is_zone_mode
    assert context.offset_minutes == 0


def test_unknown_continent_searches_city_substring(resolver: ZoneResolver) -> None:
    assert resolver.resolve("Somewhere/buenos_aires").location == "America/Argentina/Buenos_Aires"


def test_known_continent_is_case_insensitive(resolver: ZoneResolver) -> None:
    assert resolver.resolve("europe/warsaw").location == "Europe/Warsaw"
    assert resolver.resolve("America/New York").location == "America/New_York"


def test_known_continent_without_close_city_falls_back_to_first(resolver: ZoneResolver) -> None:
    assert resolver.resolve("Europe/Qqqqqq").location == "Europe/London"


def test_legacy_alias_maps_to_canonical(resolver: ZoneResolver) -> None:
    assert resolver.resolve("Asia/Rangoon").location == "Asia/Yangon"


def test_integer_hours_pick_standard_offset(resolver: ZoneResolver, table: ZoneTable) -> None:
    context = resolver.resolve(-4)
    assert not context.is_zone_mode
    assert context.offset_minutes == -240
    record = table.get(context.location)
    assert record is not None
    assert record.std_offset == "-04:00"


@pytest.mark.parametrize(
    ("hint", "minutes", "location"),
    [
        ("-4", -240, "America/Halifax"),
        ("+05:30", 330, "Asia/Kolkata"),
        ("UTC+5:30", 330, "Asia/Kolkata"),
        ("UTC", 0, "Europe/London"),
        ("5.75", 345, "Asia/Kathmandu"),
        (9.5, 570, "Australia/Adelaide"),
    ],
)
def test_offset_hints(resolver: ZoneResolver, hint: object, minutes: int, location: str) -> None:
    context = resolver.resolve(hint)
    assert context.offset_minutes == minutes
    assert context.location == location
    assert context.record is None


def test_daylight_offset_matches_zones_currently_in_dst(table: ZoneTable) -> None:
    # No zone keeps -02:30 as standard time; St. John's uses it in summer.
    summer = ZoneResolver(table, clock=FixedClock(datetime(2024, 7, 1, tzinfo=UTC)))
    assert summer.resolve("-02:30").location == "America/St_Johns"
    winter = ZoneResolver(table, clock=FixedClock(datetime(2024, 1, 1, tzinfo=UTC)))
    assert winter.locate_offset(-150) == "America/St_Johns"


def test_offset_without_any_zone_is_unknown(resolver: ZoneResolver) -> None:
    context = resolver.resolve("-11:30")
    assert context.offset_minutes == -690
    assert context.location == UNKNOWN_ZONE


def test_out_of_range_hours_fall_back_to_host(table: ZoneTable) -> None:
    resolver = ZoneResolver(table, clock=FixedClock(offset_minutes=60))
    context = resolver.resolve(30)
    assert context.offset_minutes == 60
    assert context.location == UNKNOWN_ZONE


@pytest.mark.parametrize("hint", [None, "", "   "])
def test_empty_hint_uses_host_offset(table: ZoneTable, hint: object) -> None:
    resolver = ZoneResolver(table, clock=FixedClock(offset_minutes=120))
    context = resolver.resolve(hint)
    assert context.source == "host"
    assert context.offset_minutes == 120
    assert context.location == "Europe/Athens"


def test_unresolvable_text_never_raises(resolver: ZoneResolver) -> None:
    for hint in ("Nowhere", "++", "Zz/", object(), ["Europe/Paris"]):
        context = resolver.resolve(hint)
        assert context.location == UNKNOWN_ZONE


def test_select_best_prefers_canonical_ids() -> None:
    rows = [
        ("IN", "Asia/Calcutta", "+05:30", "+05:30", "IST", "IST", "Asia", 22.5333, 88.3667, 0),
        ("IN", "Asia/Kolkata", "+05:30", "+05:30", "IST", "IST", "Asia", 22.5333, 88.3667, 0),
    ]
    resolver = ZoneResolver(ZoneTable.from_rows(rows), clock=FixedClock())
    assert resolver.resolve("+05:30").location == "Asia/Kolkata"
    assert resolver.select_best(list(resolver.table)[:1]).zone_id == "Asia/Calcutta"


def test_select_best_prefers_hinted_continent(resolver: ZoneResolver, table: ZoneTable) -> None:
    candidates = list(resolver.find_by_offset(60))
    assert resolver.select_best(candidates).zone_id == "Europe/Paris"
    assert resolver.select_best(candidates, "Africa/Lagoss").zone_id == "Africa/Lagos"
    assert resolver.select_best(candidates, "Africa/Tunis").zone_id == "Africa/Tunis"
    assert resolver.select_best(candidates, "Africa/Qqqq").zone_id == "Africa/Lagos"
    assert resolver.select_best([]) is None


def test_partial_id_falls_back_to_host_offset_when_continent_is_empty() -> None:
    rows = [
        ("FR", "Europe/Paris", "+01:00", "+02:00", "CET", "CEST", "Europe", 48.8667, 2.3333, 0x0A03),
        ("JP", "Asia/Tokyo", "+09:00", "+09:00", "JST", "JST", "Asia", 35.6544, 139.7447, 0),
    ]
    resolver = ZoneResolver(ZoneTable.from_rows(rows), clock=FixedClock(offset_minutes=540))
    assert resolver.resolve("Africa/Nowhere").location == "Asia/Tokyo"


def test_find_by_identifier(resolver: ZoneResolver) -> None:
    assert resolver.find_by_identifier("Europe/Berlin").zone_id == "Europe/Berlin"
    assert resolver.find_by_identifier("JP").zone_id == "Asia/Tokyo"
    assert resolver.find_by_identifier("PDT").zone_id == "America/Los_Angeles"
    assert resolver.find_by_identifier("Nowhere") is None


def test_offset_matches_are_cached(table: ZoneTable) -> None:
    caches = TimezoneCaches()
    resolver = ZoneResolver(table, caches=caches, clock=FixedClock())
    first = resolver.find_by_offset(60)
    assert resolver.find_by_offset(60) is first
    caches.clear()
    assert resolver.find_by_offset(60) == first


def test_threshold_controls_fuzzy_matching() -> None:
    resolver = ZoneResolver(ZoneTable.from_rows(_europe_rows()), clock=FixedClock(), threshold=1.5)
    assert resolver.resolve("Europe/WarZaw").location == "Europe/London"


def _europe_rows() -> list[tuple]:
    return [
        ("GB", "Europe/London", "+00:00", "+01:00", "GMT", "BST", "Europe", 51.5083, -0.1253, 0x0A03),
        ("AT", "Europe/Vienna", "+01:00", "+02:00", "CET", "CEST", "Europe", 48.2167, 16.3333, 0x0A03),
        ("PL", "Europe/Warsaw", "+01:00", "+02:00", "CET", "CEST", "Europe", 52.25, 21.0, 0x0A03),
    ]
