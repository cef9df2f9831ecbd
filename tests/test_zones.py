from __future__ import annotations

import pytest

from tzpocket.dst import DstRule
from tzpocket.offsets import parse_offset
from tzpocket.zones import (
    CONTINENTS,
    LEGACY_ALIASES,
    ZoneRecord,
    ZoneTable,
    ZoneTableError,
    load_zone_table,
)

WARSAW = ("PL", "Europe/Warsaw", "+01:00", "+02:00", "CET", "CEST", "Europe", 52.25, 21.0, 0x0A03)


def _row(**overrides: object) -> tuple:
    fields = dict(
        zip(
            (
                "country_code",
                "zone_id",
                "std_offset",
                "dst_offset",
                "std_abbr",
                "dst_abbr",
                "continent",
                "latitude",
                "longitude",
                "dst_rule",
            ),
            WARSAW,
        )
    )
    fields.update(overrides)
    return tuple(fields.values())


def test_embedded_table_loads_once(table: ZoneTable) -> None:
    assert load_zone_table() is table
    assert len(table) > 150


def test_embedded_table_invariants(table: ZoneTable) -> None:
    ids = table.zone_ids()
    assert len(ids) == len(set(ids))
    for record in table:
        assert record.continent in CONTINENTS
        assert record.zone_id.startswith(record.continent + "/")
        parse_offset(record.std_offset)
        parse_offset(record.dst_offset)
        if record.observes_dst:
            assert DstRule.decode(record.dst_rule) is not None
            assert record.std_offset != record.dst_offset
        else:
            assert record.std_offset == record.dst_offset
        assert "UTC" not in (record.std_abbr, record.dst_abbr)
        assert not record.zone_id.startswith("Etc/")


def test_every_continent_is_represented(table: ZoneTable) -> None:
    for continent in CONTINENTS:
        assert table.in_continent(continent), continent


def test_legacy_rows_point_at_canonical_rows(table: ZoneTable) -> None:
    legacy = [record for record in table if record.is_legacy_alias]
    assert legacy
    for record in legacy:
        assert LEGACY_ALIASES[record.zone_id] in table


def test_record_properties(table: ZoneTable) -> None:
    record = table.get("America/Argentina/Buenos_Aires")
    assert record is not None
    assert record.city == "Buenos_Aires"
    assert record.region == "Argentina/Buenos_Aires"
    assert not record.observes_dst
    assert not record.is_legacy_alias

    new_york = table.get("America/New_York")
    assert new_york is not None
    assert new_york.offset_for(True) == "-04:00"
    assert new_york.abbreviation_for(False) == "EST"


def test_as_dict_shape(table: ZoneTable) -> None:
    record = table.get("Asia/Tokyo")
    assert record is not None
    assert record.as_dict() == {
        "code": "JP",
        "zone_id": "Asia/Tokyo",
        "std_offset": "+09:00",
        "dst_offset": "+09:00",
        "std_abbr": "JST",
        "dst_abbr": "JST",
        "continent": "Asia",
        "lat": 35.6544,
        "lon": 139.7447,
        "dst_rule": 0,
    }


def test_lookups_follow_table_order(table: ZoneTable) -> None:
    assert table.find_by_country("US").zone_id == "America/New_York"
    assert table.find_by_abbreviation("CEST").zone_id == "Europe/Paris"
    assert table.find_by_code_or_abbreviation("GB").zone_id == "Europe/London"
    assert table.find_by_code_or_abbreviation("BST").zone_id == "Europe/London"
    assert table.find_by_code_or_abbreviation("XX") is None
    assert "Europe/Warsaw" in table


@pytest.mark.parametrize(
    "overrides",
    [
        {"country_code": "pl"},
        {"zone_id": "Warsaw"},
        {"continent": "Asia"},
        {"continent": "Moon"},
        {"std_offset": "one"},
        {"dst_abbr": "UTC"},
        {"std_abbr": ""},
        {"latitude": 91.0},
        {"longitude": float("nan")},
        {"dst_rule": 0x0D03},
        {"dst_rule": 0x10000},
    ],
)
def test_invalid_rows_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ZoneTableError):
        ZoneTable.from_rows([_row(**overrides)])


def test_zone_table_error_is_value_error() -> None:
    assert issubclass(ZoneTableError, ValueError)


def test_duplicate_ids_are_rejected() -> None:
    with pytest.raises(ZoneTableError, match="Duplicate"):
        ZoneTable.from_rows([WARSAW, WARSAW])


def test_short_rows_are_rejected() -> None:
    with pytest.raises(ZoneTableError):
        ZoneTable.from_rows([WARSAW[:9]])


def test_records_are_immutable() -> None:
    record = ZoneRecord(*WARSAW)
    with pytest.raises(AttributeError):
        record.zone_id = "Europe/Berlin"  # type: ignore[misc]
