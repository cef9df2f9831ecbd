"""Command line interface for tzpocket."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from .boot.logging import configure_logging
from .clock import set_simulated_now
from .config.settings import Settings, default_settings, load_settings, save_settings
from .runtime_config import RuntimeSettings
from .timezones import Timezones
from .zones import CONTINENTS, UnknownTimezoneError, load_zone_table

LOG = logging.getLogger(__name__)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _parse_instant(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid ISO-8601 datetime: {text!r}") from exc


def _timezones(args: argparse.Namespace) -> Timezones:
    return Timezones(getattr(args, "tz", None), settings=args.settings)


def cmd_now(args: argparse.Namespace) -> int:
    tz = _timezones(args)
    date = tz.get_date()
    status = tz.get_location_and_daylight_status()
    if args.json:
        payload = date.as_dict()
        payload.update(status.as_dict())
        _print_json(payload)
    else:
        print(str(date))
        print(f"Location: {status.location}")
        print(f"DST: {'yes' if status.is_dst else 'no'}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    record = _timezones(args).get_timezone_info(args.identifier)
    if record is None:
        print(f"Unknown timezone: {args.identifier}", file=sys.stderr)
        return 1
    if args.json:
        _print_json(record.as_dict())
    else:
        for key, value in record.as_dict().items():
            print(f"{key}: {value}")
    return 0


def cmd_locate(args: argparse.Namespace) -> int:
    try:
        zone_id = _timezones(args).get_approx_location(args.lat, args.lon)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    if args.json:
        _print_json({"lat": args.lat, "lon": args.lon, "zone_id": zone_id})
    else:
        print(zone_id)
    return 0


def cmd_next_dst(args: argparse.Namespace) -> int:
    tz = _timezones(args)
    if args.json:
        change = tz.get_time_until_next_dst_change()
        _print_json(
            {
                "location": tz.get_location(),
                "change": change.as_dict() if change is not None else None,
            }
        )
    else:
        print(tz.format_time_until_next_dst_change())
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    try:
        converted = _timezones(args).convert_to_timezone(args.moment, args.target)
    except (UnknownTimezoneError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    if args.json:
        _print_json(
            {
                "input": args.moment.isoformat(),
                "target": args.target,
                "result": converted.isoformat(),
                "abbreviation": converted.tzname(),
            }
        )
    else:
        print(converted.isoformat())
    return 0


def cmd_zones(args: argparse.Namespace) -> int:
    table = load_zone_table()
    records = table.in_continent(args.continent) if args.continent else list(table)
    if args.json:
        _print_json([record.as_dict() for record in records])
    else:
        for record in records:
            print(record.zone_id)
    return 0


def _settings_target(args: argparse.Namespace) -> Path:
    return args.config or args.runtime.config_file_path()


def cmd_config_path(args: argparse.Namespace) -> int:
    print(_settings_target(args))
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    data = args.settings.model_dump()
    if args.json:
        _print_json(data)
    else:
        print(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), end="")
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    target = _settings_target(args)
    if target.exists() and not args.force:
        print(f"{target} already exists (use --force to overwrite)", file=sys.stderr)
        return 1
    print(save_settings(default_settings(), target))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tzpocket",
        description="Offline timezone and DST lookups",
    )
    parser.add_argument("--config", type=Path, help="Path to a YAML settings file")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (e.g. DEBUG)")
    parser.add_argument(
        "--simulate",
        type=_parse_instant,
        metavar="ISO",
        help="Pretend the current time is this ISO-8601 instant (naive means UTC)",
    )

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--json", action="store_true", help="Emit JSON instead of text")

    zone_hint = argparse.ArgumentParser(add_help=False)
    zone_hint.add_argument(
        "--tz",
        help="Zone id, country code, abbreviation or offset (defaults to the host offset)",
    )

    sub = parser.add_subparsers(dest="command")

    now = sub.add_parser("now", parents=[output, zone_hint], help="Show the current local time")
    now.set_defaults(func=cmd_now)

    info = sub.add_parser("info", parents=[output], help="Show the record for a zone")
    info.add_argument("identifier", help="Zone id, country code or abbreviation")
    info.set_defaults(func=cmd_info)

    locate = sub.add_parser("locate", parents=[output], help="Nearest zone to a coordinate")
    locate.add_argument("lat", type=float)
    locate.add_argument("lon", type=float)
    locate.set_defaults(func=cmd_locate)

    next_dst = sub.add_parser(
        "next-dst", parents=[output, zone_hint], help="Time until the next DST change"
    )
    next_dst.set_defaults(func=cmd_next_dst)

    convert = sub.add_parser("convert", parents=[output], help="Convert an instant to another zone")
    convert.add_argument("moment", type=_parse_instant, help="ISO-8601 instant (naive means UTC)")
    convert.add_argument("target", help="Offset, zone id, country code or abbreviation")
    convert.set_defaults(func=cmd_convert)

    zones = sub.add_parser("zones", parents=[output], help="List known zone identifiers")
    zones.add_argument("--continent", choices=CONTINENTS)
    zones.set_defaults(func=cmd_zones)

    config = sub.add_parser("config", help="Inspect or create the settings file")
    config_sub = config.add_subparsers(dest="config_command", required=True)
    config_path_cmd = config_sub.add_parser("path", help="Print the settings file location")
    config_path_cmd.set_defaults(func=cmd_config_path)
    config_show = config_sub.add_parser("show", parents=[output], help="Print the effective settings")
    config_show.set_defaults(func=cmd_config_show)
    config_init = config_sub.add_parser("init", help="Write a settings file with default values")
    config_init.add_argument("--force", action="store_true", help="Overwrite an existing file")
    config_init.set_defaults(func=cmd_config_init)

    return parser


def _resolve_settings(args: argparse.Namespace, runtime: RuntimeSettings) -> Settings:
    if args.config is not None:
        return load_settings(args.config)
    return runtime.persisted()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    args.runtime = runtime = RuntimeSettings()
    try:
        args.settings = _resolve_settings(args, runtime)
    except ValueError as exc:
        parser.error(f"invalid settings file: {exc}")
    try:
        configure_logging(args.log_level or runtime.log_level or args.settings.logging.level)
    except ValueError as exc:
        parser.error(str(exc))

    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0

    LOG.debug("Running %s", args.command)
    if args.simulate is not None:
        set_simulated_now(args.simulate)
    try:
        return func(args)
    finally:
        if args.simulate is not None:
            set_simulated_now(None)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
