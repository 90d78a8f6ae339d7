import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from finna_dates.config import get_settings
from finna_dates.dates.context import ParseContext
from finna_dates.dates.formatter import date_range_to_str
from finna_dates.drivers import DriverRegistry
from finna_dates.ir import Record
from finna_dates.logger import configure_cli_logging
from finna_dates.sink import WarningSink


def print_warnings(sink: WarningSink) -> None:
    for warning in sink.warnings:
        location = "/".join(part for part in (warning.source, warning.record_id) if part)
        prefix = f"[warn] {location}: " if location else "[warn] "
        print(f"{prefix}{warning.kind}: {warning.message}", file=sys.stderr)


def load_records(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data if isinstance(data, list) else [data]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Normalize record dates into search date ranges."
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL setting).",
    )
    parser.add_argument(
        "--log-warnings",
        action="store_true",
        help="Also log each record warning as it is recorded.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse raw date values of one record format.",
    )
    parse_parser.add_argument(
        "record_format",
        help="Record format: ead, ead3, lido, marc, qdc, lrmi or aipa.",
    )
    parse_parser.add_argument(
        "values",
        nargs="+",
        help="Raw date values.",
    )
    parse_parser.add_argument(
        "--instants",
        action="store_true",
        help="Print start and end instants instead of the range string.",
    )

    record_parser = subparsers.add_parser(
        "record",
        help="Map the dates of records in a JSON file to output fields.",
    )
    record_parser.add_argument(
        "--json",
        dest="json_path",
        required=True,
        help="JSON file with a record object or a list of them; "
        "an optional base_fields object holds the base driver output.",
    )
    return parser.parse_args(argv)


def run_parse(registry: DriverRegistry, args: argparse.Namespace) -> int:
    if registry.get(args.record_format) is None:
        print(f"[error] unknown record format: {args.record_format} "
              f"(known: {', '.join(registry.formats())})", file=sys.stderr)
        return 1

    sink = WarningSink()
    for value in args.values:
        ctx = ParseContext(source="cli", record_id=value, sink=sink)
        date_range = registry.parse_date_range(args.record_format, value, ctx)
        if date_range is None:
            print(f"{value}\t-")
        elif args.instants:
            print(f"{value}\t{date_range.start}\t{date_range.end}")
        else:
            print(f"{value}\t{date_range_to_str(date_range) or '-'}")
    print_warnings(sink)
    return 0


def run_record(registry: DriverRegistry, args: argparse.Namespace) -> int:
    path = Path(args.json_path).expanduser()
    if not path.is_file():
        print(f"[error] input not found: {args.json_path}", file=sys.stderr)
        return 1

    try:
        items = load_records(str(path))
    except (OSError, json.JSONDecodeError) as e:
        print(f"[error] cannot read {args.json_path}: {e}", file=sys.stderr)
        return 1

    sink = WarningSink()
    results = []
    for index, data in enumerate(items):
        if not isinstance(data, dict):
            print(f"[error] record {index} in {args.json_path} is not an object", file=sys.stderr)
            return 1
        data = dict(data)
        base_fields = data.pop("base_fields", None) or {}
        try:
            record = Record.model_validate(data)
        except ValidationError as e:
            print(f"[error] invalid record {index} in {args.json_path}: {e}", file=sys.stderr)
            return 1
        results.append(registry.to_field_map(record, base_fields, sink))
    print(json.dumps(results if len(results) != 1 else results[0], ensure_ascii=False, indent=2))
    print_warnings(sink)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"[error] invalid settings: {e}", file=sys.stderr)
        return 1
    try:
        configure_cli_logging(args.log_level or settings.LOG_LEVEL, args.log_warnings)
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    registry = DriverRegistry(settings)
    if args.command == "parse":
        return run_parse(registry, args)
    return run_record(registry, args)


if __name__ == "__main__":
    raise SystemExit(main())
