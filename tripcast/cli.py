"""tripcast CLI: plan a trip by weather from the command line."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from tripcast.config.settings import load_settings
from tripcast.domain.exceptions import TripPlanningError
from tripcast.i18n.messages import available_locales, get_catalog
from tripcast.services.trip_planner import TripPlanner
from tripcast.shared.exceptions import ToolError


class _SegmentAction(argparse.Action):
    """Keeps --sunny/--cloudy in command-line order."""

    def __call__(self, parser, namespace, values, option_string=None):
        segments = list(getattr(namespace, "segments", None) or [])
        segments.append((self.dest, values))
        namespace.segments = segments


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tripcast", description="Plan a trip across locations by weather forecast.")
    parser.add_argument("location_ids", nargs="+", type=int, help="Yandex geoids, tried in this order")
    parser.add_argument("--sunny", type=int, action=_SegmentAction, metavar="DAYS", help="append sunny days")
    parser.add_argument("--cloudy", type=int, action=_SegmentAction, metavar="DAYS", help="append cloudy days")
    parser.add_argument("--max", dest="max_days", type=int, default=None, help="max consecutive days per location")
    parser.add_argument("--locale", choices=available_locales(), default=None)
    parser.add_argument("--json", action="store_true", help="print the trip as JSON")
    parser.set_defaults(segments=[])
    return parser


def _format_trip(trip) -> str:
    return "\n".join(f"day {item.day}: location {item.location_id}" for item in trip)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)
    settings = load_settings()

    planner = TripPlanner(args.location_ids, catalog=get_catalog(args.locale or settings.locale))
    for kind, days in args.segments:
        if kind == "sunny":
            planner.sunny(days)
        else:
            planner.cloudy(days)
    planner.max(args.max_days)

    try:
        trip = asyncio.run(planner.build())
    except (TripPlanningError, ToolError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([item.model_dump() for item in trip], ensure_ascii=False))
    else:
        print(_format_trip(trip))
    return 0


if __name__ == "__main__":
    sys.exit(main())
