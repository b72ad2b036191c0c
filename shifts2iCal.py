#!/usr/bin/env python3
"""Duty roster to iCalendar converter.

Generates a recurring hospital / on-call / lane / weekend roster
and writes it as an iCalendar (.ics) file.
"""

import argparse
import logging
import sys
from datetime import date, datetime
from typing import Optional, Sequence

from roster import (
    RosterParameters,
    RotationPolicy,
    Schedule,
    TimeWindow,
    generate_schedule,
)
from transformer import ICalTransformer, read_events

LOG_FORMAT = "%(asctime)s.%(msecs)03d:%(levelname)s:%(name)s:%(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

DEFAULT_HOSPITAL = ("07:00", "17:00")
DEFAULT_ODC = ("17:00", "22:00")
DEFAULT_LANE = ("08:00", "17:00")
DEFAULT_WEEKEND = ("06:00", "23:59")
DEFAULT_PREVIEW = 150


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: '{date_str}'. Expected YYYY-MM-DD."
        )


def parse_rotation_order(value: str) -> list[str]:
    """Split a comma-separated list of names, dropping blanks."""
    return [name.strip() for name in value.split(",") if name.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a duty roster and export it as iCalendar.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 shifts2iCal.py --start-date 2026-01-05 --rotation-order "Ana,Ben,Cleo"
  python3 shifts2iCal.py --start-date 2026-01-05 --rotation-order "Ana,Ben" \\
      --policy single --lane-every 2 --hide-odc-when-lane -o roster.ics
        """
    )

    parser.add_argument(
        "--start-date",
        type=parse_date,
        default=None,
        help="First day of week 0 (format: YYYY-MM-DD), required unless --read"
    )
    parser.add_argument(
        "--years",
        type=float,
        default=1.0,
        help="Length of the roster in years (default: 1)"
    )
    parser.add_argument(
        "--rotation-order",
        type=parse_rotation_order,
        default=None,
        help="Comma-separated list of people in rotation order, required unless --read"
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in RotationPolicy],
        default=RotationPolicy.MODULAR.value,
        help="modular: hospital/on-call/off rotate together (needs 3+ people); "
             "single: one duty person per week (default: modular)"
    )
    parser.add_argument(
        "--rotation-weeks",
        type=int,
        default=None,
        help="Cycle length for the single policy (default: number of people)"
    )
    parser.add_argument(
        "--lane-every",
        type=int,
        default=4,
        help="Lane week every N weeks (default: 4)"
    )
    parser.add_argument(
        "--lane-weekend-every",
        type=int,
        default=4,
        help="Lane weekend every N weeks (default: 4)"
    )

    windows = parser.add_argument_group("shift times (HH:MM)")
    windows.add_argument("--hospital-start", default=DEFAULT_HOSPITAL[0])
    windows.add_argument("--hospital-end", default=DEFAULT_HOSPITAL[1])
    windows.add_argument("--odc-start", default=DEFAULT_ODC[0])
    windows.add_argument("--odc-end", default=DEFAULT_ODC[1])
    windows.add_argument("--lane-start", default=DEFAULT_LANE[0])
    windows.add_argument("--lane-end", default=DEFAULT_LANE[1])
    windows.add_argument("--weekend-start", default=DEFAULT_WEEKEND[0],
                         help="Saturday start time")
    windows.add_argument("--weekend-end", default=DEFAULT_WEEKEND[1],
                         help="Sunday end time")

    parser.add_argument(
        "--show-off",
        action="store_true",
        help="Emit OFF events for people not on duty (modular policy)"
    )
    parser.add_argument(
        "--double-off",
        action="store_true",
        help="On lane weeks also emit OFF for the normally-off person (modular policy)"
    )
    parser.add_argument(
        "--hide-odc-when-lane",
        action="store_true",
        help="Drop the ODC event on lane weeks (single policy)"
    )

    parser.add_argument(
        "-o", "--output",
        default="shift_schedule.ics",
        help="Output file path (default: shift_schedule.ics)"
    )
    parser.add_argument(
        "--read",
        metavar="ICS_FILE",
        default=None,
        help="Preview an existing .ics export instead of generating"
    )
    parser.add_argument(
        "--preview",
        type=int,
        default=DEFAULT_PREVIEW,
        help=f"Number of events to print (default: {DEFAULT_PREVIEW})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def params_from_args(args: argparse.Namespace) -> RosterParameters:
    """Build roster parameters from parsed arguments.

    Raises:
        RosterConfigError: If the rotation settings are invalid.
    """
    return RosterParameters(
        start_date=args.start_date,
        years=args.years,
        rotation_order=args.rotation_order,
        policy=RotationPolicy(args.policy),
        rotation_weeks=args.rotation_weeks,
        hospital=TimeWindow(args.hospital_start, args.hospital_end),
        on_call=TimeWindow(args.odc_start, args.odc_end),
        lane=TimeWindow(args.lane_start, args.lane_end),
        weekend=TimeWindow(args.weekend_start, args.weekend_end),
        lane_every_weeks=args.lane_every,
        lane_weekend_every=args.lane_weekend_every,
        show_off=args.show_off,
        double_off=args.double_off,
        hide_odc_when_lane=args.hide_odc_when_lane,
    )


def print_preview(events: Schedule, limit: int) -> None:
    """Print the event count and the first `limit` events."""
    print(f"{len(events)} events.")
    if limit <= 0 or not events:
        return

    print(f"Showing first {min(limit, len(events))}:")
    for event in events[:limit]:
        start = event.start.strftime("%Y-%m-%d %H:%M")
        end = event.end.strftime("%Y-%m-%d %H:%M")
        print(f"  {event.title}: {start} -> {end}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for roster generation and export."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.read is None and (args.start_date is None or args.rotation_order is None):
        parser.error("--start-date and --rotation-order are required unless --read is given")

    if args.verbose:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT,
                            level=logging.DEBUG)

    # Ensure output file has .ics extension
    output_path = args.output
    if not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"

    try:
        if args.read is not None:
            with open(args.read, "rb") as f:
                print_preview(read_events(f.read()), args.preview)
            return

        params = params_from_args(args)
        events = generate_schedule(params)
        print_preview(events, args.preview)

        transformer = ICalTransformer()
        transformer.transform(events)
        transformer.save(output_path)

        print(f"Schedule saved to: {output_path}")

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
