"""
Preview production and recurring schedules from the command line.

Examples:
    python scripts/preview_schedule.py crop --quantity 32 --yield 8 \\
        --harvest 2025-06-15 --germination 3 --light 7
    python scripts/preview_schedule.py recurring --type FIXED_DAY \\
        --days 1 4 --start 2025-06-01 --lead-time 14 --skip 2025-06-12
"""

import argparse
import sys
import os
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError

from config import configure_logging
from exceptions import AppError
from models.crop import CropTiming
from models.recurring_schedule import RecurrenceType, RecurringScheduleDef
from services.production_schedule_service import get_production_schedule_service
from services.recurring_schedule_service import get_recurring_schedule_service
from utils.labels import format_short_date


def print_crop_schedule(args) -> None:
    timing = CropTiming(
        days_soaking=args.soak,
        days_germination=args.germination,
        days_light=args.light,
        avg_yield_per_tray=args.avg_yield,
    )
    schedule = get_production_schedule_service().schedule_order(
        quantity_oz=args.quantity,
        harvest_date=args.harvest,
        timing=timing,
        overage_percent=args.overage,
    )

    print("")
    print("=" * 50)
    print(f"PRODUCTION SCHEDULE: harvest {schedule.harvest_date}")
    print("=" * 50)
    print(f"  Trays needed:   {schedule.trays_needed}")
    print(f"  Total quantity: {schedule.total_quantity_oz} oz")
    if schedule.requires_soaking:
        print(f"  Soak:           {format_short_date(schedule.soak_date)}")
    print(f"  Seed:           {format_short_date(schedule.seed_date)}")
    print(f"  Move to light:  {format_short_date(schedule.move_to_light_date)}")
    print(f"  Harvest:        {format_short_date(schedule.harvest_date)}")
    print(f"  Growth days:    {schedule.total_growth_days}")


def print_recurring_dates(args) -> None:
    fields = {
        "schedule_type": RecurrenceType(args.type),
        "days_of_week": args.days or [],
        "interval_days": args.interval,
        "start_date": args.start,
        "end_date": args.end,
    }
    if args.lead_time is not None:
        fields["lead_time_days"] = args.lead_time
    schedule = RecurringScheduleDef(**fields)

    service = get_recurring_schedule_service()
    dates = service.get_upcoming_dates(schedule, args.skip or [], from_date=args.today)

    print("")
    print("=" * 50)
    print(f"RECURRING SCHEDULE: {service.describe_schedule(schedule)}")
    print("=" * 50)
    if not dates:
        print("  No upcoming dates")
    for d in dates:
        print(f"  {d.isoformat()}  ({format_short_date(d)})")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Production schedule preview",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LOG_LEVEL from settings",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    crop = subparsers.add_parser("crop", help="Backward schedule for one crop")
    crop.add_argument("--quantity", required=True, help="Requested oz")
    crop.add_argument("--yield", dest="avg_yield", required=True, help="Average oz per tray")
    crop.add_argument("--overage", default=None, help="Overage percent (default from settings)")
    crop.add_argument("--harvest", required=True, type=date.fromisoformat, help="YYYY-MM-DD")
    crop.add_argument("--soak", type=int, default=None, help="Soak days (omit for none)")
    crop.add_argument("--germination", type=int, required=True)
    crop.add_argument("--light", type=int, required=True)
    crop.set_defaults(handler=print_crop_schedule)

    recurring = subparsers.add_parser("recurring", help="Upcoming recurring dates")
    recurring.add_argument("--type", choices=[t.value for t in RecurrenceType], required=True)
    recurring.add_argument("--days", type=int, nargs="*", help="Weekdays, 0 = Sunday")
    recurring.add_argument("--interval", type=int, default=None, help="Days between harvests")
    recurring.add_argument("--start", type=date.fromisoformat, required=True)
    recurring.add_argument("--end", type=date.fromisoformat, default=None)
    recurring.add_argument("--lead-time", type=int, default=None)
    recurring.add_argument("--skip", type=date.fromisoformat, nargs="*")
    recurring.add_argument("--today", type=date.fromisoformat, default=None)
    recurring.set_defaults(handler=print_recurring_dates)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        args.handler(args)
    except AppError as e:
        print(f"\nError [{e.code}]: {e.message}", file=sys.stderr)
        return 1
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"\nError [VALIDATION_ERROR]: {field}: {error['msg']}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
