"""Print the month pacing report for goals given on the command line.

Usage:
    python scripts/month_report.py --goal "Appointments:50:20" --goal "Deals:30:12"
    python scripts/month_report.py --date 2026-11-15 --today 2026-11-15 --goal "Deals:30:12"
"""
import argparse
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.models.goal import Goal
from app.models.pacing import Period
from app.services import pacing_service


def parse_goal(value: str, goal_id: int) -> Goal:
    """Parse a NAME:TARGET:CURRENT argument."""
    try:
        name, target, current = value.rsplit(":", 2)
        return Goal(id=goal_id, name=name, target=float(target), current=float(current))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid goal '{value}', expected NAME:TARGET:CURRENT")


def format_optional(value, suffix: str = "") -> str:
    """Render a guarded figure, n/a when it does not apply."""
    if value is None:
        return "n/a"
    return f"{value:.1f}{suffix}"


def print_report(goals: list[Goal], today: date, period: Period) -> None:
    """Print summaries, the alert and the remaining calendar."""
    dashboard = pacing_service.build_dashboard(goals, today, period)

    print(f"Period: {period.start} - {period.end} (today {today})")
    print()

    for summary in dashboard.summaries:
        print(f"{summary.name}")
        print(f"  Complete:       {format_optional(summary.percent_complete, '%')}")
        print(f"  Working days:   {summary.remaining_working_days}")
        print(f"  Per day needed: {format_optional(summary.required_daily_pace)}")
        print(f"  {summary.comment}")

    if dashboard.alert:
        print()
        print(f"WARNING: {dashboard.alert_message}")

    print()
    view = pacing_service.calendar_view(goals, today, period)
    for day in view.days:
        if day.comment:
            print(f"{day.day:%a %d}  {day.comment}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Print the month pacing report")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Any day of the month to report on (default: today)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date used as today (default: the local date)",
    )
    parser.add_argument(
        "--goal",
        action="append",
        required=True,
        help="Goal as NAME:TARGET:CURRENT, may be repeated",
    )

    args = parser.parse_args()

    try:
        goals = [parse_goal(value, index) for index, value in enumerate(args.goal, start=1)]
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    today = args.today or date.today()
    period = Period.for_month(args.date or today)
    print_report(goals, today, period)


if __name__ == "__main__":
    main()
