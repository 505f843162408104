import argparse
import logging

from colorama import just_fix_windows_console

from . import calendar_view
from .cells import RenderContext
from .config import CONFIG_FILE_PATH, load_config, locate_config
from .dates import CalendarDate, WeekStart, parse_month
from .shared import console, setup_logging

MIN_YEAR_ARG = 1900
MAX_YEAR_ARG = 2100


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cal2",
        usage="%(prog)s [options] [[[day] month] year]\n       %(prog)s [options] <monthname> [year]",
        description="Display a calendar with holidays, birthdays and reminders.",
        epilog=f"Events are loaded from {CONFIG_FILE_PATH}\n"
        "Format: M/D Description (e.g., 12/25 Christmas)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-3", "--three", action="store_true", help="Display prev/current/next month"
    )
    parser.add_argument(
        "-m", "--monday", action="store_true", help="Monday as first day of week"
    )
    parser.add_argument(
        "-y", "--year", action="store_true", help="Display a calendar for the whole year"
    )
    parser.add_argument(
        "-Y", "--twelve", action="store_true", help="Display the next twelve months"
    )
    parser.add_argument(
        "-c", "--config", type=str, help="Path to the config file", default=None
    )
    parser.add_argument("date", nargs="*", help=argparse.SUPPRESS)
    return parser


def _parse_year(token):
    if not token.isascii():
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    return value if 1 <= value <= 9999 else None


def resolve_reference(values, today):
    """Pick the (year, month) to show from trailing positional arguments.

    Values that do not parse are ignored and today's value is kept.
    """
    year, month = today.year, today.month
    if len(values) >= 2:
        parsed_month = parse_month(values[-2])
        parsed_year = _parse_year(values[-1])
        if parsed_month is not None:
            month = parsed_month
        if parsed_year is not None:
            year = parsed_year
    elif len(values) == 1:
        token = values[0]
        parsed_month = parse_month(token)
        parsed_year = _parse_year(token)
        if parsed_month is not None:
            month = parsed_month
        elif parsed_year is not None and MIN_YEAR_ARG <= parsed_year <= MAX_YEAR_ARG:
            year = parsed_year
    return year, month


def main(argv=None):
    parser = build_parser()
    args, unknown = parser.parse_known_intermixed_args(argv)

    DESIRED_LOG_LEVEL = logging.INFO
    logger = setup_logging(DESIRED_LOG_LEVEL)
    logger.info("--- cal2 started ---")
    if unknown:
        logger.debug(f"Ignoring unrecognized arguments: {unknown}")

    just_fix_windows_console()

    today = CalendarDate.today()
    year, month = resolve_reference(args.date, today)
    week_start = WeekStart.MONDAY if args.monday else WeekStart.SUNDAY
    mode = calendar_view.select_mode(
        three=args.three, year=args.year, twelve=args.twelve
    )
    logger.info(f"Rendering {mode.value} view for {year}-{month:02d}")

    try:
        config_path = args.config or locate_config()
        colors, events = load_config(config_path, logger)
        context = RenderContext(colors, events, today, week_start)
        calendar_view.run(mode, year, month, context)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}", exc_info=True)
        console.print(f"[bold red]An unexpected error occurred: {e}[/]")

    return 0


if __name__ == "__main__":
    main()
