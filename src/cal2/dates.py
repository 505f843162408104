"""Gregorian date arithmetic used by the calendar layout."""

import datetime
import enum
from collections import namedtuple

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
MONTH_ABBRS = [name[:3] for name in MONTH_NAMES]

_MONTH_DAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


class WeekStart(enum.Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"

    @property
    def labels(self):
        if self is WeekStart.MONDAY:
            return ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
        return ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]

    @property
    def sunday_column(self):
        return 6 if self is WeekStart.MONDAY else 0

    @property
    def saturday_column(self):
        return 5 if self is WeekStart.MONDAY else 6


class CalendarDate(namedtuple("CalendarDate", ["year", "month", "day"])):
    __slots__ = ()

    @classmethod
    def today(cls):
        now = datetime.date.today()
        return cls(now.year, now.month, now.day)


def weekday(year, month, day, week_start=WeekStart.SUNDAY):
    """Day of week in [0, 6] using Zeller's congruence.

    Column 0 is Sunday for WeekStart.SUNDAY and Monday for WeekStart.MONDAY.
    """
    if month <= 2:
        month += 12
        year -= 1
    k = year % 100
    j = year // 100
    h = (day + 13 * (month + 1) // 5 + k + k // 4 + j // 4 + 5 * j) % 7
    # h == 0 is Saturday
    result = (h + 6) % 7
    if week_start is WeekStart.MONDAY:
        result = (result + 6) % 7
    return result


def is_leap_year(year):
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year, month):
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month]


def shift_month(year, month, delta):
    """Return (year, month) moved by delta months, wrapping across years."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def parse_month(token):
    """Parse a month given as a full name, a 3-letter abbreviation or 1-12.

    Returns None when the token is not a month.
    """
    token = token.strip().lower()
    if token.isascii() and token.isdigit():
        value = int(token)
        return value if 1 <= value <= 12 else None
    for index, name in enumerate(MONTH_NAMES, start=1):
        if token in (name.lower(), MONTH_ABBRS[index - 1].lower()):
            return index
    return None
