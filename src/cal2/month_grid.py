from collections import namedtuple

from .cells import BLANK_CELL, format_cell
from .dates import MONTH_ABBRS, MONTH_NAMES, days_in_month, weekday
from .shared import MONTH_WIDTH, RESET, center_plain

MonthGrid = namedtuple("MonthGrid", ["year", "month", "header", "weeks"])


def month_header(year, month, colors, full_name=False):
    names = MONTH_NAMES if full_name else MONTH_ABBRS
    left, title, right = center_plain(f"{names[month - 1]} {year}", MONTH_WIDTH)
    return f"{left}{colors.month(month)}{title}{RESET}{right}"


def weekday_banner(colors, week_start):
    labels = week_start.labels
    sunday = f"{colors.sunday_title}{labels[week_start.sunday_column]}{RESET}"
    saturday = f"{colors.saturday_title}{labels[week_start.saturday_column]}{RESET}"
    if week_start.sunday_column == 0:
        workdays = " ".join(labels[1:6])
        return f"{sunday} {colors.workday_title}{workdays} {RESET}{saturday}"
    workdays = " ".join(labels[0:5])
    return f"{colors.workday_title}{workdays} {RESET}{saturday} {sunday}"


def week_count(year, month, week_start):
    leading = weekday(year, month, 1, week_start)
    return -(-(leading + days_in_month(year, month)) // 7)


def month_cells(year, month, context):
    """Rows of 7 cells for a month; None marks padding outside the month."""
    leading = weekday(year, month, 1, context.week_start)
    days = days_in_month(year, month)
    rows = []
    for week in range(week_count(year, month, context.week_start)):
        row = []
        for column in range(7):
            day = week * 7 + column - leading + 1
            if 1 <= day <= days:
                row.append(format_cell(year, month, day, context, days))
            else:
                row.append(None)
        rows.append(row)
    return rows


def build_month_grid(year, month, context):
    weeks = [
        " ".join(BLANK_CELL if cell is None else cell for cell in row)
        for row in month_cells(year, month, context)
    ]
    header = month_header(year, month, context.colors)
    return MonthGrid(year, month, header, weeks)
