from collections import namedtuple

from .dates import days_in_month, weekday
from .shared import REVERSE, styled

BLANK_CELL = "  "

RenderContext = namedtuple("RenderContext", ["colors", "events", "today", "week_start"])
RenderContext.__doc__ = """Everything a render needs, loaded once per run and never modified.

colors is a ColorAssignment, events an EventIndex, today a CalendarDate
(or None to disable highlighting) and week_start a WeekStart.
"""


def cell_style(year, month, day, context):
    """Style for one day: today, then first event, then weekday role."""
    if context.today is not None and (year, month, day) == tuple(context.today):
        return REVERSE

    if context.events.has_events(month, day):
        first = context.events.lookup(month, day)[0]
        return context.colors.category(first.category)

    column = weekday(year, month, day, context.week_start)
    if column == context.week_start.sunday_column:
        return context.colors.sunday_date
    if column == context.week_start.saturday_column:
        return context.colors.saturday_date
    return context.colors.workday_date


def format_cell(year, month, day, context, days=None):
    """Render a day as style + 2-column number + reset.

    Days outside the month render as a blank 2-column cell with no style.
    """
    if days is None:
        days = days_in_month(year, month)
    if not 1 <= day <= days:
        return BLANK_CELL
    return styled(f"{day:>2}", cell_style(year, month, day, context))
