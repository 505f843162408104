import enum
import re
from collections import namedtuple

DATE_TOKEN_PATTERN = re.compile(r"^([0-9]+)[/-]([0-9]+)$")


class Category(enum.Enum):
    HOLIDAY = "Holiday"
    BIRTHDAY = "Birthday"
    REMINDER = "Reminder"


SECTION_CATEGORIES = {
    "holiday": Category.HOLIDAY,
    "holidays": Category.HOLIDAY,
    "birthday": Category.BIRTHDAY,
    "birthdays": Category.BIRTHDAY,
    "reminder": Category.REMINDER,
    "reminders": Category.REMINDER,
}

Event = namedtuple("Event", ["month", "day", "description", "category"])


class EventIndex:
    """Events keyed by (month, day), kept in load order.

    Built once from a list of events and never modified afterwards.
    """

    def __init__(self, events=()):
        by_day = {}
        for event in events:
            by_day.setdefault((event.month, event.day), []).append(event)
        self._by_day = {key: tuple(value) for key, value in by_day.items()}
        self._count = sum(len(value) for value in self._by_day.values())

    def lookup(self, month, day):
        return self._by_day.get((month, day), ())

    def has_events(self, month, day):
        return (month, day) in self._by_day

    def __len__(self):
        return self._count


def parse_date_token(token):
    """Parse an `M/D` or `M-D` token into (month, day).

    Returns None if the token is not two integers or is outside 1-12/1-31.
    """
    match = DATE_TOKEN_PATTERN.match(token)
    if not match:
        return None
    month, day = int(match.group(1)), int(match.group(2))
    if not (1 <= month <= 12 and 1 <= day <= 31):
        return None
    return month, day


def category_for_section(section):
    return SECTION_CATEGORIES.get(section.lower()) if section else None


def infer_category(description):
    # Known ambiguity: a reminder mentioning "holiday" becomes a holiday.
    lowered = description.lower()
    if "birthday" in lowered:
        return Category.BIRTHDAY
    if "holiday" in lowered:
        return Category.HOLIDAY
    return Category.REMINDER


def parse_event_line(line, section):
    """Turn a trimmed event line into an Event, or None if the date is invalid."""
    parts = line.split(None, 1)
    if not parts:
        return None
    parsed = parse_date_token(parts[0])
    if parsed is None:
        return None
    month, day = parsed
    description = parts[1].strip() if len(parts) > 1 else ""
    category = category_for_section(section) or infer_category(description)
    return Event(month, day, description, category)
