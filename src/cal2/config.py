import os
from collections import namedtuple

from colorama import Fore

from .dates import parse_month
from .events import Category, EventIndex, parse_event_line
from .shared import error, warn

CONFIG_FILE_PATH = os.path.expanduser("~/.cal2/cal2.ini")
FALLBACK_CONFIG_PATHS = ["./cal2.ini"]
COLORS_SECTION = "colors"
COMMENT_PREFIXES = ("#", ";")


def _ansi256(code):
    return f"\033[38;5;{code}m"


COLOR_CODES = {
    "red": Fore.RED,
    "blue": Fore.BLUE,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "black": Fore.BLACK,
    "white": Fore.WHITE,
    "bright_red": Fore.LIGHTRED_EX,
    "bright_green": Fore.LIGHTGREEN_EX,
    "bright_yellow": Fore.LIGHTYELLOW_EX,
    "bright_blue": Fore.LIGHTBLUE_EX,
    "bright_magenta": Fore.LIGHTMAGENTA_EX,
    "bright_cyan": Fore.LIGHTCYAN_EX,
    "bright_white": Fore.LIGHTWHITE_EX,
    "orange": _ansi256(208),
    "purple": _ansi256(129),
    "pink": _ansi256(205),
    "brown": _ansi256(130),
    "gray": _ansi256(244),
    "grey": _ansi256(244),
    "dark_red": _ansi256(88),
    "dark_green": _ansi256(22),
    "dark_blue": _ansi256(18),
    "light_red": _ansi256(203),
    "light_green": _ansi256(119),
    "light_blue": _ansi256(117),
    "gold": _ansi256(220),
    "silver": _ansi256(250),
    "lime": _ansi256(154),
    "navy": _ansi256(17),
    "maroon": _ansi256(52),
    "olive": _ansi256(58),
    "teal": _ansi256(30),
    "aqua": _ansi256(51),
    "fuchsia": _ansi256(201),
    # Readable on light backgrounds
    "dark_gray": _ansi256(236),
    "dark_grey": _ansi256(236),
    "charcoal": _ansi256(238),
    "slate": _ansi256(240),
    "steel": _ansi256(67),
    "indigo": _ansi256(54),
    "violet": _ansi256(93),
    "crimson": _ansi256(160),
    "forest": _ansi256(28),
    "emerald": _ansi256(34),
    "sapphire": _ansi256(19),
    "amber": _ansi256(214),
    "coral": _ansi256(209),
    "rust": _ansi256(166),
    "bronze": _ansi256(136),
    "copper": _ansi256(173),
    "chocolate": _ansi256(94),
    "coffee": _ansi256(52),
    "wine": _ansi256(89),
    "plum": _ansi256(96),
    "midnight": _ansi256(17),
    "deep_blue": _ansi256(20),
    "deep_green": _ansi256(22),
    "deep_red": _ansi256(88),
    "deep_purple": _ansi256(55),
    "deep_orange": _ansi256(130),
    "royal_blue": _ansi256(21),
    "royal_purple": _ansi256(57),
    "sea_green": _ansi256(29),
    "sky_blue": _ansi256(75),
    "rose": _ansi256(168),
    "salmon": _ansi256(174),
    "peach": _ansi256(216),
    "mint": _ansi256(121),
    "lavender": _ansi256(183),
    "turquoise": _ansi256(80),
}

ROLE_NAMES = [
    "sunday_title",
    "saturday_title",
    "workday_title",
    "sunday_date",
    "saturday_date",
    "workday_date",
    "holiday",
    "birthday",
    "reminder",
]


def color_code(name):
    """Resolve a color name to its escape sequence; unknown names give ""."""
    return COLOR_CODES.get(name.strip().lower(), "")


class ColorAssignment(namedtuple("ColorAssignment", ROLE_NAMES + ["months"])):
    __slots__ = ()

    @classmethod
    def default(cls, bright=None):
        if bright is None:
            bright = os.name == "nt"
        prefix = "bright_" if bright else ""

        def pick(name):
            return color_code(prefix + name)

        return cls(
            sunday_title=pick("red"),
            saturday_title=pick("blue"),
            workday_title="",
            sunday_date=pick("red"),
            saturday_date=pick("blue"),
            workday_date="",
            holiday=pick("red"),
            birthday=pick("magenta"),
            reminder=pick("cyan"),
            months=tuple(
                pick(name)
                for name in [
                    "cyan",
                    "magenta",
                    "green",
                    "yellow",
                    "red",
                    "blue",
                    "yellow",
                    "green",
                    "magenta",
                    "red",
                    "cyan",
                    "blue",
                ]
            ),
        )

    def month(self, month):
        return self.months[month - 1]

    def category(self, category):
        return {
            Category.HOLIDAY: self.holiday,
            Category.BIRTHDAY: self.birthday,
            Category.REMINDER: self.reminder,
        }[category]

    def with_color(self, key, value):
        """Return a copy with the role or month named by key set to value.

        Returns None when key names neither a role nor a month.
        """
        key = key.strip().lower()
        if key in ROLE_NAMES:
            return self._replace(**{key: value})
        month = parse_month(key)
        if month is None:
            return None
        months = list(self.months)
        months[month - 1] = value
        return self._replace(months=tuple(months))


def locate_config():
    if os.path.exists(CONFIG_FILE_PATH):
        return CONFIG_FILE_PATH
    for path in FALLBACK_CONFIG_PATHS:
        if os.path.exists(path):
            return path
    return CONFIG_FILE_PATH


def read_config_lines(file_path, logger):
    logger.info(f"Attempting to read config file: {file_path}")
    if not os.path.exists(file_path):
        warn(
            f"Warning: Config file not found at '{file_path}'. "
            "Create cal2.ini in the current directory or ~/.cal2/cal2.ini",
            logger,
        )
        return []

    try:
        with open(file_path, encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
        lines = [line.rstrip("\n") for line in lines]
        logger.info(f"Successfully read {len(lines)} lines from file.")
        return lines
    except Exception as e:
        error(f"Error reading config file '{file_path}': {e}", logger)
        return []


def parse_config(lines, logger, colors=None):
    """Parse config lines into a (ColorAssignment, EventIndex) pair."""
    if colors is None:
        colors = ColorAssignment.default()
    events = []
    section = ""

    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        logger.trace(f"Processing line {line_number}: '{line}'")

        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1].strip().lower()
            logger.trace(f"Entered section '{section}'")
            continue

        if section == COLORS_SECTION:
            if "=" not in line:
                logger.debug(f"Ignoring colors line without '=': '{line}'")
                continue
            key, value = line.split("=", 1)
            updated = colors.with_color(key, color_code(value))
            if updated is None:
                logger.debug(f"Ignoring unknown color key '{key.strip()}'")
                continue
            colors = updated
            continue

        event = parse_event_line(line, section)
        if event is None:
            warn(f"Invalid date on line {line_number}, skipping: '{line}'", logger)
            continue
        logger.debug(
            f"Parsed {event.category.value} on {event.month}/{event.day}: '{event.description}'"
        )
        events.append(event)

    logger.info(f"Parsing complete. Found {len(events)} events.")
    return colors, EventIndex(events)


def load_config(file_path, logger):
    return parse_config(read_config_lines(file_path, logger), logger)
