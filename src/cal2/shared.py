import logging
import os
import sys

from colorama import Fore, Style
from rich.console import Console
from rich.text import Text

LOG_DIR = os.path.expanduser("~/.cache/cal2")
MONTH_WIDTH = 20
PAGE_WIDTH = 80

RESET = Style.RESET_ALL
REVERSE = "\033[7m"

TRACE_LEVEL_NUM = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


class TraceLogger(logging.Logger):
    def trace(self, message, *args, **kws):
        if self.isEnabledFor(TRACE_LEVEL_NUM):
            self._log(TRACE_LEVEL_NUM, message, args, **kws)


logging.setLoggerClass(TraceLogger)

console = Console(stderr=True, highlight=False)


def setup_logging(log_level, log_filename="cal2.log"):
    log_file_path = os.path.join(LOG_DIR, log_filename)

    logger = logging.getLogger("cal2")
    logger.setLevel(log_level)

    if logger.hasHandlers():
        logger.handlers.clear()

    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        handler = logging.FileHandler(log_file_path)
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    except Exception as e:
        print(
            f"{Fore.RED}Failed to configure logging to '{log_file_path}': {e}{Style.RESET_ALL}",
            file=sys.stderr,
        )
        logger.addHandler(logging.NullHandler())

    return logger


def warn(message, logger):
    print(f"{Fore.YELLOW}{message}{Style.RESET_ALL}", file=sys.stderr)
    logger.warning(message)


def error(message, logger):
    print(f"{Fore.RED}{message}{Style.RESET_ALL}", file=sys.stderr)
    logger.error(message)


def styled(text, style):
    """Wrap text in a style prefix and a reset, even when the style is empty."""
    return f"{style}{text}{RESET}"


def visible_width(text):
    """Number of terminal columns text occupies, ignoring escape sequences."""
    return Text.from_ansi(text).cell_len


def pad_visible(text, width):
    return text + " " * max(0, width - visible_width(text))


def center_plain(text, width):
    """Truncate text to width and return (left_padding, text, right_padding)."""
    text = text[:width]
    left = (width - len(text)) // 2
    return " " * left, text, " " * (width - len(text) - left)
