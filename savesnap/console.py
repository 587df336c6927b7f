import logging
import sys

import colorama
from colorama import Fore, Style

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LINE_FORMAT = "%(asctime)s | %(message)s"

LEVEL_COLORS = {
    logging.DEBUG: Style.DIM,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Style.BRIGHT + Fore.RED,
    logging.CRITICAL: Style.BRIGHT + Fore.RED,
}

# Colors callers can request per message with extra={"color": ...}
GREEN = Fore.GREEN
YELLOW = Fore.YELLOW
BLUE = Fore.BLUE


class ColorFormatter(logging.Formatter):
    """Wrap the message in the record's color, or the level color if none was given."""

    def format(self, record):
        line = super().format(record)
        color = getattr(record, "color", None) or LEVEL_COLORS.get(record.levelno)
        if not color:
            return line
        stamp, sep, message = line.partition(" | ")
        if not sep:
            return f"{color}{line}{Style.RESET_ALL}"
        return f"{stamp}{sep}{color}{message}{Style.RESET_ALL}"


def setup_logging(verbose=False, log_file=None, stream=None):
    """Configure the root logger for console output (and an optional plain log file)."""
    colorama.just_fix_windows_console()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ColorFormatter(LINE_FORMAT, datefmt=DATE_FORMAT))
    handlers = [handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s", datefmt=DATE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        handlers=handlers, force=True)
