"""
Stampline Styles - ANSI Color Table per Category

PURPOSE:
    Holds the escape sequences used for console output and the fixed
    (timestamp, prefix, body) style triple of every category.

WHO READS ME:
    - formatter.py: STYLES, RESET, styled()
    - tests: strip_styling() to compare styled and plain output

WHO I READ:
    - models.py: Category

COLOR SCHEME:
    - Debug: grey timestamp, bold magenta tag, grey body
    - Verbose: grey timestamp, bold cyan tag, cyan body
    - Info: grey timestamp, default body
    - Success: grey timestamp, bold green tag, green body
    - Warn: grey timestamp, bold yellow tag, yellow body
    - Error: grey timestamp, bold red tag, red body

ATTRIBUTION:
    Based on: https://stackoverflow.com/questions/384076/how-can-i-color-python-logging-output
"""

import re
from dataclasses import dataclass

from stampline.models import Category

grey = "\x1b[38;20m"
white = "\x1b[37;20m"
magenta = "\x1b[35;20m"
bold_magenta = "\x1b[35;1m"
cyan = "\x1b[36;20m"
bold_cyan = "\x1b[36;1m"
green = "\x1b[32;20m"
bold_green = "\x1b[32;1m"
yellow = "\x1b[33;20m"
bold_yellow = "\x1b[33;1m"
red = "\x1b[31;20m"
bold_red = "\x1b[31;1m"
RESET = "\x1b[0m"

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


@dataclass(frozen=True)
class Style:
    """color/weight sequences for the three segments of a line"""

    timestamp: str
    prefix: str
    body: str


STYLES = {
    Category.DEBUG: Style(grey, bold_magenta, grey),
    Category.VERBOSE: Style(grey, bold_cyan, cyan),
    Category.INFO: Style(grey, "", white),
    Category.SUCCESS: Style(grey, bold_green, green),
    Category.WARN: Style(grey, bold_yellow, yellow),
    Category.ERROR: Style(grey, bold_red, red),
}


def styled(text: str, code: str) -> str:
    """wrap text in code and a reset, empty text stays empty"""
    if text == "":
        return ""
    return f"{code}{text}{RESET}"


def strip_styling(text: str) -> str:
    """remove all ANSI escape sequences from text"""
    return _ANSI_RE.sub("", text)
