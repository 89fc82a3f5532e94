"""
Stampline Formatter - Message Formatting and File Sink

PURPOSE:
    Turns a message and a category into a timestamped line. The console form
    carries ANSI styling unless stripped, the plain form never does and is the
    one appended to the optional output file.

WHO READS ME:
    - console.py: emit() behind format_message()
    - colorlog.py: render() for stdlib log records
    - main.py: indirectly via console.py

WHO I READ:
    - models.py: Category, Verbosity, Rendered, FormatResult
    - styles.py: STYLES, styled()

LINE FORMAT:
    [Ddd Mmm DD HH:MM:SS YYYY] [TAG] message
    Example: "[Sat Oct 17 09:05:01 2026] [ERROR] An error occurred."
    Info lines carry no tag. In the file, line breaks inside the message are
    written as a literal \\n so every call appends exactly one line.
"""

import logging
import re
from datetime import datetime

from stampline.models import Category, FormatResult, Rendered, Verbosity
from stampline.styles import STYLES, styled

_LOGGER = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def timestamp(now: datetime | None = None) -> str:
    """bracketed ctime layout followed by a space, day is space padded"""
    if now is None:
        now = datetime.now()
    # datetime.ctime() uses fixed English names regardless of the locale
    return f"[{now.ctime()}] "


def render(
    message: str,
    category: Category = Category.INFO,
    strip_styling: bool = False,
    now: datetime | None = None,
) -> Rendered:
    """build both forms of a line from the same timestamp, no gating here"""
    category = Category.parse(category)
    stamp = timestamp(now)
    prefix = category.prefix
    plain = f"{stamp}{prefix}{message}"
    if strip_styling:
        return Rendered(console=plain, plain=plain)
    style = STYLES[category]
    console = (
        styled(stamp, style.timestamp)
        + styled(prefix, style.prefix)
        + styled(message, style.body)
    )
    return Rendered(console=console, plain=plain)


def single_line(text: str) -> str:
    """escape line breaks so text occupies exactly one physical line"""
    return _LINE_BREAK_RE.sub(r"\\n", text)


def append_line(path: str, line: str) -> str | None:
    """append line to path, return the error detail instead of raising"""
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(single_line(line) + "\n")
    except OSError as exc:
        _LOGGER.debug("append to %s failed: %s", path, exc)
        return str(exc)
    return None


def emit(
    message: str,
    category: Category | str = Category.INFO,
    strip_styling: bool = False,
    outfile: str | None = None,
    verbosity: Verbosity = Verbosity(),
    now: datetime | None = None,
) -> FormatResult:
    """format message and optionally append its plain form to outfile

    An invalid category raises CategoryError before anything is written.
    Debug and Verbose messages are dropped unless verbosity allows them, in
    that case the result is empty and the file is left untouched.
    """
    category = Category.parse(category)
    if not verbosity.allows(category):
        return FormatResult()
    rendered = render(message, category, strip_styling, now)
    warning = None
    if outfile:
        detail = append_line(outfile, rendered.plain)
        if detail is not None:
            warning = f"Could not write to {outfile}: {detail}"
    return FormatResult(text=rendered.console, plain=rendered.plain, warning=warning)
