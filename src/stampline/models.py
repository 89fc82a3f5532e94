"""
Stampline Data Models - Categories, Results and Errors

PURPOSE:
    Defines the value types passed between the formatter, the ambient wrapper,
    the log formatter and the CLI. Nothing in here outlives a single call.

WHO READS ME:
    - formatter.py: Category, Verbosity, Rendered, FormatResult
    - console.py: Category parsing, FormatResult
    - colorlog.py: Category
    - main.py: StamplineError, Category parsing for argparse

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - dataclasses: @dataclass decorator
    - enum: Category enumeration

KEY EXPORTS:
    - StamplineError: Base exception class for all stampline errors
    - CategoryError: Raised for a category outside the closed set
    - Category: Debug, Verbose, Info, Success, Warn, Error
    - Verbosity: explicit debug/verbose gating switches
    - Rendered: console and plain form of one line
    - FormatResult: outcome of one emit call

CATEGORY NAMES:
    Parsing is case-insensitive, "Warning" is an alias of "Warn".
"""

from dataclasses import dataclass
from enum import Enum


class StamplineError(Exception):
    """Base class for all errors raised by stampline"""


class CategoryError(StamplineError, ValueError):
    """the given category is not one of the known categories"""


class Category(Enum):
    """severity or kind of a message"""

    DEBUG = "Debug"
    VERBOSE = "Verbose"
    INFO = "Info"
    SUCCESS = "Success"
    WARN = "Warn"
    ERROR = "Error"

    @property
    def prefix(self) -> str:
        """tag placed between timestamp and message, empty for Info"""
        return _PREFIXES[self]

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        """return the category for value, raise CategoryError if unknown"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise CategoryError(f"invalid category {value!r}")
        key = value.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise CategoryError(
            f"invalid category {value!r}, valid categories are: {', '.join(names())}"
        )


_PREFIXES = {
    Category.DEBUG: "[DEBUG] ",
    Category.VERBOSE: "[VERBOSE] ",
    Category.INFO: "",
    Category.SUCCESS: "[SUCCESS] ",
    Category.WARN: "[WARNING] ",
    Category.ERROR: "[ERROR] ",
}

_ALIASES = {c.value.lower(): c for c in Category}
_ALIASES["warning"] = Category.WARN


def names() -> list[str]:
    """all accepted category names, aliases included"""
    return [c.value for c in Category] + ["Warning"]


@dataclass(frozen=True)
class Verbosity:
    """switches for the gated categories"""

    debug: bool = False
    verbose: bool = False

    def allows(self, category: Category) -> bool:
        if category is Category.DEBUG:
            return self.debug
        if category is Category.VERBOSE:
            return self.verbose
        return True


@dataclass(frozen=True)
class Rendered:
    """the console form and the plain (file) form of one line"""

    console: str
    plain: str


@dataclass(frozen=True)
class FormatResult:
    """outcome of a single emit call

    text is None when the category was gated off. warning carries the detail
    of a failed file append, the call itself still succeeded.
    """

    text: str | None = None
    plain: str | None = None
    warning: str | None = None

    @property
    def emitted(self) -> bool:
        return self.text is not None

    @property
    def ok(self) -> bool:
        return self.warning is None
