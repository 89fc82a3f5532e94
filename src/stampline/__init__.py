"""
Stampline - timestamped, optionally colored message lines

Package Structure:
    - models.py: Category, Verbosity, FormatResult and errors
    - styles.py: ANSI style table per category
    - formatter.py: render() and emit(), the core formatter and file sink
    - config.py: Configuration management
    - console.py: format_message(), the process-wide entry point
    - colorlog.py: stdlib logging formatter producing stamped lines
    - main.py: CLI entry point and argument parsing

Entry Points:
    - stampline: CLI command (calls main.main())
    - python -m stampline: Direct module execution

Public API Exports:
    - format_message(): format a message using the process-wide preferences
    - emit(): format a message with explicit verbosity, returns FormatResult
    - Category, Verbosity, FormatResult, Config
    - StamplineError, CategoryError
    - __version__: Package version from metadata
    - __description__: Package description from metadata
"""

import importlib.metadata as importlib_metadata

from .config import Config
from .console import format_message
from .formatter import emit, render
from .models import Category, CategoryError, FormatResult, StamplineError, Verbosity

_metadata = importlib_metadata.metadata("stampline")
__version__ = _metadata["Version"]
__description__ = _metadata["Summary"]


__all__ = [
    "Category",
    "CategoryError",
    "Config",
    "FormatResult",
    "StamplineError",
    "Verbosity",
    "emit",
    "format_message",
    "render",
]
