"""
Stampline Color Log Formatter - stdlib logging records as stamped lines

PURPOSE:
    Lets code that already uses the logging module produce the same lines as
    format_message(). Level filtering stays with logging, so Debug records
    are rendered whenever logging lets them through.

WHO READS ME:
    - main.py: Uses CustomFormatter for the console log handler

WHO I READ:
    - formatter.py: render()
    - models.py: Category

LEVEL MAPPING:
    - DEBUG: Debug
    - INFO: Info
    - WARNING: Warn
    - ERROR, CRITICAL: Error
"""

import logging
from datetime import datetime

from stampline.formatter import render
from stampline.models import Category

LEVELS = {
    logging.DEBUG: Category.DEBUG,
    logging.INFO: Category.INFO,
    logging.WARNING: Category.WARN,
    logging.ERROR: Category.ERROR,
    logging.CRITICAL: Category.ERROR,
}


def category_for(levelno: int) -> Category:
    """category of the closest standard level at or below levelno"""
    for level in sorted(LEVELS, reverse=True):
        if levelno >= level:
            return LEVELS[level]
    return Category.DEBUG


class CustomFormatter(logging.Formatter):
    """return a formatter that prints log records as stamped, colored lines"""

    def __init__(self, strip_styling: bool = False):
        super().__init__("%(message)s")
        self.strip_styling = strip_styling

    def format(self, record):
        message = super().format(record)
        rendered = render(
            message,
            category_for(record.levelno),
            strip_styling=self.strip_styling,
            now=datetime.fromtimestamp(record.created),
        )
        return rendered.console
