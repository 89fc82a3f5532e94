"""Process-wide entry point: reads ambient preferences once and prints sink failures."""

import warnings

from stampline.config import Config
from stampline.formatter import emit, timestamp
from stampline.models import Category

_defaults: Config | None = None


def defaults() -> Config:
    """the process-wide configuration, read from the environment on first use"""
    global _defaults
    if _defaults is None:
        _defaults = Config.from_env()
    return _defaults


def reset_defaults(cfg: Config | None = None) -> None:
    """replace the cached process-wide configuration, None re-reads on next use"""
    global _defaults
    _defaults = cfg


def resolve_outfile(outfile: str | None, logfile: str | None) -> str | None:
    """map the deprecated logfile name onto outfile"""
    if logfile is None:
        return outfile
    warnings.warn(
        "logfile is deprecated, use outfile instead",
        DeprecationWarning,
        stacklevel=3,
    )
    if outfile is not None and outfile != logfile:
        raise TypeError("outfile and logfile given with different values")
    return logfile


def format_message(
    message: str,
    category: Category | str = Category.INFO,
    strip_styling: bool = False,
    outfile: str | None = None,
    *,
    config: Config | None = None,
    logfile: str | None = None,
) -> str | None:
    """format message, return the console line or None if it was gated off

    A failed append to outfile is reported as a plain error line on stdout,
    the formatted line is returned regardless.
    """
    cfg = config if config is not None else defaults()
    outfile = resolve_outfile(outfile, logfile)
    if outfile is None and cfg.outfile:
        outfile = cfg.outfile
    result = emit(
        message,
        category,
        strip_styling=strip_styling or cfg.strip_styling,
        outfile=outfile,
        verbosity=cfg.verbosity,
    )
    if result.warning:
        print(f"{timestamp()}{Category.ERROR.prefix}{result.warning}")
    return result.text
