"""
Stampline Main Entry Point - CLI Argument Parsing and Application Bootstrap

PURPOSE:
    Entry point for the stampline CLI tool. Parses arguments, loads the
    configuration and prints one formatted line.

WHO READS ME:
    - Users: via CLI command `stampline` or `python -m stampline`

WHO I READ:
    - config.py: Configuration loading and defaults
    - console.py: format_message()
    - models.py: Category, CategoryError
    - colorlog.py: Custom log formatting

DEPENDENCIES:
    - argparse: CLI argument parsing
    - logging: Application logging
    - os, sys: System operations

FLOW:
    1. Parse CLI arguments (create_argparser)
    2. Load configuration from stampline.toml, or the environment if absent
    3. Apply CLI overrides, optionally write the configuration and exit
    4. Format the message and print it
"""

import argparse
import logging
import os
import sys

import stampline
from stampline.colorlog import CustomFormatter
from stampline.config import Config
from stampline.console import format_message
from stampline.models import Category, CategoryError, names

_LOGGER = logging.getLogger(__name__)


def valid_category(value):
    try:
        return Category.parse(value)
    except CategoryError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def create_argparser(parser_class=argparse.ArgumentParser):
    """create the argparser for stampline"""
    parser = parser_class(
        prog=stampline.__name__, description=stampline.__description__
    )
    config_settings = parser.add_argument_group("configuration")

    config_settings.add_argument(
        "-c",
        "--config",
        dest="configfile",
        help="Use the configuration from this file, defaults to %(default)s",
        default="stampline.toml",
    )
    config_settings.add_argument(
        "-w",
        "--write",
        dest="writeconfig",
        action="store_true",
        help="Write the effective configuration to a file and exit",
        default=False,
    )
    config_settings.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {stampline.__version__}"
    )
    config_settings.add_argument(
        "-l",
        "--loglevel",
        type=str,
        default=os.environ.get("LOG_LEVEL", "WARN"),
        help="DEBUG, INFO, WARN, ERROR, CRITICAL, defaults to %(default)s",
    )
    config_settings.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="show Debug messages",
    )
    config_settings.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="show Verbose messages",
    )

    parser.add_argument(
        "-C",
        "--category",
        type=valid_category,
        default=Category.INFO,
        help=f"Message category, one of {', '.join(names())}, default Info",
    )
    parser.add_argument(
        "-s",
        "--strip",
        dest="strip_styling",
        action="store_true",
        default=None,
        help="Do not emit ANSI color sequences",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        "--logfile",
        dest="outfile",
        default=None,
        help="Also append the plain line to this file",
    )
    parser.add_argument(
        "message",
        nargs="*",
        help="The message to format, words are joined by single spaces",
    )
    return parser


def get_log_level(level_name: str) -> tuple[int, bool]:
    log_levels = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    level_name = level_name.upper()
    if level_name in log_levels:
        return log_levels[level_name], False
    else:
        return logging.WARNING, True


def setup_logging(loglevel: str, strip_styling: bool = False):
    """sets up the logging, takes the given loglevel and uses the stamped,
    colorful log formatter
    """
    logging.basicConfig(level=logging.WARN)
    level, unknown_loglevel = get_log_level(loglevel)
    logging.root.setLevel(level)
    custom_formatter = CustomFormatter(strip_styling=strip_styling)
    for handler in logging.root.handlers:
        handler.setFormatter(custom_formatter)
    if unknown_loglevel:
        _LOGGER.warning("Unknown log level: %s", loglevel.upper())


def load_config(args) -> Config:
    """configuration file if present, otherwise the environment, then CLI flags"""
    if os.path.exists(args.configfile):
        cfg = Config.load(args.configfile)
    else:
        cfg = Config.from_env()
    for name in ("debug", "verbose", "strip_styling", "outfile"):
        value = getattr(args, name, None)
        if value is not None:
            setattr(cfg, name, value)
    return cfg


def main(argv=None):
    """main function, returns 0, argparse exits with 2 on bad arguments"""
    parser = create_argparser()
    args = parser.parse_args(argv)
    setup_logging(args.loglevel, bool(args.strip_styling))

    cfg = load_config(args)
    if args.writeconfig:
        cfg.save(args.configfile)
        _LOGGER.info("Configuration written to %s", args.configfile)
        return 0

    if not args.message:
        parser.error("a message is required")

    line = format_message(" ".join(args.message), args.category, config=cfg)
    if line is not None:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
