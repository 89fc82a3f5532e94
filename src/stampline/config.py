"""
Stampline Configuration - Configuration Loading and Defaults Management

PURPOSE:
    Holds the preferences the formatter itself does not own: whether Debug and
    Verbose messages are shown, whether styling is stripped and the default
    output file. Values come from a TOML file, the environment or defaults.

WHO READS ME:
    - main.py: Config.load() and Config.save() for the CLI
    - console.py: Config.from_env() for the process-wide defaults

WHO I READ:
    - models.py: Verbosity

DEPENDENCIES:
    - serde: TOML serialization/deserialization (@deserialize, @serialize)
    - serde.toml: from_toml(), to_toml()
    - dataclasses: @dataclass decorator
    - logging: Configuration loading status messages

CONFIG PARAMETERS:
    - debug: show Debug messages (default: false)
    - verbose: show Verbose messages (default: false)
    - strip_styling: never emit ANSI sequences (default: false)
    - outfile: default file sink, empty for none (default: "")

ENVIRONMENT:
    - STAMPLINE_DEBUG, STAMPLINE_VERBOSE: 1/true/yes/on enable the category
    - STAMPLINE_OUTFILE: default file sink
    - NO_COLOR: any non-empty value strips styling

FILE FORMAT:
    stampline.toml example:
    ```toml
    debug = false
    verbose = true
    strip_styling = false
    outfile = "stampline.log"
    ```
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from serde import deserialize, serialize, SerdeError
from serde.toml import from_toml, to_toml

from stampline.models import Verbosity

_LOGGER = logging.getLogger(__name__)

TRUTHY = ("1", "true", "yes", "on")


def env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in TRUTHY


@deserialize
@serialize
@dataclass
class Config:
    """stampline preferences"""

    debug: bool = False
    verbose: bool = False
    strip_styling: bool = False
    outfile: str = ""

    @property
    def verbosity(self) -> Verbosity:
        return Verbosity(debug=self.debug, verbose=self.verbose)

    @classmethod
    def load(cls, filename: str) -> "Config":
        """load the configuration from the given file"""
        try:
            with open(filename, encoding="utf-8") as handle:
                cfg = from_toml(cls, handle.read())
            _LOGGER.info("Configuration loaded from file %s", filename)
        except FileNotFoundError:
            cfg = cls()
            _LOGGER.info("no configuration file %s, using defaults", filename)
        except (OSError, TypeError, ValueError, SerdeError) as exc:
            _LOGGER.error(exc)
            cfg = cls()
            _LOGGER.warning("using configuration defaults")
        return cfg

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """build the configuration from environment variables"""
        if environ is None:
            environ = os.environ
        return cls(
            debug=env_flag(environ, "STAMPLINE_DEBUG"),
            verbose=env_flag(environ, "STAMPLINE_VERBOSE"),
            strip_styling=bool(environ.get("NO_COLOR", "")),
            outfile=environ.get("STAMPLINE_OUTFILE", ""),
        )

    def save(self, filename: str):
        """save the configuration to the given file"""
        with open(filename, "w+", encoding="utf-8") as handle:
            handle.write(to_toml(self))
