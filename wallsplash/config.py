"""
wallsplash Configuration Management

Settings come from three places, in order of preference: command line options, the
configuration file and the built-in defaults. This module reads the configuration file and
merges the three into a WallsplashConfig. Raise a WallsplashConfigError for any issues that
arise in processing or retrieving these configuration variables.

The configuration file is "config.json" and is looked up in ~/.config/wallsplash/ as per
modern Linux app conventions. WALLSPLASH_CONFIG_DIR and XDG_CONFIG_HOME are honoured. The
file may be flat:

    {"dir": "~/Pictures/wallpapers", "token": "...", "limit": 10}

or grouped the same way as the command line help:

    {"timeout": 1800, "local": {"dir": "..."}, "unsplash": {"token": "...", "refresh": 86400}}
"""

import json
import os
from dataclasses import dataclass, fields
from datetime import timedelta
from pathlib import Path
from typing import Mapping, Optional

from wallsplash.console import warn
from wallsplash.wallpaper_handler import DEFAULT_COMMAND

CONFIG_FILE_NAME = "config.json"

# tables in the config file and the settings they may hold
CONFIG_TABLES = {
    "local": ("dir",),
    "unsplash": ("token", "limit", "refresh", "cache_dir", "request_timeout"),
}


class WallsplashConfigError(Exception):
    """Raise when an issue occurs with handling wallsplash configuration."""

    pass


@dataclass
class WallsplashConfig:
    """
    Resolved settings for a wallsplash run. Durations are stored in seconds as they appear
    on the command line and in the config file; use the timedelta properties when handing
    them to the sources and the rotator.
    """

    dir: Path
    token: str
    limit: int = 10
    refresh: int = 24 * 60 * 60
    timeout: int = 30 * 60
    cache_dir: Optional[Path] = None
    command: str = DEFAULT_COMMAND
    request_timeout: float = 30.0

    def __post_init__(self):
        """
        Values read from JSON or the environment arrive as plain str and numbers, convert
        them to the declared types.
        """

        self.dir = Path(self.dir).expanduser()
        self.limit = int(self.limit)
        self.refresh = int(self.refresh)
        self.timeout = int(self.timeout)
        self.request_timeout = float(self.request_timeout)
        if self.cache_dir is not None:
            self.cache_dir = Path(self.cache_dir).expanduser()

    @property
    def refresh_interval(self) -> timedelta:
        return timedelta(seconds=self.refresh)

    @property
    def tick_timeout(self) -> timedelta:
        return timedelta(seconds=self.timeout)

    def validate(self) -> "WallsplashConfig":
        if self.limit < 1:
            raise WallsplashConfigError(f"limit must be a positive number, got {self.limit}.")

        for name in ("refresh", "timeout"):
            if getattr(self, name) < 0:
                raise WallsplashConfigError(f"{name} must not be negative.")

        # urllib3 rejects connect timeouts <= 0
        if self.request_timeout <= 0:
            raise WallsplashConfigError(
                f"request_timeout must be a positive number of seconds, got {self.request_timeout}."
            )

        if not self.command.strip():
            raise WallsplashConfigError("command must not be empty.")

        return self


def default_config_dir(environ: Mapping[str, str] = os.environ) -> Path:
    """
    Return the directory wallsplash reads its config file from. Only looks at the supplied
    environment mapping, so callers (and tests) decide what the environment is.
    """

    if environ.get("WALLSPLASH_CONFIG_DIR"):
        return Path(environ["WALLSPLASH_CONFIG_DIR"]).expanduser()

    if environ.get("XDG_CONFIG_HOME"):
        return Path(environ["XDG_CONFIG_HOME"]).expanduser() / "wallsplash"

    home = environ.get("HOME")
    base = Path(home) if home else Path.home()
    return base / ".config" / "wallsplash"


def flatten_table(table: dict) -> dict:
    """
    Lift the settings in the "local" and "unsplash" tables to the top level. Top level keys
    win over grouped ones.
    """

    flat = {}

    for group, keys in CONFIG_TABLES.items():
        section = table.get(group) or {}
        if not isinstance(section, dict):
            raise WallsplashConfigError(f"'{group}' in config file must be a table.")
        for key in keys:
            if key in section:
                flat[key] = section[key]

    known = {field.name for field in fields(WallsplashConfig)}
    flat.update({key: value for key, value in table.items() if key in known})

    return flat


def load_config_file(config_src: Optional[Path] = None) -> dict:
    """
    Load config.json and return its settings as a flat dict. A missing file is not an error,
    since the user may supply everything on the command line. Raise WallsplashConfigError if
    the file can't be read or parsed.
    """

    if config_src is None:
        config_src = default_config_dir() / CONFIG_FILE_NAME

    config_src = Path(config_src).expanduser()

    if not config_src.is_file():
        warn(f"no config file found at {config_src}, using command line options only")
        return {}

    try:
        with config_src.open("r") as file:
            from_json = json.loads(file.read())

    except json.JSONDecodeError as error:
        raise WallsplashConfigError(f"There was an issue reading the config: {error}")

    except OSError as error:
        raise WallsplashConfigError(f"There was an issue opening the config: {error}")

    if not isinstance(from_json, dict):
        raise WallsplashConfigError(
            f"There was an issue reading the config: {config_src} must contain a JSON object."
        )

    return flatten_table(from_json)


def resolve_config(cli_values: Mapping, file_values: Mapping) -> WallsplashConfig:
    """
    Merge command line values over config file values over defaults. Command line values
    of None mean the option was not given.
    """

    merged = dict(file_values)
    merged.update({key: value for key, value in cli_values.items() if value is not None})

    for required in ("dir", "token"):
        if not merged.get(required):
            raise WallsplashConfigError(
                f"need a value for '{required}' (command line option or config file)."
            )

    try:
        config = WallsplashConfig(**merged)

    except (TypeError, ValueError) as error:
        raise WallsplashConfigError(f"Invalid configuration: {error}")

    return config.validate()
