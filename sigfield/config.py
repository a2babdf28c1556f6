import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from sigfield.errors import InvalidArgumentsError

DEFAULT_CONFIG_PATH = "config.ini"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    strict: bool = True
    make_parents: bool = True
    tooltip: Optional[str] = None


def parse_log_level(level: str) -> str:
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        raise InvalidArgumentsError(
            f"Invalid log level: {level} (expected one of {', '.join(LOG_LEVELS)})"
        )
    return name


def load_settings(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Read settings from an INI file.

    A missing file is not an error: every option has a default.
    """
    config = configparser.ConfigParser()
    try:
        config.read(config_path, encoding="utf-8")
    except configparser.Error as e:
        raise InvalidArgumentsError(f"Invalid config file {config_path}: {e}") from e

    try:
        log_level = parse_log_level(
            config.get("logging", "level", fallback=Settings.log_level)
        )
        strict = config.getboolean("pdf", "strict", fallback=Settings.strict)
        make_parents = config.getboolean(
            "output", "make_parents", fallback=Settings.make_parents
        )
    except ValueError as e:
        raise InvalidArgumentsError(f"Invalid config file {config_path}: {e}") from e

    tooltip = config.get("field", "tooltip", fallback="").strip() or None

    return Settings(
        log_level=log_level,
        strict=strict,
        make_parents=make_parents,
        tooltip=tooltip,
    )
