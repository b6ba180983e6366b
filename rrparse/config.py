"""Parse option validation and configuration file loading."""

import json
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional

from .constants import DEFAULT_CONFIG_FILES, DEFAULT_OPTIONS
from .dates import parse_timestamp
from .errors import InvalidConfigurationError


def validate_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """
    Check parse options against the known keys and fill in defaults.

    Args:
        options: Caller-supplied options

    Returns:
        A new dict holding every known key

    Raises:
        InvalidConfigurationError: Listing every unrecognized key
    """
    invalid = [key for key in options if key not in DEFAULT_OPTIONS]
    if invalid:
        raise InvalidConfigurationError(invalid)

    merged = dict(DEFAULT_OPTIONS)
    merged.update(options)
    return merged


@dataclass(frozen=True)
class ParseConfiguration:
    """
    Validated parse options.

    Attributes:
        dtstart: Default rule start, overriding the document's DTSTART
        cache: Let built rules memoize their occurrences
        unfold: Treat the input as lines with RFC 5545 continuation lines
        forceset: Always return a RuleSet
        compatible: Shorthand for forceset and unfold; also keeps the
            document's DTSTART as an occurrence when dtstart is given
        tzid: Default timezone identifier
    """

    dtstart: Optional[datetime] = None
    cache: bool = False
    unfold: bool = False
    forceset: bool = False
    compatible: bool = False
    tzid: Optional[str] = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "ParseConfiguration":
        merged = validate_options(options)
        if merged["compatible"]:
            merged["forceset"] = True
            merged["unfold"] = True
        return cls(**merged)


def find_default_config() -> Optional[str]:
    """
    Find a parse options file.

    Looks for ./rrparse.json, then ./.rrparse.json, then ~/.rrparse.json.

    Returns:
        Path to the first file found, or None
    """
    for name in DEFAULT_CONFIG_FILES:
        if os.path.isfile(name):
            return name

    home_config = Path.home() / ".rrparse.json"
    if home_config.is_file():
        return str(home_config)

    return None


def load_config(path: str) -> dict[str, Any]:
    """
    Load parse options from a JSON file.

    Expected JSON structure (every key optional):
    {
        "dtstart": "20250101T090000Z",
        "cache": false,
        "unfold": true,
        "forceset": false,
        "compatible": false,
        "tzid": "Europe/Paris"
    }

    Args:
        path: Path to the JSON configuration file

    Returns:
        Options with ``dtstart`` decoded, ready for parse()

    Raises:
        FileNotFoundError: If config file doesn't exist
        PermissionError: If config file can't be read
        InvalidConfigurationError: If the file names unknown options
        ValueError: If config format is invalid
    """
    try:
        with open(path, encoding="utf-8") as f:
            cfg = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format: {e}")

    if not isinstance(cfg, dict):
        raise ValueError("Config file must contain a JSON object")

    validate_options(cfg)

    for key in ("cache", "unfold", "forceset", "compatible"):
        if key in cfg and not isinstance(cfg[key], bool):
            raise ValueError(f"'{key}' must be true or false")
    if cfg.get("tzid") is not None and not isinstance(cfg["tzid"], str):
        raise ValueError("'tzid' must be a string")
    if cfg.get("dtstart") is not None:
        cfg["dtstart"] = parse_timestamp(str(cfg["dtstart"]))

    return cfg
