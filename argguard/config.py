"""Config loading for argguard.

Reads `.argguard/config.yaml` (or `~/.argguard/config.yaml`).
Raises SystemExit on parse errors or missing `version` field.
If no config file is found, returns default values (safe to run without config).

Config search order:
  1. `config_path` argument (if provided — for testing or explicit override)
  2. ARGGUARD_CONFIG environment variable (if set)
  3. `.argguard/config.yaml` (working directory)
  4. `~/.argguard/config.yaml` (home directory)

Environment variable overrides:
  ARGGUARD_LOG_LEVEL — overrides logging.level
  ARGGUARD_LOG_JSON  — overrides logging.json (true/false/1/0/yes/no)

The sensitive pattern set is not configurable. See argguard/constants.py.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import NoReturn, Optional

import yaml

from argguard.constants import SENSITIVE_ARGUMENTS_MESSAGE
from argguard.utils.logger import VALID_LOG_LEVELS, get_logger

logger = get_logger(__name__)

# ─── Version constants ────────────────────────────────────────────────────────

SUPPORTED_CONFIG_VERSION = 1

SUPPORTED_VERSIONS: frozenset[int] = frozenset({1})

# Default config search paths (ARGGUARD_CONFIG env var prepended at runtime)
DEFAULT_CONFIG_PATHS = [
    ".argguard/config.yaml",
    os.path.expanduser("~/.argguard/config.yaml"),
]

_TRUE_VALUES: frozenset[str] = frozenset({"true", "1", "yes"})
_FALSE_VALUES: frozenset[str] = frozenset({"false", "0", "no"})


# ─── Dataclasses ─────────────────────────────────────────────────────────────


@dataclass
class LoggingConfig:
    """Logging subsystem configuration."""

    level: str = "INFO"
    json: bool = True


@dataclass
class RedactionConfig:
    """What gets logged in place of a sensitive command line."""

    message: str = SENSITIVE_ARGUMENTS_MESSAGE


@dataclass
class Config:
    """Root configuration object populated from .argguard/config.yaml.

    All fields have safe defaults — argguard runs without any config file.
    """

    version: int = SUPPORTED_CONFIG_VERSION
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    redaction: RedactionConfig = field(default_factory=RedactionConfig)
    path: Optional[str] = None  # Path to the loaded config file

    @classmethod
    def defaults(cls) -> "Config":
        """Return a fully-default Config (no file required)."""
        return cls()

    @classmethod
    def from_dict(cls, raw: dict, path: Optional[str] = None) -> "Config":
        """Construct Config from a parsed YAML dict.

        Merges user-supplied values onto defaults; unknown keys are silently ignored.

        Args:
            raw:  Parsed YAML dict (must already be validated for version field).
            path: Path to the config file.

        Raises:
            SystemExit(1): On invalid logging.level, logging.json or redaction.message.
        """
        # ── Logging ───────────────────────────────────────────────────────────
        logging_raw = raw.get("logging") or {}
        level = str(logging_raw.get("level", "INFO")).upper()
        if level not in VALID_LOG_LEVELS:
            _fail(
                f"CONFIG ERROR: Invalid logging.level: '{logging_raw.get('level')}'. "
                f"Supported values: {sorted(VALID_LOG_LEVELS)}."
            )
        json_output = logging_raw.get("json", True)
        if not isinstance(json_output, bool):
            _fail(f"CONFIG ERROR: logging.json must be true or false, got '{json_output}'.")

        # ── Redaction ─────────────────────────────────────────────────────────
        redaction_raw = raw.get("redaction") or {}
        message = redaction_raw.get("message", SENSITIVE_ARGUMENTS_MESSAGE)
        if not isinstance(message, str) or not message.strip():
            _fail("CONFIG ERROR: redaction.message must be a non-empty string.")

        return cls(
            version=raw.get("version", SUPPORTED_CONFIG_VERSION),
            logging=LoggingConfig(level=level, json=json_output),
            redaction=RedactionConfig(message=message),
            path=path,
        )


# ─── Config loading ───────────────────────────────────────────────────────────


def load_config(config_path: Optional[str] = None) -> Config:
    """Load and validate argguard configuration.

    If no file is found at any search path, returns default Config (not an error).
    If a file is found but invalid, writes error to stderr and raises SystemExit(1).
    Env var overrides are applied in both cases.

    Raises:
        SystemExit(1): On YAML parse error, missing ``version`` field, unsupported
                       version, invalid field values, or invalid env overrides.
    """
    search_paths: list[str] = []
    if config_path:
        search_paths.append(config_path)
    env_config = os.environ.get("ARGGUARD_CONFIG")
    if env_config:
        search_paths.append(env_config)
    search_paths.extend(DEFAULT_CONFIG_PATHS)

    found_path: Optional[str] = None
    for candidate in search_paths:
        expanded = os.path.expanduser(candidate)
        if os.path.isfile(expanded):
            found_path = expanded
            break

    if found_path is None:
        logger.debug("No config file found — using defaults", searched=search_paths)
        config = Config.defaults()
        _apply_env_overrides(config)
        return config

    logger.debug("Loading config", path=found_path)

    try:
        with open(found_path) as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        _fail(
            f"CONFIG ERROR: Failed to parse {found_path}: {exc}\n"
            "Check the YAML syntax and try again."
        )
    except OSError as exc:
        _fail(f"CONFIG ERROR: Could not read {found_path}: {exc}")

    if not isinstance(raw, dict):
        if raw is None:
            _fail(
                f"CONFIG ERROR: {found_path} is missing the required 'version' field.\n"
                "Add 'version: 1' to the top of your config file."
            )
        _fail(
            f"CONFIG ERROR: {found_path} is not a valid YAML mapping.\n"
            "The config file must be a YAML dictionary at the top level."
        )

    version = raw.get("version")
    if version is None:
        _fail(
            f"CONFIG ERROR: {found_path} is missing the required 'version' field.\n"
            "Add 'version: 1' to the top of your config file."
        )
    if version not in SUPPORTED_VERSIONS:
        _fail(
            f"CONFIG ERROR: Unsupported config version: {version}. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}."
        )

    config = Config.from_dict(raw, path=found_path)
    _apply_env_overrides(config)

    logger.debug(
        "Config loaded",
        path=found_path,
        version=config.version,
        log_level=config.logging.level,
    )
    return config


def _apply_env_overrides(config: Config) -> None:
    """Apply ARGGUARD_LOG_LEVEL and ARGGUARD_LOG_JSON to ``config`` in-place.

    Raises:
        SystemExit(1): If either variable is set to an invalid value.
    """
    env_level = os.environ.get("ARGGUARD_LOG_LEVEL")
    if env_level is not None:
        if env_level.upper() not in VALID_LOG_LEVELS:
            _fail(
                f"CONFIG ERROR: ARGGUARD_LOG_LEVEL environment variable is not a valid "
                f"level: '{env_level}'"
            )
        config.logging.level = env_level.upper()

    env_json = os.environ.get("ARGGUARD_LOG_JSON")
    if env_json is not None:
        lowered = env_json.strip().lower()
        if lowered in _TRUE_VALUES:
            config.logging.json = True
        elif lowered in _FALSE_VALUES:
            config.logging.json = False
        else:
            _fail(
                f"CONFIG ERROR: ARGGUARD_LOG_JSON environment variable is not a valid "
                f"boolean: '{env_json}'"
            )


def _fail(msg: str) -> NoReturn:
    print(msg, file=sys.stderr)
    raise SystemExit(1)
