"""Configuration file loader for semverkit.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``semverkit.toml``: settings under ``[semverkit]`` table
- ``pyproject.toml``: settings under ``[tool.semverkit]`` table

Discovery order:

1. Explicit path from ``--config`` or ``SEMVERKIT_CONFIG``
2. ``semverkit.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.semverkit]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``semverkit.toml``)::

    [semverkit]
    output_format = "json"
    unique = true
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from semverkit.exceptions import ConfigError
from semverkit.utils.logger import get_logger
from semverkit.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_UNIQUE,
    OUTPUT_FORMATS,
)

logger = get_logger("config")

_SECTION = "semverkit"


@dataclass
class SemverkitConfig:
    """Parsed and validated semverkit configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        output_format: Default output format for every subcommand
            (``plain`` or ``json``).
        unique: Drop versions equal in precedence from ``sort``/``descend``
            output, keeping the first occurrence.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    output_format: str = DEFAULT_OUTPUT_FORMAT
    unique: bool = DEFAULT_UNIQUE

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration options (without metadata) for debug logging."""
        return {
            "output_format": self.output_format,
            "unique": self.unique,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    own_file = cwd / CONFIG_FILE_NAME
    if own_file.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, own_file)
        return own_file

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_semverkit_section(pyproject_toml):
        logger.debug("Found [tool.semverkit] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_semverkit_section(path: Path) -> bool:
    """Check if pyproject.toml contains a [tool.semverkit] section.

    A pyproject.toml that cannot be parsed is treated as having no
    section, so an unrelated broken file never blocks the CLI.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    tool = raw.get("tool", {})
    return isinstance(tool, dict) and _SECTION in tool


def load_config(config_path: Optional[Path] = None) -> SemverkitConfig:
    """Load and validate semverkit configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`SemverkitConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return SemverkitConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get(_SECTION, {})
    else:
        section = raw.get(_SECTION, {})

    if not isinstance(section, dict):
        raise ConfigError(
            f"[{_SECTION}] must be a table",
            config_path=str(resolved),
        )

    if not section:
        logger.debug("Config file found but no semverkit section, using defaults")
        return SemverkitConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or contains invalid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> SemverkitConfig:
    """Validate a ``[semverkit]`` / ``[tool.semverkit]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types, or an unsupported format.
    """
    config = SemverkitConfig()

    known_keys = {"output_format", "unique"}
    unknown = set(section.keys()) - known_keys
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "output_format" in section:
        val = section["output_format"]
        if not isinstance(val, str):
            raise ConfigError(
                f"output_format must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="output_format",
            )
        val = val.lower()
        if val not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {val!r}",
                config_path=config_path,
                option="output_format",
            )
        config.output_format = val

    if "unique" in section:
        val = section["unique"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"unique must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="unique",
            )
        config.unique = val

    return config
