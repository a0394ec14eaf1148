"""Configuration file loader for awsdocs.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two locations:

- ``awsdocs.toml``: settings under the ``[awsdocs]`` table
- ``Cargo.toml``: settings under ``[package.metadata.awsdocs]`` or
  ``[workspace.metadata.awsdocs]``

Discovery order:

1. Explicit path from ``--config`` or ``AWSDOCS_CONFIG``
2. ``awsdocs.toml`` in current directory
3. ``Cargo.toml`` with an ``awsdocs`` metadata table in current directory

Configuration precedence: defaults < config file < environment < CLI args.

Example (``Cargo.toml``)::

    [package.metadata.awsdocs]
    sync = true
    cargo = "/opt/rust/bin/cargo"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from awsdocs.exceptions import ConfigError
from awsdocs.utils.logger import get_logger
from awsdocs.constants import (
    CARGO_MANIFEST_NAME,
    CARGO_METADATA_TABLES,
    CONFIG_FILE_NAME,
    DEFAULT_CARGO,
    DEFAULT_SYNC,
)

logger = get_logger("config")

_SECTION = "awsdocs"


@dataclass
class AwsDocsConfig:
    """Parsed and validated awsdocs configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        sync: Resolve the installed crate version instead of opening the
            latest documentation.
        cargo: Cargo executable used to read the dependency graph.
        manifest_path: ``Cargo.toml`` passed to ``cargo metadata``. Relative
            paths are resolved against the config file's directory.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    sync: bool = DEFAULT_SYNC
    cargo: str = DEFAULT_CARGO
    manifest_path: Optional[str] = None

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "sync": self.sync,
            "cargo": self.cargo,
            "manifest_path": self.manifest_path,
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

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    manifest = cwd / CARGO_MANIFEST_NAME
    if manifest.is_file() and _manifest_has_awsdocs_section(manifest):
        logger.debug("Found awsdocs metadata in %s", manifest)
        return manifest

    logger.debug("No configuration file found")
    return None


def _manifest_has_awsdocs_section(path: Path) -> bool:
    """Check if a Cargo manifest carries an ``awsdocs`` metadata table.

    Parse errors count as "no section"; a broken manifest is Cargo's
    problem to report, not ours.
    """
    try:
        return _manifest_section(_read_toml(path)) is not None
    except ConfigError:
        return False


def _manifest_section(raw: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return the first ``<table>.metadata.awsdocs`` table of a manifest."""
    for table in CARGO_METADATA_TABLES:
        value = raw.get(table)
        if not isinstance(value, dict):
            continue
        metadata = value.get("metadata")
        if isinstance(metadata, dict) and _SECTION in metadata:
            return metadata[_SECTION]
    return None


def load_config(config_path: Optional[Path] = None) -> AwsDocsConfig:
    """Load and validate awsdocs configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`AwsDocsConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return AwsDocsConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == CARGO_MANIFEST_NAME:
        section = _manifest_section(raw) or {}
    else:
        section = raw.get(_SECTION, {})

    if not isinstance(section, dict):
        raise ConfigError(
            f"[{_SECTION}] must be a table, got {type(section).__name__}",
            config_path=str(resolved),
        )

    if not section:
        logger.debug("Config file found but no awsdocs section, using defaults")
        return AwsDocsConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    if config.manifest_path is not None:
        manifest = Path(config.manifest_path)
        if not manifest.is_absolute():
            config.manifest_path = str(resolved.parent / manifest)

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
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
) -> AwsDocsConfig:
    """Parse and validate an ``awsdocs`` configuration table.

    Raises:
        ConfigError: Unknown keys or incorrect types (e.g., string for boolean).
    """
    config = AwsDocsConfig()

    known = {"sync", "cargo", "manifest_path"}
    unknown = set(section.keys()) - known
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "sync" in section:
        val = section["sync"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"sync must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="sync",
            )
        config.sync = val

    if "cargo" in section:
        val = section["cargo"]
        if not isinstance(val, str) or not val.strip():
            raise ConfigError(
                "cargo must be a non-empty string",
                config_path=config_path,
                option="cargo",
            )
        config.cargo = val

    if "manifest_path" in section:
        val = section["manifest_path"]
        if not isinstance(val, str) or not val.strip():
            raise ConfigError(
                "manifest_path must be a non-empty string",
                config_path=config_path,
                option="manifest_path",
            )
        config.manifest_path = val

    return config
