"""
Centralized constants for awsdocs.

This module defines immutable values used across awsdocs, including the
crate naming convention, documentation URL layout, Cargo invocation
settings, configuration file names, and logging formats. All values are
intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Crate naming and documentation
# ---------------------------------------------------------------------------

#: Prefix shared by every AWS SDK for Rust service crate.
SDK_PACKAGE_PREFIX: Final[str] = "aws-sdk-"

#: Version placeholder that makes docs.rs serve the newest release.
LATEST_VERSION: Final[str] = "latest"

#: docs.rs page for a service crate's ``Client`` struct.
DOCS_URL_TEMPLATE: Final[str] = (
    "https://docs.rs/aws-sdk-{name}/{version}/aws_sdk_{name}/client/struct.Client.html"
)

# ---------------------------------------------------------------------------
# Cargo metadata
# ---------------------------------------------------------------------------

#: Default Cargo executable.
DEFAULT_CARGO: Final[str] = "cargo"

#: ``cargo metadata`` output format understood by the graph loader.
CARGO_METADATA_FORMAT_VERSION: Final[int] = 1

#: Upper bound (seconds) for a single ``cargo metadata`` run.
DEFAULT_METADATA_TIMEOUT: Final[int] = 120

#: Maximum number of stderr characters kept in error details.
MAX_STDERR_LENGTH: Final[int] = 500

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Dedicated configuration file looked up in the current directory.
CONFIG_FILE_NAME: Final[str] = "awsdocs.toml"

#: Cargo manifest that may carry ``[package.metadata.awsdocs]``.
CARGO_MANIFEST_NAME: Final[str] = "Cargo.toml"

#: Manifest tables searched for an ``awsdocs`` metadata section.
CARGO_METADATA_TABLES: Final[Sequence[str]] = ("package", "workspace")

#: Whether version resolution runs when neither flag nor config sets it.
DEFAULT_SYNC: Final[bool] = False

# ---------------------------------------------------------------------------
# Interactive selection
# ---------------------------------------------------------------------------

#: Question shown above the service menu.
SELECT_PROMPT: Final[str] = "Which Client documents do you want to access?"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
