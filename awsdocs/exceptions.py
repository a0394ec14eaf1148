"""
Custom exception hierarchy for awsdocs.

This module defines structured exception types used across awsdocs.
All exceptions inherit from :class:`AwsDocsError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Not finding an installed crate for a service is *not* an error: the
resolver answers with the ``latest`` version instead. Failing to build the
dependency graph is, and surfaces as :class:`GraphUnavailableError`.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Sequence

from awsdocs.constants import MAX_STDERR_LENGTH


class AwsDocsError(Exception):
    """Base exception for all awsdocs errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = MAX_STDERR_LENGTH) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ConfigError(AwsDocsError):
    """Raised when a configuration file is missing, unreadable, or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class GraphUnavailableError(AwsDocsError):
    """Raised when the project's dependency graph cannot be built.

    Covers a missing ``cargo`` executable, a missing or invalid
    ``Cargo.toml``, a timed out ``cargo metadata`` run, and output that is
    not the expected metadata document.

    Args:
        message: Error description.
        command: Command line that was executed.
        exit_code: Exit status of the command, if it ran to completion.
        stderr: Captured standard error, truncated for safety.
        manifest_path: Manifest passed to Cargo, if any.
    """

    __slots__ = ("command", "exit_code", "stderr", "manifest_path")

    def __init__(
        self,
        message: str,
        *,
        command: Optional[Sequence[str]] = None,
        exit_code: Optional[int] = None,
        stderr: Optional[str] = None,
        manifest_path: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "command", " ".join(command) if command else None)
        _add_if(details, "exit_code", exit_code)
        _add_if(details, "manifest", manifest_path)

        if stderr:
            details["stderr"] = _truncate(stderr.strip())

        super().__init__(message, details)

        self.command = list(command) if command else None
        self.exit_code = exit_code
        self.stderr = stderr
        self.manifest_path = manifest_path


class BrowserError(AwsDocsError):
    """Raised when the documentation page cannot be opened.

    Args:
        message: Error description.
        url: URL that was being opened.
        exit_code: Exit status reported by the launcher.
    """

    __slots__ = ("url", "exit_code")

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        exit_code: Optional[int] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "url", url)
        _add_if(details, "exit_code", exit_code)

        super().__init__(message, details)

        self.url = url
        self.exit_code = exit_code
