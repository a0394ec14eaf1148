"""
Utility helpers for awsdocs.

This package provides reusable utilities used across awsdocs:

- Console output and the interactive service menu (Rich-based)
- Logging configuration and retrieval
- Browser launching

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from awsdocs.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from awsdocs.utils.console import (
    parse_choice,
    print_error,
    print_info,
    print_table,
    print_warning,
    reconfigure_console,
    select_service,
)

# ---------------------------------------------------------------------------
# Browser utilities
# ---------------------------------------------------------------------------

from awsdocs.utils.browser import open_url

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Console
    "parse_choice",
    "print_error",
    "print_info",
    "print_table",
    "print_warning",
    "select_service",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "level_for_verbosity",
    "is_logging_configured",
    # Browser
    "open_url",
]
