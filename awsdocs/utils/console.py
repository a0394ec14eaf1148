"""
Console output utilities for awsdocs using Rich.

This module provides user-facing output helpers and the interactive service
menu. For diagnostic or debug output, use :mod:`awsdocs.utils.logger`.

Guidelines:
- print_* functions: user-facing status messages
- print_table / select_service: structured or interactive CLI output
- Logging should never go through this module
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Optional, Sequence

from rich.table import Table
from rich.theme import Theme
from rich.prompt import Prompt
from rich.console import Console

from awsdocs.constants import SDK_PACKAGE_PREFIX, SELECT_PROMPT
from awsdocs.models.service import Service, canonical_name, find_service

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

AWSDOCS_THEME = Theme(
    {
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "highlight": "bold magenta",
    }
)

# ---------------------------------------------------------------------------
# Console lifecycle management
# ---------------------------------------------------------------------------

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return a singleton Rich Console instance."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=AWSDOCS_THEME,
                    no_color=not use_color,
                    highlight=use_color,
                )
    return _console


def reconfigure_console() -> None:
    """Reset the global console instance.

    Call after changing ``NO_COLOR`` at runtime.
    """
    global _console
    with _console_lock:
        _console = None


# ---------------------------------------------------------------------------
# Status message helpers
# ---------------------------------------------------------------------------


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


def print_info(message: str) -> None:
    """Print an informational message."""
    _get_console().print(message, style="info", markup=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Render structured data as a Rich table.

    Args:
        data: List of row dictionaries.
        headers: Column order. Defaults to keys of the first row.
        column_styles: Per-column style configuration.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(show_header=True, header_style="bold")

    column_styles = column_styles or {}
    for header in headers:
        config = column_styles.get(header, {})
        table.add_column(
            header,
            style=config.get("style"),
            justify=config.get("justify", "default"),
            no_wrap=config.get("no_wrap", False),
        )

    for row in data:
        table.add_row(*(str(row.get(h, "")) for h in headers))

    _get_console().print(table)


# ---------------------------------------------------------------------------
# User interaction
# ---------------------------------------------------------------------------


def parse_choice(answer: str, services: Sequence[Service]) -> Optional[Service]:
    """Interpret a menu answer.

    Accepts a 1-based menu number, a display name (``"DynamoDB"``) or a
    canonical name (``"dynamodb"``), ignoring case. Returns ``None`` when
    the answer does not pick one of ``services``.
    """
    answer = answer.strip()
    if answer.isdigit():
        index = int(answer)
        if 1 <= index <= len(services):
            return services[index - 1]
        return None

    service = find_service(answer)
    if service is not None and service in services:
        return service
    return None


def select_service(
    services: Sequence[Service],
    *,
    prompt: str = SELECT_PROMPT,
) -> Optional[Service]:
    """Show a numbered menu of ``services`` and ask the user to pick one.

    Invalid answers are reported and the question is asked again.

    Args:
        services: Menu entries, shown in the given order.
        prompt: Question printed below the menu.

    Returns:
        The chosen service, or ``None`` if the user pressed Ctrl+C or
        closed the input stream.
    """
    if not services:
        raise ValueError("select_service() needs at least one service")

    print_table(
        [
            {
                "#": index,
                "Service": service.display_name,
                "Crate": SDK_PACKAGE_PREFIX + canonical_name(service),
            }
            for index, service in enumerate(services, start=1)
        ],
        headers=["#", "Service", "Crate"],
        column_styles={
            "#": {"justify": "right", "style": "dim"},
            "Service": {"style": "highlight", "no_wrap": True},
        },
    )

    console = _get_console()
    while True:
        try:
            answer = Prompt.ask(f"[info]{prompt}[/info]", console=console)
        except (KeyboardInterrupt, EOFError):
            console.print()
            return None

        choice = parse_choice(answer, services)
        if choice is not None:
            return choice

        print_warning(
            f"Not a listed service: {answer!r}. "
            f"Enter a number between 1 and {len(services)} or a service name."
        )
