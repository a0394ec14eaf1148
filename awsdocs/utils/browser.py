"""Open documentation pages in the user's browser."""

from __future__ import annotations

import click

from awsdocs.utils.logger import get_logger
from awsdocs.exceptions import BrowserError

logger = get_logger("browser")


def open_url(url: str) -> None:
    """Open ``url`` with the system's default handler.

    Raises:
        BrowserError: The launcher reported a failure.
    """
    logger.debug("Launching %s", url)
    exit_code = click.launch(url)
    if exit_code != 0:
        raise BrowserError(
            "Could not open the documentation page",
            url=url,
            exit_code=exit_code,
        )
