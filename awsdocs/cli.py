"""
Command-line interface for awsdocs.

This module provides the CLI entry point: it resolves options from flags,
environment and configuration, asks which service to open, optionally
resolves the installed crate version, and launches the docs.rs page.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from awsdocs.config import AwsDocsConfig, load_config
from awsdocs.__version__ import __version__
from awsdocs.context import AwsDocsContext
from awsdocs.exceptions import AwsDocsError
from awsdocs.models import ResolvedVersion, list_services
from awsdocs.core import build_docs_url, resolve_installed_version
from awsdocs.utils import (
    get_logger,
    level_for_verbosity,
    open_url,
    print_error,
    print_info,
    print_warning,
    reconfigure_console,
    select_service,
    setup_logging,
)

logger = get_logger("cli")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-s",
    "--sync/--no-sync",
    default=None,
    envvar="AWSDOCS_SYNC",
    help="Access the version of the document you are using.",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="AWSDOCS_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="AWSDOCS_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="awsdocs",
    message="%(prog)s %(version)s",
)
def cli(
    sync: Optional[bool],
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """Open the docs.rs reference of an AWS SDK for Rust client.

    \b
    Examples:
      awsdocs            Pick a service, open its latest docs
      awsdocs --sync     Open the docs of the version in Cargo.lock
      awsdocs -vv -s     Same, with debug logging

    With --sync the installed version is read from `cargo metadata` in the
    current project. When the project does not depend on the chosen
    service's crate, the latest documentation is opened instead.
    """
    _configure_logging(verbose)

    # Respect NO_COLOR for Rich and the log formatter
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    try:
        ctx = _build_context(config, sync, verbose, color)
        url = _run(ctx)
    except AwsDocsError as exc:
        print_error(str(exc))
        logger.debug(
            "AwsDocsError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        raise SystemExit(1) from exc

    if url is None:
        print_warning("Operation cancelled by user")
        raise SystemExit(130)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


def _build_context(
    config_path: Optional[Path],
    sync: Optional[bool],
    verbose: int,
    color: bool,
) -> AwsDocsContext:
    """Merge configuration file values with command-line options."""
    loaded_config = load_config(config_path)

    ctx = AwsDocsContext()
    ctx.config = loaded_config
    ctx.config_path = config_path or loaded_config.source_path
    ctx.verbose = verbose
    ctx.color = color
    ctx.sync = loaded_config.sync if sync is None else sync

    logger.debug("awsdocs v%s", __version__)
    logger.debug("Config path: %s", ctx.config_path)
    if loaded_config.source_path:
        logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s | Sync: %s", verbose, color, ctx.sync)
    return ctx


def _run(ctx: AwsDocsContext) -> Optional[str]:
    """Ask for a service and open its documentation.

    Returns:
        The opened URL, or ``None`` if the selection was cancelled.
    """
    service = select_service(list_services())
    if service is None:
        return None

    config = ctx.config or AwsDocsConfig()
    if ctx.sync:
        version = resolve_installed_version(
            service,
            cargo=config.cargo,
            manifest_path=config.manifest_path,
        )
    else:
        version = ResolvedVersion.latest()
    logger.info("Using %s version %s", service, version)

    url = build_docs_url(service, version)
    print_info(url)
    open_url(url)
    return url


def main() -> int:
    """Main entry point for the awsdocs CLI.

    Returns:
        Exit code:
            0   Success
            1   Application error (including an unreadable dependency graph)
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except AwsDocsError as exc:
        print_error(str(exc))
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
