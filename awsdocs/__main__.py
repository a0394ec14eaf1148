"""
Executable module for awsdocs.

Running:
    python -m awsdocs

is equivalent to:
    awsdocs
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a CLI import failure on stderr."""
    try:
        from awsdocs.__version__ import __version__
    except ImportError:
        __version__ = "<unknown>"

    sys.stderr.write("awsdocs could not start.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    sys.stderr.write(f"awsdocs version: {__version__}\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Main entrypoint when executing `python -m awsdocs`.

    Returns:
        Exit code returned by the CLI.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from awsdocs.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
