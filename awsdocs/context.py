"""
Shared context object for the awsdocs CLI.

Holds the runtime options resolved from CLI flags, environment, and the
configuration file for one invocation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from awsdocs.config import AwsDocsConfig


class AwsDocsContext:
    """Per-invocation state of the awsdocs CLI.

    Attributes:
        config_path: Configuration file in use, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        sync: Whether the installed crate version is resolved.
        config: Loaded configuration.
    """

    __slots__ = ("config_path", "verbose", "color", "sync", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.sync: bool = False
        self.config: Optional[AwsDocsConfig] = None
