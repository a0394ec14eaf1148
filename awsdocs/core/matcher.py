"""Recognise a service's SDK crate among dependency-graph package ids.

Cargo package ids look like::

    registry+https://github.com/rust-lang/crates.io-index#aws-sdk-s3@1.68.0

The pattern built here only anchors at the *end* of the id, so any source
qualifier in front of the crate name is accepted. The ``@`` that must follow
the canonical name keeps ``s3`` from matching ``aws-sdk-s3tables@...``.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern

from awsdocs.constants import SDK_PACKAGE_PREFIX
from awsdocs.models.version import VersionTriple

__all__ = ["build_pattern", "try_match"]

_VERSION_SUFFIX = r"@(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)\Z"


def build_pattern(canonical_name: str) -> Pattern[str]:
    """Compile the package-id pattern for one canonical service name.

    Args:
        canonical_name: Short name such as ``"lambda"`` or ``"s3"``.

    Returns:
        Compiled pattern with ``major``, ``minor`` and ``patch`` groups.
    """
    return re.compile(re.escape(SDK_PACKAGE_PREFIX + canonical_name) + _VERSION_SUFFIX)


def try_match(pattern: Pattern[str], identifier: str) -> Optional[VersionTriple]:
    """Extract the version from ``identifier`` if it belongs to ``pattern``.

    Returns ``None`` for identifiers of other packages; this never raises on
    odd input. Components with leading zeros parse to their numeric value.

    Example:
        >>> try_match(build_pattern("s3"), "aws-sdk-s3@2.07.10")
        VersionTriple(major=2, minor=7, patch=10)
    """
    match = pattern.search(identifier)
    if match is None:
        return None

    try:
        return VersionTriple(
            int(match.group("major")),
            int(match.group("minor")),
            int(match.group("patch")),
        )
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return None
