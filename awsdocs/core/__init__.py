"""
Core functionality exports for awsdocs.

Importing from here keeps user-facing imports clean and stable:

    from awsdocs.core import PackageGraph, resolve
"""

from __future__ import annotations

from awsdocs.core.docs import build_docs_url
from awsdocs.core.matcher import build_pattern, try_match
from awsdocs.core.graph import DependencyGraph, PackageGraph
from awsdocs.core.resolver import resolve, resolve_installed_version

__all__ = [
    "build_pattern",
    "try_match",
    "DependencyGraph",
    "PackageGraph",
    "resolve",
    "resolve_installed_version",
    "build_docs_url",
]
