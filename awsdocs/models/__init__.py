"""
Unified data model exports for awsdocs.

Example:
    >>> from awsdocs.models import Service, ResolvedVersion, list_services
"""

from __future__ import annotations

from awsdocs.models.version import ResolvedVersion, VersionTriple
from awsdocs.models.service import (
    CANONICAL_NAMES,
    Service,
    canonical_name,
    find_service,
    list_services,
)

__all__ = [
    "Service",
    "CANONICAL_NAMES",
    "canonical_name",
    "find_service",
    "list_services",
    "ResolvedVersion",
    "VersionTriple",
]
