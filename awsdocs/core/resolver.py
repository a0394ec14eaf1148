"""Resolve the installed SDK crate version for a service.

The resolver walks a dependency graph once, in whatever order the graph
yields its package ids, and stops at the first id that matches the
service's crate. When nothing matches, the result is the ``latest``
sentinel; that is a normal outcome, not an error.

If a graph happens to contain two matching crates (for example the same
crate from two registries), whichever the graph yields first wins. No
ordering guarantee beyond that is made.

Typical usage::

    from awsdocs.core import PackageGraph, resolve
    from awsdocs.models import Service

    version = resolve(Service.LAMBDA, PackageGraph.from_command())
    print(version)  # "1.54.2" or "latest"
"""

from __future__ import annotations

from typing import Optional

from awsdocs.utils.logger import get_logger
from awsdocs.constants import DEFAULT_CARGO
from awsdocs.models.version import ResolvedVersion
from awsdocs.models.service import Service, canonical_name
from awsdocs.core.matcher import build_pattern, try_match
from awsdocs.core.graph import DependencyGraph, PackageGraph

logger = get_logger("resolver")

__all__ = ["resolve", "resolve_installed_version"]


def resolve(service: Service, graph: DependencyGraph) -> ResolvedVersion:
    """Find the version of ``service``'s crate in ``graph``.

    Args:
        service: Catalog entry to look up.
        graph: Resolved dependency graph; only read, never retained.

    Returns:
        The exact version of the first matching package, or
        :meth:`ResolvedVersion.latest` when no package matches.
    """
    name = canonical_name(service)
    pattern = build_pattern(name)

    for package_id in graph.package_ids():
        triple = try_match(pattern, package_id)
        if triple is not None:
            logger.debug("Matched %s for %s", package_id, service)
            return ResolvedVersion(triple)

    logger.info("No aws-sdk-%s package in dependency graph, using latest", name)
    return ResolvedVersion.latest()


def resolve_installed_version(
    service: Service,
    *,
    cargo: str = DEFAULT_CARGO,
    manifest_path: Optional[str] = None,
) -> ResolvedVersion:
    """Load the current project's graph with Cargo and resolve ``service``.

    Raises:
        GraphUnavailableError: The dependency graph could not be built.
            Propagated unchanged; it never turns into the ``latest`` fallback.
    """
    graph = PackageGraph.from_command(cargo=cargo, manifest_path=manifest_path)
    return resolve(service, graph)
