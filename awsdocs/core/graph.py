"""Load the resolved dependency graph of the current Cargo project.

The graph is built from ``cargo metadata --format-version 1``. Only the ids
of the resolved packages are kept; the resolver treats them as opaque text.

Any failure to obtain the graph raises :class:`GraphUnavailableError`. The
caller must not mistake it for "no matching crate", which is an ordinary
outcome handled by the resolver.

Typical usage::

    graph = PackageGraph.from_command(manifest_path="Cargo.toml")
    for package_id in graph.package_ids():
        ...
"""

from __future__ import annotations

import json
import subprocess
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Protocol, Tuple

from awsdocs.utils.logger import get_logger
from awsdocs.exceptions import GraphUnavailableError
from awsdocs.constants import (
    CARGO_METADATA_FORMAT_VERSION,
    DEFAULT_CARGO,
    DEFAULT_METADATA_TIMEOUT,
)

logger = get_logger("graph")

__all__ = ["DependencyGraph", "PackageGraph", "metadata_command"]


class DependencyGraph(Protocol):
    """Anything that can enumerate resolved package ids."""

    def package_ids(self) -> Iterable[str]: ...


class PackageGraph:
    """Package ids of one resolved project.

    Args:
        package_ids: Package id strings in the order Cargo reported them.
    """

    __slots__ = ("_package_ids",)

    def __init__(self, package_ids: Iterable[str]) -> None:
        self._package_ids: Tuple[str, ...] = tuple(package_ids)

    def package_ids(self) -> Iterator[str]:
        """Iterate over every package id in the graph."""
        return iter(self._package_ids)

    def __len__(self) -> int:
        return len(self._package_ids)

    def __repr__(self) -> str:
        return f"PackageGraph(packages={len(self._package_ids)})"

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any]) -> PackageGraph:
        """Build a graph from a decoded ``cargo metadata`` document.

        Raises:
            GraphUnavailableError: The document has no ``packages`` list or a
                package entry lacks a string ``id``.
        """
        if not isinstance(metadata, Mapping):
            raise GraphUnavailableError(
                f"Cargo metadata must be a JSON object, got {type(metadata).__name__}"
            )

        packages = metadata.get("packages")
        if not isinstance(packages, list):
            raise GraphUnavailableError("Cargo metadata has no 'packages' list")

        ids: List[str] = []
        for index, package in enumerate(packages):
            package_id = package.get("id") if isinstance(package, Mapping) else None
            if not isinstance(package_id, str):
                raise GraphUnavailableError(
                    f"Cargo metadata package #{index} has no string 'id'"
                )
            ids.append(package_id)

        return cls(ids)

    @classmethod
    def from_command(
        cls,
        *,
        cargo: str = DEFAULT_CARGO,
        manifest_path: Optional[str] = None,
        timeout: float = DEFAULT_METADATA_TIMEOUT,
    ) -> PackageGraph:
        """Run ``cargo metadata`` and build a graph from its output.

        Args:
            cargo: Cargo executable to invoke.
            manifest_path: ``Cargo.toml`` to inspect; Cargo searches upwards
                from the current directory when omitted.
            timeout: Seconds to wait before giving up.

        Raises:
            GraphUnavailableError: Cargo is missing, failed, timed out, or
                printed something that is not a metadata document.
        """
        cmd = metadata_command(cargo=cargo, manifest_path=manifest_path)
        logger.debug("Running %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GraphUnavailableError(
                f"Cargo executable not found: {cargo}",
                command=cmd,
                manifest_path=manifest_path,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise GraphUnavailableError(
                f"cargo metadata timed out after {timeout}s",
                command=cmd,
                manifest_path=manifest_path,
            ) from exc
        except OSError as exc:
            raise GraphUnavailableError(
                f"Cannot run {cargo}: {exc}",
                command=cmd,
                manifest_path=manifest_path,
            ) from exc

        if result.returncode != 0:
            raise GraphUnavailableError(
                "cargo metadata failed",
                command=cmd,
                exit_code=result.returncode,
                stderr=result.stderr,
                manifest_path=manifest_path,
            )

        try:
            metadata = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise GraphUnavailableError(
                f"cargo metadata produced invalid JSON: {exc}",
                command=cmd,
                manifest_path=manifest_path,
            ) from exc

        graph = cls.from_metadata(metadata)
        logger.debug("Loaded dependency graph with %d packages", len(graph))
        return graph


def metadata_command(
    *,
    cargo: str = DEFAULT_CARGO,
    manifest_path: Optional[str] = None,
) -> List[str]:
    """Return the argv used to query Cargo for the resolved graph."""
    cmd = [cargo, "metadata", "--format-version", str(CARGO_METADATA_FORMAT_VERSION)]
    if manifest_path:
        cmd.extend(["--manifest-path", manifest_path])
    return cmd
