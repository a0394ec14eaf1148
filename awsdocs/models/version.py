"""Version values produced by the resolver.

A :class:`ResolvedVersion` is either an exact ``major.minor.patch`` triple
read from the dependency graph or the ``latest`` sentinel. Its string form
is what goes into the documentation URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from awsdocs.constants import LATEST_VERSION


class VersionTriple(NamedTuple):
    """Numeric ``(major, minor, patch)`` components of a crate version."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class ResolvedVersion:
    """Outcome of resolving a service against a dependency graph.

    Attributes:
        triple: Installed version, or ``None`` when nothing matched and the
            latest published documentation should be used.
    """

    triple: Optional[VersionTriple] = None

    @classmethod
    def latest(cls) -> ResolvedVersion:
        """Return the fallback value."""
        return cls()

    @classmethod
    def exact(cls, major: int, minor: int, patch: int) -> ResolvedVersion:
        """Return a value pinned to ``major.minor.patch``."""
        if min(major, minor, patch) < 0:
            raise ValueError(
                f"Version components must be non-negative: {major}.{minor}.{patch}"
            )
        return cls(VersionTriple(major, minor, patch))

    @property
    def is_latest(self) -> bool:
        return self.triple is None

    def __str__(self) -> str:
        if self.triple is None:
            return LATEST_VERSION
        return str(self.triple)
