from __future__ import annotations

import pytest

from awsdocs.models.version import ResolvedVersion, VersionTriple


@pytest.mark.unit
class TestVersionTriple:
    """Tests for VersionTriple."""

    def test_str_joins_components(self) -> None:
        """Test a triple renders as dotted decimal."""
        assert str(VersionTriple(1, 54, 2)) == "1.54.2"

    def test_fields_are_named(self) -> None:
        """Test components are accessible by name."""
        triple = VersionTriple(3, 2, 1)

        assert (triple.major, triple.minor, triple.patch) == (3, 2, 1)
        assert triple == (3, 2, 1)


@pytest.mark.unit
class TestResolvedVersion:
    """Tests for ResolvedVersion."""

    def test_latest_sentinel(self) -> None:
        """Test the fallback value renders as 'latest'."""
        version = ResolvedVersion.latest()

        assert version.is_latest is True
        assert version.triple is None
        assert str(version) == "latest"

    def test_exact_version(self) -> None:
        """Test an exact version renders without prefix or suffix."""
        version = ResolvedVersion.exact(1, 54, 2)

        assert version.is_latest is False
        assert version.triple == VersionTriple(1, 54, 2)
        assert str(version) == "1.54.2"

    def test_exact_rejects_negative_components(self) -> None:
        """Test negative components are refused."""
        with pytest.raises(ValueError):
            ResolvedVersion.exact(1, -1, 0)

    def test_equality(self) -> None:
        """Test values compare by content."""
        assert ResolvedVersion.latest() == ResolvedVersion()
        assert ResolvedVersion.exact(1, 0, 0) == ResolvedVersion(VersionTriple(1, 0, 0))
        assert ResolvedVersion.exact(1, 0, 0) != ResolvedVersion.latest()

    def test_is_immutable(self) -> None:
        """Test values cannot be modified after creation."""
        version = ResolvedVersion.latest()

        with pytest.raises(AttributeError):
            version.triple = VersionTriple(1, 0, 0)  # type: ignore[misc]
