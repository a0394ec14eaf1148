from __future__ import annotations

import pytest

from awsdocs.exceptions import (
    AwsDocsError,
    BrowserError,
    ConfigError,
    GraphUnavailableError,
)


@pytest.mark.unit
class TestAwsDocsError:
    """Tests for the base exception."""

    def test_message_only(self) -> None:
        error = AwsDocsError("something failed")

        assert str(error) == "something failed"
        assert error.details == {}

    def test_details_are_appended(self) -> None:
        error = AwsDocsError("failed", {"a": 1, "b": "x"})

        assert str(error) == "failed (a=1, b=x)"

    def test_repr(self) -> None:
        error = AwsDocsError("failed", {"a": 1})

        assert repr(error) == "AwsDocsError(message='failed', details={'a': 1})"

    @pytest.mark.parametrize("cls", [ConfigError, GraphUnavailableError, BrowserError])
    def test_subclasses(self, cls: type) -> None:
        assert issubclass(cls, AwsDocsError)


@pytest.mark.unit
class TestConfigError:
    def test_details(self) -> None:
        error = ConfigError("bad", config_path="awsdocs.toml", option="sync")

        assert error.details == {"path": "awsdocs.toml", "option": "sync"}
        assert error.option == "sync"


@pytest.mark.unit
class TestGraphUnavailableError:
    def test_details(self) -> None:
        error = GraphUnavailableError(
            "cargo metadata failed",
            command=["cargo", "metadata"],
            exit_code=101,
            stderr="error: no manifest\n",
            manifest_path="Cargo.toml",
        )

        assert error.details == {
            "command": "cargo metadata",
            "exit_code": 101,
            "manifest": "Cargo.toml",
            "stderr": "error: no manifest",
        }
        assert error.command == ["cargo", "metadata"]
        assert error.stderr == "error: no manifest\n"

    def test_long_stderr_is_truncated(self) -> None:
        error = GraphUnavailableError("failed", stderr="x" * 1000)

        assert error.details["stderr"] == "x" * 500 + "..."
        assert len(error.stderr) == 1000

    def test_empty_details(self) -> None:
        error = GraphUnavailableError("failed")

        assert str(error) == "failed"
        assert error.command is None


@pytest.mark.unit
class TestBrowserError:
    def test_details(self) -> None:
        error = BrowserError("no browser", url="https://docs.rs", exit_code=1)

        assert str(error) == "no browser (url=https://docs.rs, exit_code=1)"
