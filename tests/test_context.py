from __future__ import annotations

from pathlib import Path

import pytest

from awsdocs.config import AwsDocsConfig
from awsdocs.context import AwsDocsContext


@pytest.mark.unit
class TestAwsDocsContext:
    """Tests for AwsDocsContext."""

    def test_default_initialization(self) -> None:
        ctx = AwsDocsContext()

        assert ctx.config_path is None
        assert ctx.verbose == 0
        assert ctx.color is True
        assert ctx.sync is False
        assert ctx.config is None

    def test_all_attributes_can_be_set(self) -> None:
        ctx = AwsDocsContext()
        config = AwsDocsConfig(sync=True)

        ctx.config_path = Path("/path/to/awsdocs.toml")
        ctx.verbose = 2
        ctx.color = False
        ctx.sync = True
        ctx.config = config

        assert ctx.config_path == Path("/path/to/awsdocs.toml")
        assert ctx.verbose == 2
        assert ctx.color is False
        assert ctx.sync is True
        assert ctx.config is config

    def test_slots_prevent_arbitrary_attributes(self) -> None:
        ctx = AwsDocsContext()

        with pytest.raises(AttributeError):
            ctx.arbitrary_attribute = "value"  # type: ignore[attr-defined]
