from __future__ import annotations

import io
import os
from typing import Generator
from unittest.mock import patch

import pytest
from rich.console import Console

import awsdocs.utils.console as console_module
from awsdocs.models.service import Service, list_services
from awsdocs.utils.console import (
    parse_choice,
    print_error,
    print_info,
    print_table,
    print_warning,
    reconfigure_console,
    select_service,
)


@pytest.fixture
def output() -> Generator[io.StringIO, None, None]:
    """Route the shared console into a buffer for the duration of a test."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        theme=console_module.AWSDOCS_THEME,
        no_color=True,
        width=200,
    )
    with patch.object(console_module, "_console", console):
        yield buffer


@pytest.mark.unit
class TestConsoleLifecycle:
    """Tests for console singleton handling."""

    def test_singleton(self) -> None:
        """Test repeated calls return the same console."""
        reconfigure_console()

        assert console_module._get_console() is console_module._get_console()

    def test_reconfigure_creates_new_console(self) -> None:
        """Test reconfigure_console drops the cached console."""
        first = console_module._get_console()
        reconfigure_console()

        assert console_module._get_console() is not first

    def test_no_color_env(self) -> None:
        """Test NO_COLOR disables colour."""
        with patch.dict(os.environ, {"NO_COLOR": "1"}):
            assert console_module._should_use_color() is False


@pytest.mark.unit
class TestStatusMessages:
    """Tests for print_* helpers."""

    def test_print_error(self, output: io.StringIO) -> None:
        print_error("cargo metadata failed")

        assert output.getvalue() == "[ERROR] cargo metadata failed\n"

    def test_print_warning(self, output: io.StringIO) -> None:
        print_warning("careful")

        assert output.getvalue() == "[WARNING] careful\n"

    def test_print_warning_custom_prefix(self, output: io.StringIO) -> None:
        print_warning("opened", prefix="!")

        assert output.getvalue() == "! opened\n"

    def test_markup_is_not_interpreted(self, output: io.StringIO) -> None:
        """Test square brackets in messages are printed literally."""
        print_error("bad key [awsdocs]")

        assert "[awsdocs]" in output.getvalue()

    def test_print_info_keeps_url_on_one_line(self, output: io.StringIO) -> None:
        """Test long URLs are not wrapped."""
        url = "https://docs.rs/aws-sdk-elasticloadbalancingv2/latest/" + "x" * 300

        print_info(url)

        assert output.getvalue() == url + "\n"


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_empty_data_prints_nothing(self, output: io.StringIO) -> None:
        print_table([])

        assert output.getvalue() == ""

    def test_renders_headers_and_rows(self, output: io.StringIO) -> None:
        print_table([{"Service": "S3", "Crate": "aws-sdk-s3"}])

        text = output.getvalue()
        assert "Service" in text
        assert "aws-sdk-s3" in text


@pytest.mark.unit
class TestParseChoice:
    """Tests for parse_choice."""

    def test_number(self) -> None:
        services = list_services()

        assert parse_choice("1", services) is services[0]
        assert parse_choice(f" {len(services)} ", services) is services[-1]

    @pytest.mark.parametrize("answer", ["0", "69", "-1", "", "nope"])
    def test_invalid(self, answer: str) -> None:
        assert parse_choice(answer, list_services()) is None

    def test_names(self) -> None:
        services = list_services()

        assert parse_choice("lambda", services) is Service.LAMBDA
        assert parse_choice("EventBridgePipes", services) is Service.EVENT_BRIDGE_PIPES

    def test_name_outside_menu(self) -> None:
        """Test a valid service that is not offered is rejected."""
        assert parse_choice("s3", [Service.LAMBDA]) is None


@pytest.mark.unit
class TestSelectService:
    """Tests for select_service."""

    def test_returns_chosen_service(self, output: io.StringIO) -> None:
        with patch("awsdocs.utils.console.Prompt.ask", return_value="lambda"):
            result = select_service(list_services())

        assert result is Service.LAMBDA
        text = output.getvalue()
        assert "aws-sdk-lambda" in text
        assert "UserNotifications" in text

    def test_reasks_after_invalid_answer(self, output: io.StringIO) -> None:
        with patch(
            "awsdocs.utils.console.Prompt.ask", side_effect=["100", "2"]
        ) as mock_ask:
            result = select_service([Service.S3, Service.SQS])

        assert result is Service.SQS
        assert mock_ask.call_count == 2
        assert "Not a listed service: '100'" in output.getvalue()

    @pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
    def test_cancel_returns_none(
        self, output: io.StringIO, error: type
    ) -> None:
        with patch("awsdocs.utils.console.Prompt.ask", side_effect=error):
            assert select_service(list_services()) is None

    def test_custom_prompt(self, output: io.StringIO) -> None:
        with patch(
            "awsdocs.utils.console.Prompt.ask", return_value="1"
        ) as mock_ask:
            select_service([Service.S3], prompt="Pick one")

        assert "Pick one" in mock_ask.call_args.args[0]

    def test_empty_menu_raises(self) -> None:
        with pytest.raises(ValueError):
            select_service([])
