from __future__ import annotations

import re

import pytest

from awsdocs.models.service import (
    CANONICAL_NAMES,
    Service,
    canonical_name,
    find_service,
    list_services,
)


@pytest.mark.unit
class TestCatalogIntegrity:
    """Tests for completeness and uniqueness of the service catalog."""

    def test_every_service_has_canonical_name(self) -> None:
        """Test the canonical-name table covers every enum member."""
        assert set(CANONICAL_NAMES) == set(Service)

    def test_canonical_names_are_unique(self) -> None:
        """Test no two services share a canonical name."""
        names = [canonical_name(service) for service in Service]

        assert len(names) == len(set(names))

    def test_display_names_are_unique(self) -> None:
        """Test no two services share a display name."""
        values = [service.value for service in Service]

        assert len(values) == len(set(values))

    def test_canonical_names_are_lowercase_and_url_safe(self) -> None:
        """Test canonical names only use lowercase letters and digits."""
        for service in Service:
            assert re.fullmatch(r"[a-z0-9]+", canonical_name(service)), service

    def test_table_order_matches_enum_order(self) -> None:
        """Test the canonical-name table is declared in catalog order."""
        assert list(CANONICAL_NAMES) == list(Service)

    def test_table_is_read_only(self) -> None:
        """Test the canonical-name table cannot be mutated."""
        with pytest.raises(TypeError):
            CANONICAL_NAMES[Service.S3] = "other"  # type: ignore[index]


@pytest.mark.unit
class TestListServices:
    """Tests for list_services."""

    def test_returns_all_services_in_definition_order(self) -> None:
        """Test services come back in declaration order."""
        services = list_services()

        assert services == list(Service)
        assert services[0] is Service.AMPLIFY
        assert services[-1] is Service.USER_NOTIFICATIONS

    def test_catalog_size(self) -> None:
        """Test the catalog is non-empty and complete."""
        assert len(list_services()) == 68

    def test_returns_fresh_list(self) -> None:
        """Test callers cannot mutate the catalog through the result."""
        services = list_services()
        services.clear()

        assert len(list_services()) == 68


@pytest.mark.unit
class TestCanonicalName:
    """Tests for canonical_name and Service properties."""

    @pytest.mark.parametrize(
        "service,expected",
        [
            (Service.LAMBDA, "lambda"),
            (Service.S3, "s3"),
            (Service.S3_GLACIER, "glacier"),
            (Service.S3_TABLES, "s3tables"),
            (Service.EVENT_BRIDGE_PIPES, "pipes"),
            (Service.EVENT_BRIDGE_SCHEDULER, "scheduler"),
            (Service.GLUE_DATA_BREW, "databrew"),
            (Service.IOT_GREENGRASS_V2, "greengrassv2"),
            (Service.STEP_FUNCTIONS, "sfn"),
            (Service.USER_NOTIFICATIONS, "notifications"),
        ],
    )
    def test_known_names(self, service: Service, expected: str) -> None:
        """Test canonical names that differ from the display name."""
        assert canonical_name(service) == expected
        assert service.canonical_name == expected

    def test_str_is_display_name(self) -> None:
        """Test str() gives the name shown in the menu."""
        assert str(Service.API_GATEWAY_V2) == "APIGatewayV2"
        assert Service.DYNAMODB.display_name == "DynamoDB"


@pytest.mark.unit
class TestFindService:
    """Tests for find_service lookups."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("DynamoDB", Service.DYNAMODB),
            ("dynamodb", Service.DYNAMODB),
            ("  Lambda  ", Service.LAMBDA),
            ("sfn", Service.STEP_FUNCTIONS),
            ("StepFunctions", Service.STEP_FUNCTIONS),
            ("glacier", Service.S3_GLACIER),
        ],
    )
    def test_matches_display_or_canonical_name(
        self, name: str, expected: Service
    ) -> None:
        """Test lookup by either name, ignoring case and whitespace."""
        assert find_service(name) is expected

    @pytest.mark.parametrize("name", ["", "   ", "aws-sdk-s3", "s4", "Lambda2"])
    def test_unknown_returns_none(self, name: str) -> None:
        """Test unknown names yield None."""
        assert find_service(name) is None
