"""Tests for booking parameter composition."""

import pytest
from decimal import Decimal
from enum import Enum

from bookit.domain.entities import BookingTemplate
from bookit.domain.parameters import (
    CONTROL_PARAMETERS,
    TEMPLATE_BOOKING_FIELDS,
    compose_booking_parameters,
    normalize_key,
    normalize_parameters,
)


@pytest.fixture
def template():
    return BookingTemplate(
        id=1,
        code="RENT",
        title="Office rent",
        amount="100.00",
        comments="Monthly",
        debit_account_id=10,
        credit_account_id=20,
        matcher="RENT",
        position=3,
    )


class Field(Enum):
    TITLE = "title"


class TestNormalizeKey:
    @pytest.mark.parametrize(
        "key",
        ["debit_account_id", "debitAccountId", "DEBIT_ACCOUNT_ID", " debit-account-id "],
    )
    def test_spellings_are_equivalent(self, key):
        """Test snake, camel, upper and dashed keys normalise alike."""
        assert normalize_key(key) == "debit_account_id"

    def test_enum_key_uses_value(self):
        """Test an enum key normalises to its value."""
        assert normalize_key(Field.TITLE) == "title"

    def test_normalize_parameters_later_key_wins(self):
        """Test the later of two equivalent keys wins."""
        params = normalize_parameters({"personId": 1, "person_id": 2})
        assert params == {"person_id": 2}

    def test_normalize_parameters_empty(self):
        """Test None parameters normalise to an empty dict."""
        assert normalize_parameters(None) == {}


class TestComposeBookingParameters:
    def test_only_allowed_template_fields_are_copied(self, template):
        """Test only booking fields are copied from the template."""
        composed = compose_booking_parameters(template, Decimal("100.00"))

        assert set(composed) == set(TEMPLATE_BOOKING_FIELDS) | {"amount"}
        assert composed == {
            "title": "Office rent",
            "comments": "Monthly",
            "debit_account_id": 10,
            "credit_account_id": 20,
            "amount": Decimal("100.00"),
        }

    def test_overrides_win(self, template):
        """Test overrides replace composed values."""
        overrides = {"title": "Special rent", "amount": Decimal("5"), "value_date": "2024-01-31"}
        composed = compose_booking_parameters(template, Decimal("100.00"), overrides)

        for key, value in overrides.items():
            assert composed[key] == value
        assert composed["comments"] == "Monthly"
        assert composed["debit_account_id"] == 10

    def test_override_keys_are_normalised(self, template):
        """Test override keys are normalised before merging."""
        composed = compose_booking_parameters(
            template, Decimal("1"), {"creditAccountId": 99, Field.TITLE: "Enum title"}
        )
        assert composed["credit_account_id"] == 99
        assert composed["title"] == "Enum title"
        assert "creditAccountId" not in composed

    def test_control_parameters_are_not_forwarded(self, template):
        """Test reference and person parameters are dropped."""
        overrides = {
            "person_id": 1,
            "reference": object(),
            "referenceType": "invoice",
            "reference_id": 4,
        }
        composed = compose_booking_parameters(template, Decimal("1"), overrides)
        assert not set(CONTROL_PARAMETERS) & set(composed)

    def test_override_none_replaces_value(self, template):
        """Test an explicit None override replaces the template value."""
        composed = compose_booking_parameters(template, Decimal("1"), {"comments": None})
        assert composed["comments"] is None

    def test_composition_is_idempotent(self, template):
        """Test composing twice gives the same result without touching overrides."""
        overrides = {"title": "x"}
        first = compose_booking_parameters(template, Decimal("1"), overrides)
        second = compose_booking_parameters(template, Decimal("1"), overrides)
        assert first == second
        assert overrides == {"title": "x"}
