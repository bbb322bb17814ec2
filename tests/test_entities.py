"""Tests for domain entities."""

import pytest
from datetime import datetime, date, UTC
from decimal import Decimal

from bookit.domain.entities import (
    Account,
    Booking,
    BookingTemplate,
    ChargeRate,
    Invoice,
    LineItem,
    LineItemKind,
)


class TestAccount:
    def test_account_immutability(self):
        """Test that Account is immutable."""
        account = Account(id=1, code="1000", title="Cash", created_at=datetime.now(UTC))
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            account.title = "New"

    def test_account_equality(self):
        """Test Account equality compares all fields."""
        created_at = datetime.now(UTC)
        assert Account(1, "1000", "Cash", created_at) == Account(1, "1000", "Cash", created_at)
        assert Account(1, "1000", "Cash", created_at) != Account(2, "1000", "Cash", created_at)


class TestBookingTemplate:
    def test_defaults(self):
        """Test BookingTemplate defaults."""
        template = BookingTemplate(id=1, code="RENT", title="Rent")
        assert template.amount is None
        assert template.include_in_saldo_list is False
        assert template.tags == ()

    def test_template_type_splits_on_first_colon(self):
        """Test the template type is the part before the first colon."""
        template = BookingTemplate(id=1, code="VAT:standard:2024", title="VAT")
        assert template.template_type == "VAT"


class TestBooking:
    def test_unsaved_booking(self):
        """Test an unsaved booking has no ID and no balance."""
        booking = Booking(title="Rent", amount=Decimal("10"))
        assert booking.id is None
        assert not booking.is_persisted
        assert booking.balance is None

    def test_booking_as_reference(self):
        """Test a stored booking exposes its value date."""
        booking = Booking(title="Rent", amount=Decimal("10"), value_date=date(2024, 1, 1), id=3)
        assert booking.is_persisted
        assert booking.value_date == date(2024, 1, 1)


class TestInvoiceAndChargeRate:
    def test_invoice_fields(self):
        """Test Invoice allows a missing balance."""
        invoice = Invoice(
            id=1,
            code="R-1",
            title="Consulting",
            value_date=date(2024, 1, 1),
            amount=Decimal("100"),
            balance=None,
            created_at=datetime.now(UTC),
        )
        assert invoice.balance is None

    def test_charge_rate_immutability(self):
        """Test that ChargeRate is immutable."""
        rate = ChargeRate(id=1, code="hourly", person_id=2, valid_from=date(2024, 1, 1), amount=Decimal("1"))
        with pytest.raises(Exception):
            rate.amount = Decimal("2")


class TestLineItem:
    def test_with_price_returns_copy(self):
        """Test with_price leaves the original line item unpriced."""
        item = LineItem(kind=LineItemKind.SALDO, title="Open", code="OPEN", quantity="saldo_of")
        priced = item.with_price(Decimal("12"))

        assert item.price is None
        assert priced.price == Decimal("12")
        assert priced.is_saldo

    def test_fixed_total_defaults_times_to_one(self):
        """Test a fixed line item without times counts once."""
        item = LineItem(
            kind=LineItemKind.FIXED, title="Rent", code="RENT", quantity="x", price=Decimal("5")
        )
        assert item.total() == Decimal("5")
