"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Any
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from bookit.domain.entities import (
    Account,
    BookingTemplate,
    Booking,
    Invoice,
    ChargeRate,
)


class Database(ABC):
    """Abstract database interface for bookit."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, code: str, title: str) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_code(self, code: str) -> Optional[Account]:
        """Get account by code."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts ordered by code."""
        pass

    # Booking template operations
    @abstractmethod
    def create_booking_template(self, code: str, title: str, **fields: Any) -> int:
        """Create a booking template. Returns template ID.

        ``fields`` holds the optional template columns (amount,
        amount_relates_to, comments, account IDs, matcher, position,
        include_in_saldo_list, charge_rate_code).
        """
        pass

    @abstractmethod
    def get_booking_template(self, template_id: int) -> Optional[BookingTemplate]:
        """Get booking template by ID."""
        pass

    @abstractmethod
    def get_booking_template_by_code(self, code: str) -> Optional[BookingTemplate]:
        """Get booking template by exact code."""
        pass

    @abstractmethod
    def list_booking_templates(self, code_prefix: Optional[str] = None) -> list[BookingTemplate]:
        """List booking templates ordered by code.

        Args:
            code_prefix: Optional prefix the code must start with
        """
        pass

    @abstractmethod
    def update_booking_template(self, template_id: int, **fields: Any) -> None:
        """Update the given booking template columns."""
        pass

    @abstractmethod
    def delete_booking_template(self, template_id: int) -> None:
        """Delete a booking template and its tags."""
        pass

    @abstractmethod
    def add_booking_template_tag(self, template_id: int, name: str) -> None:
        """Attach a tag to a booking template (no-op if already attached)."""
        pass

    # Booking operations
    @abstractmethod
    def create_booking(
        self,
        title: str,
        amount: Decimal,
        debit_account_id: Optional[int] = None,
        credit_account_id: Optional[int] = None,
        comments: Optional[str] = None,
        value_date: Optional[date] = None,
    ) -> int:
        """Create a booking. Returns booking ID."""
        pass

    @abstractmethod
    def get_booking(self, booking_id: int) -> Optional[Booking]:
        """Get booking by ID."""
        pass

    @abstractmethod
    def list_bookings(self, account_id: Optional[int] = None) -> list[Booking]:
        """List bookings, optionally only those touching an account."""
        pass

    # Invoice operations
    @abstractmethod
    def create_invoice(
        self,
        code: str,
        title: str,
        value_date: date,
        amount: Optional[Decimal] = None,
        balance: Optional[Decimal] = None,
    ) -> int:
        """Create an invoice. Returns invoice ID."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: int) -> Optional[Invoice]:
        """Get invoice by ID."""
        pass

    @abstractmethod
    def get_invoice_by_code(self, code: str) -> Optional[Invoice]:
        """Get invoice by code."""
        pass

    @abstractmethod
    def list_invoices(self) -> list[Invoice]:
        """List invoices ordered by value date."""
        pass

    # Charge rate operations
    @abstractmethod
    def create_charge_rate(
        self, code: str, person_id: int, valid_from: date, amount: Decimal
    ) -> int:
        """Create a charge rate. Returns charge rate ID."""
        pass

    @abstractmethod
    def list_charge_rates(
        self, code: Optional[str] = None, person_id: Optional[int] = None
    ) -> list[ChargeRate]:
        """List charge rates ordered by code, person and validity."""
        pass

    @abstractmethod
    def get_valid_charge_rate(
        self, code: str, person_id: int, value_date: date
    ) -> Optional[ChargeRate]:
        """Get the newest charge rate valid on ``value_date``."""
        pass
