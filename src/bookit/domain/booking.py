"""Booking domain service."""

from typing import Any, Mapping, Optional

from bookit.database.base import Database
from bookit.domain.amount import to_decimal
from bookit.domain.entities import BOOKING_FIELDS, Booking as BookingEntity
from bookit.domain.errors import ValidationError
from bookit.utils.date_parser import parse_date


class BookingService:
    """Service for building and persisting bookings."""

    def __init__(self, db: Database):
        """Initialize booking service.

        Args:
            db: Database instance
        """
        self.db = db

    def booking_from_parameters(self, params: Mapping[str, Any]) -> BookingEntity:
        """Build an unsaved booking from a composed parameter set.

        Args:
            params: Normalised booking parameters

        Returns:
            Booking entity without an ID

        Raises:
            ValidationError: If a parameter is not a booking field, the title
                is missing or the value date cannot be parsed
        """
        unknown = set(params) - set(BOOKING_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown booking field(s): {', '.join(sorted(unknown))}")

        title = params.get("title")
        if not title:
            raise ValidationError("Booking title must not be empty")

        value_date = params.get("value_date")
        if isinstance(value_date, str):
            try:
                value_date = parse_date(value_date)
            except ValueError as e:
                raise ValidationError(f"Invalid value date: {e}")

        return BookingEntity(
            title=title,
            amount=to_decimal(params.get("amount")),
            debit_account_id=params.get("debit_account_id"),
            credit_account_id=params.get("credit_account_id"),
            comments=params.get("comments"),
            value_date=value_date,
        )

    def save_booking(self, booking: BookingEntity) -> BookingEntity:
        """Persist a built booking and return the stored entity."""
        booking_id = self.db.create_booking(
            title=booking.title,
            amount=booking.amount,
            debit_account_id=booking.debit_account_id,
            credit_account_id=booking.credit_account_id,
            comments=booking.comments,
            value_date=booking.value_date,
        )
        return self.db.get_booking(booking_id)

    def get_booking(self, booking_id: int) -> Optional[BookingEntity]:
        """Get booking by ID."""
        return self.db.get_booking(booking_id)

    def list_bookings(self, account_id: Optional[int] = None) -> list[BookingEntity]:
        """List bookings, optionally those touching an account."""
        return self.db.list_bookings(account_id=account_id)
