"""Charge rate domain service.

Charge rates hold per-person amounts for a rate code. A booking template
with a ``charge_rate_code`` uses them to replace its own amount when a
booking is made for a person.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from bookit.database.base import Database
from bookit.domain.amount import PersonRateProvider
from bookit.domain.entities import ChargeRate as ChargeRateEntity
from bookit.domain.errors import ConflictError, ValidationError


class ChargeRateService:
    """Service for managing charge rates."""

    def __init__(self, db: Database):
        """Initialize charge rate service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_rate(self, code: str, person_id: int, valid_from: date, amount: Decimal) -> int:
        """Add a charge rate.

        Args:
            code: Charge rate code
            person_id: Person the rate applies to
            valid_from: First day the rate is valid
            amount: Rate amount

        Returns:
            Charge rate ID

        Raises:
            ValidationError: If the code is blank
            ConflictError: If a rate for the same code, person and date exists
        """
        if not code or not code.strip():
            raise ValidationError("Charge rate code must not be empty")

        for rate in self.db.list_charge_rates(code=code, person_id=person_id):
            if rate.valid_from == valid_from:
                raise ConflictError(
                    f"Charge rate '{code}' for person {person_id} "
                    f"valid from {valid_from} already exists"
                )

        return self.db.create_charge_rate(
            code=code, person_id=person_id, valid_from=valid_from, amount=amount
        )

    def list_rates(
        self, code: Optional[str] = None, person_id: Optional[int] = None
    ) -> list[ChargeRateEntity]:
        """List charge rates, optionally filtered by code and person."""
        return self.db.list_charge_rates(code=code, person_id=person_id)

    def rate_for(self, code: str, value_date: date, person_id: int) -> Optional[Decimal]:
        """Return the amount valid for a person on a date, or None."""
        rate = self.db.get_valid_charge_rate(code=code, person_id=person_id, value_date=value_date)
        if rate is None:
            return None
        return rate.amount

    def provider_for(self, code: Optional[str]) -> Optional[PersonRateProvider]:
        """Bind ``rate_for`` to a rate code.

        Returns None when the template has no rate code, so person-scoped
        amounts cannot be resolved for it.
        """
        if not code:
            return None

        def provider(value_date: date, person_id: int) -> Optional[Decimal]:
            return self.rate_for(code, value_date, person_id)

        return provider
