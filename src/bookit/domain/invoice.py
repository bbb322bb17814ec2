"""Invoice domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from bookit.database.base import Database
from bookit.domain.entities import Invoice as InvoiceEntity
from bookit.domain.errors import ConflictError, duplicate_code


class InvoiceService:
    """Service for managing invoices used as booking references."""

    def __init__(self, db: Database):
        self.db = db

    def create_invoice(
        self,
        code: str,
        title: str,
        value_date: date,
        amount: Optional[Decimal] = None,
        balance: Optional[Decimal] = None,
    ) -> int:
        """Create an invoice.

        Raises:
            ConflictError: If an invoice with the same code exists
        """
        if self.db.get_invoice_by_code(code) is not None:
            raise ConflictError(duplicate_code("Invoice", code))

        return self.db.create_invoice(
            code=code, title=title, value_date=value_date, amount=amount, balance=balance
        )

    def get_invoice(self, invoice_id: int) -> Optional[InvoiceEntity]:
        return self.db.get_invoice(invoice_id)

    def list_invoices(self) -> list[InvoiceEntity]:
        return self.db.list_invoices()
