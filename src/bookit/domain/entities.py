"""Domain model entities for bookit.

These are pure data classes representing business concepts, independent of
database schema. Booking templates, accounts, invoices and charge rates are
long-lived configuration rows; bookings being built and line items are
computed per call and owned by the caller.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, Protocol


@dataclass(frozen=True)
class Account:
    """Ledger account domain entity."""

    id: int
    code: str
    title: str
    created_at: datetime


@dataclass(frozen=True)
class BookingTemplate:
    """Booking template domain entity.

    ``amount`` keeps its stored string encoding ("12.50", "15%" or blank);
    use :func:`bookit.domain.amount.parse_amount_rule` to interpret it.
    """

    id: int
    code: str
    title: str
    amount: Optional[str] = None
    amount_relates_to: Optional[str] = None
    comments: Optional[str] = None
    debit_account_id: Optional[int] = None
    credit_account_id: Optional[int] = None
    matcher: Optional[str] = None
    position: Optional[int] = None
    include_in_saldo_list: bool = False
    charge_rate_code: Optional[str] = None
    tags: tuple[str, ...] = ()

    @property
    def template_type(self) -> Optional[str]:
        """Type prefix of the code ("VAT" for "VAT:standard")."""
        if ":" not in self.code:
            return None
        return self.code.split(":", 1)[0]


class ReferenceEntity(Protocol):
    """Business object a template amount can be computed against."""

    @property
    def amount(self) -> Optional[Decimal]: ...

    @property
    def balance(self) -> Optional[Decimal]: ...

    @property
    def value_date(self) -> date: ...


@dataclass(frozen=True)
class Invoice:
    """Invoice domain entity, usable as a booking reference."""

    id: int
    code: str
    title: str
    value_date: date
    amount: Optional[Decimal]
    balance: Optional[Decimal]
    created_at: datetime


@dataclass(frozen=True)
class Booking:
    """Booking domain entity.

    ``id`` is None for a booking that has been built but not persisted.
    """

    title: str
    amount: Decimal
    debit_account_id: Optional[int] = None
    credit_account_id: Optional[int] = None
    comments: Optional[str] = None
    value_date: Optional[date] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def balance(self) -> Optional[Decimal]:
        """Bookings carry no running balance."""
        return None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


# Fields a booking can be built from; everything else is rejected.
BOOKING_FIELDS = (
    "title",
    "amount",
    "debit_account_id",
    "credit_account_id",
    "comments",
    "value_date",
)


@dataclass(frozen=True)
class ChargeRate:
    """Per-person amount for a charge rate code, valid from a date."""

    id: int
    code: str
    person_id: int
    valid_from: date
    amount: Decimal


class LineItemKind(str, Enum):
    """Quantity/price encoding of a line item."""

    PERCENTAGE = "percentage"
    SALDO = "saldo"
    FIXED = "fixed"


@dataclass(frozen=True)
class LineItem:
    """Document-facing line item derived from a booking template.

    One record covers both plain and saldo line items; ``kind`` tells them
    apart. ``price`` stays None for percentage and saldo items until the
    caller supplies the base it applies to via :meth:`with_price`.
    """

    kind: LineItemKind
    title: str
    code: str
    quantity: str
    booking_template_id: Optional[int] = None
    credit_account_id: Optional[int] = None
    debit_account_id: Optional[int] = None
    position: Optional[int] = None
    include_in_saldo_list: bool = False
    reference_code: Optional[str] = None
    times: Optional[Decimal] = None
    price: Optional[Decimal] = None

    @property
    def is_saldo(self) -> bool:
        return self.kind is LineItemKind.SALDO

    def with_price(self, price: Decimal) -> "LineItem":
        """Return a copy with the price resolved."""
        return replace(self, price=price)

    def total(self) -> Optional[Decimal]:
        """Accounted total of the line item, or None while price is open.

        Fixed items are ``times * price``, percentage items take ``times``
        percent of their price and saldo items account their price as is.
        """
        if self.price is None:
            return None
        if self.kind is LineItemKind.FIXED:
            return self.price * (self.times if self.times is not None else Decimal("1"))
        if self.kind is LineItemKind.PERCENTAGE:
            return self.price * (self.times or Decimal("0")) / Decimal("100")
        return self.price


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a text against booking templates."""

    text: str
    matched: list[BookingTemplate] = field(default_factory=list)
    errors: list = field(default_factory=list)
