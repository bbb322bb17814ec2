"""Amount rules and amount resolution for booking templates.

A template stores its amount as a string that can mean three things: a
plain decimal ("12.50"), a percentage ("15%") or, together with a non-blank
``amount_relates_to``, a factor applied to a referenced entity's amount or
balance (a saldo amount). The string is parsed once into one of the rule
classes below so nothing downstream re-parses it.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    localcontext,
)
from enum import Enum
from typing import Callable, Optional, Union

from bookit.domain.entities import ReferenceEntity

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# Products, differences and quantize are exact under this context, so no
# finite amount can overflow or lose digits while it is resolved.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)

# Returned unrounded when no person-scoped amount could be found.
UNRESOLVED_AMOUNT = Decimal("0")

PersonRateProvider = Callable[[date, int], Optional[Decimal]]


class RelationMode(str, Enum):
    """Known ways a saldo amount relates to its reference."""

    REFERENCE_AMOUNT = "reference_amount"
    REFERENCE_BALANCE = "reference_balance"
    REFERENCE_AMOUNT_MINUS_BALANCE = "reference_amount_minus_balance"


@dataclass(frozen=True)
class FixedAmount:
    value: Decimal
    relates_to: Optional[str] = None

    @property
    def factor(self) -> Decimal:
        return self.value


@dataclass(frozen=True)
class PercentageAmount:
    """Percentage amount; ``percent`` is 15 for "15%".

    The percent sign only matters for line items. As a booking amount "15%"
    counts as 15, like any other decimal.
    """

    percent: Decimal
    relates_to: Optional[str] = None

    @property
    def factor(self) -> Decimal:
        return self.percent


@dataclass(frozen=True)
class SaldoAmount:
    """Amount derived from a reference's amount and/or balance."""

    value: Decimal
    relates_to: str

    @property
    def factor(self) -> Decimal:
        return self.value

    @property
    def mode(self) -> Optional[RelationMode]:
        """Known relation mode, or None for an unrecognised relation."""
        try:
            return RelationMode(self.relates_to)
        except ValueError:
            return None


AmountRule = Union[PercentageAmount, SaldoAmount, FixedAmount]


def is_blank(value) -> bool:
    """Return True for None or whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def to_decimal(value) -> Decimal:
    """Convert ``value`` to a Decimal, treating blank or malformed input as 0."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        result = Decimal(str(value).strip() or "0")
    except InvalidOperation:
        result = None
    if result is None or not result.is_finite():
        logger.debug("Treating malformed amount %r as 0", value)
        return Decimal("0")
    return result


def parse_amount_rule(amount: Optional[str], amount_relates_to: Optional[str] = None) -> AmountRule:
    """Parse a template's amount encoding.

    Percentage form wins over a relation: "15%" is a percentage even when
    ``amount_relates_to`` is set.
    """
    relates_to = None if is_blank(amount_relates_to) else amount_relates_to.strip()
    raw = "" if amount is None else str(amount)

    if "%" in raw:
        return PercentageAmount(percent=to_decimal(raw.replace("%", "")), relates_to=relates_to)
    if relates_to is not None:
        return SaldoAmount(value=to_decimal(raw), relates_to=relates_to)
    return FixedAmount(value=to_decimal(raw))


def round_amount(amount: Decimal) -> Decimal:
    """Round to cents, half up."""
    with localcontext(EXACT_CONTEXT):
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def apply_relation(
    amount: Decimal, relates_to: Optional[str], reference: ReferenceEntity
) -> Decimal:
    """Multiply ``amount`` by the reference value the relation names.

    A missing reference value leaves the amount unchanged.
    """
    with localcontext(EXACT_CONTEXT):
        return _multiply(amount, relates_to, reference)


def _multiply(amount: Decimal, relates_to: Optional[str], reference: ReferenceEntity) -> Decimal:
    if relates_to == RelationMode.REFERENCE_AMOUNT.value:
        if reference.amount is not None:
            return amount * reference.amount
    elif relates_to == RelationMode.REFERENCE_BALANCE.value:
        if reference.balance is not None:
            return amount * reference.balance
    elif relates_to == RelationMode.REFERENCE_AMOUNT_MINUS_BALANCE.value:
        if reference.amount is not None and reference.balance is not None:
            return amount * (reference.amount - reference.balance)
    return amount


def resolve_amount(
    rule: AmountRule,
    reference: Optional[ReferenceEntity] = None,
    person_id: Optional[int] = None,
    rate_provider: Optional[PersonRateProvider] = None,
    today: Optional[date] = None,
) -> Decimal:
    """Compute the booking amount for a template amount rule.

    Args:
        rule: Parsed template amount
        reference: Optional entity the amount relates to
        person_id: Optional person whose rate replaces the template amount
        rate_provider: Callable ``(value_date, person_id)`` returning the
            person-scoped amount or None; required when ``person_id`` is given
        today: Value date used for the person rate when there is no reference
            or the reference has no value date yet

    Returns:
        Amount rounded to 2 fractional digits, or ``UNRESOLVED_AMOUNT`` when
        a person rate was requested but none exists
    """
    amount = rule.factor

    if person_id is not None:
        value_date = reference.value_date if reference is not None else None
        if value_date is None:
            value_date = today or date.today()
        person_amount = rate_provider(value_date, person_id) if rate_provider else None
        if person_amount is None:
            logger.warning(
                "No person-scoped amount for person %s on %s; amount unresolved",
                person_id,
                value_date,
            )
            return UNRESOLVED_AMOUNT
        amount = to_decimal(person_amount)

    if reference is not None:
        amount = apply_relation(amount, rule.relates_to, reference)

    logger.debug("Resolved amount %s for rule %r", amount, rule)
    return round_amount(amount)
