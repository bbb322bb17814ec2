"""Amount parsing utilities for command line input."""

from decimal import Decimal, InvalidOperation
import re

# Largest magnitude the Numeric(12, 2) amount columns can hold
MAX_AMOUNT = Decimal("9999999999.99")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles:
    - "123.45", "-123.45"
    - "CHF 123.45", "€123.45"
    - "1,234.56" and "1'234.56" (thousands separators)
    - "(123.45)" (negative in parentheses)

    Unlike template amounts, which silently fall back to 0, user input is
    rejected when it cannot be parsed.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is out of range
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Currency symbols and codes
    amount_str = re.sub(r"[$€£¥]|\b(CHF|EUR|USD)\b", "", amount_str)

    # Thousands separators
    amount_str = amount_str.replace(",", "").replace("'", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if abs(amount) > MAX_AMOUNT:
        raise ValueError(f"Amount '{amount_str}' is out of range")
    return -amount if is_negative else amount


def validate_template_amount(amount_str: str) -> str:
    """Validate a template amount encoding and return it normalised.

    Accepts plain amounts ("12.50") and percentages ("15%").

    Raises:
        ValueError: If the amount is neither
    """
    amount_str = amount_str.strip()
    if amount_str.endswith("%"):
        parse_amount(amount_str[:-1])
        return amount_str.replace(" ", "")
    return str(parse_amount(amount_str))
