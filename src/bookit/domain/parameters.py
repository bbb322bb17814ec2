"""Booking parameter composition.

Parameters arrive from code, the CLI or imports with keys in different
spellings; all of them are normalised so ``"debitAccountId"``,
``"DEBIT_ACCOUNT_ID"`` and ``"debit_account_id"`` address the same value.
"""

import re
from enum import Enum
from typing import Any, Mapping, Optional

from bookit.domain.entities import BookingTemplate

# Template fields copied into every booking.
TEMPLATE_BOOKING_FIELDS = ("title", "comments", "debit_account_id", "credit_account_id")

# Consumed while resolving the amount, never forwarded to the booking.
CONTROL_PARAMETERS = ("person_id", "reference", "reference_type", "reference_id")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_key(key: Any) -> str:
    """Normalise a parameter key to its snake_case string form."""
    if isinstance(key, Enum):
        key = key.value
    key = str(key).strip()
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


def normalize_parameters(params: Optional[Mapping[Any, Any]]) -> dict[str, Any]:
    """Return a copy of ``params`` with normalised keys.

    When two keys normalise to the same name the later one wins.
    """
    if not params:
        return {}
    return {normalize_key(key): value for key, value in params.items()}


def split_control_parameters(
    params: Mapping[str, Any],
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split normalised parameters into (control, overrides)."""
    control = {k: v for k, v in params.items() if k in CONTROL_PARAMETERS}
    overrides = {k: v for k, v in params.items() if k not in CONTROL_PARAMETERS}
    return control, overrides


def template_fields(template: BookingTemplate) -> dict[str, Any]:
    """Fields a booking inherits from its template."""
    return {name: getattr(template, name) for name in TEMPLATE_BOOKING_FIELDS}


def compose_booking_parameters(
    template: BookingTemplate,
    amount: Any,
    overrides: Optional[Mapping[Any, Any]] = None,
) -> dict[str, Any]:
    """Merge template fields, the resolved amount and caller overrides.

    Overrides are applied last and win for every key they contain,
    ``amount`` included. Control parameters among the overrides are dropped.
    """
    composed = template_fields(template)
    composed["amount"] = amount
    _, extra = split_control_parameters(normalize_parameters(overrides))
    composed.update(extra)
    return composed
