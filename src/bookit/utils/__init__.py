"""Utility functions for bookit."""

from bookit.utils.date_parser import parse_date
from bookit.utils.amount_parser import parse_amount, validate_template_amount
from bookit.utils.account_resolver import resolve_account

__all__ = ["parse_date", "parse_amount", "validate_template_amount", "resolve_account"]
