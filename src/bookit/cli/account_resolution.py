"""CLI helper for resolving account options."""

from __future__ import annotations

from typing import Optional

import click
from bookit.cli.error_handling import handle_domain_error
from bookit.domain.account import AccountService
from bookit.domain.errors import NotFoundError
from bookit.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: Optional[str]
) -> Optional[int]:
    """Resolve an optional --debit/--credit value to an account ID.

    Unknown accounts end the command through ``handle_domain_error``.
    """
    if account is None:
        return None
    try:
        return resolve_account(account_service, account)
    except NotFoundError as exc:
        handle_domain_error(ctx, exc)
