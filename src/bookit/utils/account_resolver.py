"""Utility for resolving account codes to IDs."""

from bookit.domain.account import AccountService
from bookit.domain.errors import NotFoundError, account_code_not_found, account_not_found


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve an account code or ID to the account ID.

    Account codes are often numeric ("1000"), so a string is first looked up
    as a code and only then as an ID.

    Args:
        account_service: AccountService instance
        account: Account code (str) or ID (int)

    Returns:
        Account ID

    Raises:
        NotFoundError: If account is not found
    """
    if isinstance(account, int):
        if account_service.get_account(account) is None:
            raise NotFoundError(account_not_found(account))
        return account

    account_obj = account_service.get_account_by_code(account)
    if account_obj is not None:
        return account_obj.id

    try:
        account_id = int(account)
    except (ValueError, TypeError):
        raise NotFoundError(account_code_not_found(account))

    if account_service.get_account(account_id) is None:
        raise NotFoundError(account_code_not_found(account))
    return account_id
