"""Account domain service."""

from typing import Optional
from bookit.database.base import Database
from bookit.domain.entities import Account as AccountEntity
from bookit.domain.errors import (
    ConflictError,
    ValidationError,
    account_not_found,
    duplicate_code,
)


class AccountService:
    """Service for managing ledger accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, code: str, title: str) -> int:
        """Create a new account.

        Args:
            code: Unique account code (e.g., "1000")
            title: Account title

        Returns:
            Account ID

        Raises:
            ConflictError: If an account with the same code exists
        """
        if self.db.get_account_by_code(code) is not None:
            raise ConflictError(duplicate_code("Account", code))

        return self.db.create_account(code=code, title=title)

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def get_account_by_code(self, code: str) -> Optional[AccountEntity]:
        """Get account by code."""
        return self.db.get_account_by_code(code)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities ordered by code
        """
        return self.db.list_accounts()

    def require_account(self, account_id: Optional[int]) -> None:
        """Ensure an optional account ID refers to an existing account.

        Raises:
            ValidationError: If the account does not exist
        """
        if account_id is None:
            return
        if self.db.get_account(account_id) is None:
            raise ValidationError(account_not_found(account_id))
