from datetime import datetime
from typing import Protocol

from domain.model.user import Account, UserSummary


class UserRepository(Protocol):
    """Protocol defining the interface for account data access."""
    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
        now: datetime,
    ) -> Account:
        """Insert a new account. Raise DuplicateIdentityError if the username is taken."""
        ...

    def get_by_username(self, username: str) -> Account | None:
        """Find an account by username. Return Account or None if not found."""
        ...

    def list_summaries(self) -> list[UserSummary]:
        """Return display fields of every account, ordered by username."""
        ...

    def update_last_login(self, username: str, now: datetime) -> bool:
        """Set last_login_at. Return False if no account matched."""
        ...
