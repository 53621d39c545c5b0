"""In-memory implementation of UserRepository for testing."""

from dataclasses import replace
from datetime import datetime, timedelta

from domain.model.errors import DuplicateIdentityError
from domain.model.user import Account, UserSummary


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, Account] = {}

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
        now: datetime,
    ) -> Account:
        if username in self.store:
            raise DuplicateIdentityError(username)

        account = Account(
            username=username,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            joined_at=now,
            last_login_at=now,
        )
        self.store[username] = account
        return replace(account)

    def update_last_login(self, username: str, now: datetime) -> bool:
        account = self.store.get(username)
        if not account:
            return False

        # keep last_login_at strictly increasing even within one clock tick
        if account.last_login_at and now <= account.last_login_at:
            now = account.last_login_at + timedelta(microseconds=1)
        account.last_login_at = now
        return True

    # ── read operations ──────────────────────────────────────

    def get_by_username(self, username: str) -> Account | None:
        account = self.store.get(username)
        return replace(account) if account else None

    def list_summaries(self) -> list[UserSummary]:
        return [self.store[name].summary() for name in sorted(self.store)]
