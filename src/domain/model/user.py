from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class UserSummary:
    """Public display fields of an account."""
    username: str
    first_name: str
    last_name: str
    phone: str


@dataclass
class Account:
    """Domain model representing a registered account."""
    username: str
    password_hash: str = field(repr=False)
    first_name: str
    last_name: str
    phone: str
    joined_at: datetime
    last_login_at: datetime | None = None

    def summary(self) -> UserSummary:
        return UserSummary(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
        )
