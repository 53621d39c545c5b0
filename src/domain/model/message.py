"""Message domain models.

A Message is a directed edge between two accounts. SentMessage and
ReceivedMessage are the enriched views returned by the ledger: the message
plus the display fields of the account on the other end.
"""

from dataclasses import dataclass
from datetime import datetime

from domain.model.user import UserSummary


@dataclass
class Message:
    """A single message as stored."""
    id: str
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: datetime | None = None


@dataclass(frozen=True)
class SentMessage:
    """Message seen from the sender's side, enriched with the recipient."""
    id: str
    body: str
    sent_at: datetime
    read_at: datetime | None
    to_user: UserSummary


@dataclass(frozen=True)
class ReceivedMessage:
    """Message seen from the recipient's side, enriched with the sender."""
    id: str
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserSummary
