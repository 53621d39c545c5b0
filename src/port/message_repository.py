from datetime import datetime
from typing import Protocol

from domain.model.message import Message, ReceivedMessage, SentMessage


class MessageRepository(Protocol):
    """Protocol defining the interface for message data access."""
    def create(self, from_username: str, to_username: str, body: str, now: datetime) -> Message:
        """Insert a new message and return it with its assigned id."""
        ...

    def get_by_id(self, message_id: str) -> Message | None:
        """Find a message by ID. Return Message or None if not found."""
        ...

    def find_sent(self, from_username: str) -> list[SentMessage]:
        """Messages sent by a user, joined with the recipient's display fields."""
        ...

    def find_received(self, to_username: str) -> list[ReceivedMessage]:
        """Messages received by a user, joined with the sender's display fields."""
        ...
