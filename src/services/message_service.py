"""Message service: the directed message ledger between accounts.

The read side never validates that the username exists: "no messages"
and "no such user" both yield an empty list.
"""

import logging
from datetime import datetime, timezone

from domain.model.errors import NotFoundError
from domain.model.message import Message, ReceivedMessage, SentMessage
from port.message_repository import MessageRepository
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def messages_from(repo: MessageRepository, username: str) -> list[SentMessage]:
    """Messages sent by username, each with the recipient's display fields."""
    return repo.find_sent(username)


def messages_to(repo: MessageRepository, username: str) -> list[ReceivedMessage]:
    """Messages received by username, each with the sender's display fields."""
    return repo.find_received(username)


def send_message(
    user_repo: UserRepository,
    message_repo: MessageRepository,
    from_username: str,
    to_username: str,
    body: str,
) -> Message:
    """Record a message from one account to another.

    Raises:
        NotFoundError: sender or recipient does not exist
    """
    for username in (from_username, to_username):
        if user_repo.get_by_username(username) is None:
            raise NotFoundError(f"Cannot find user: {username}")

    message = message_repo.create(
        from_username=from_username,
        to_username=to_username,
        body=body,
        now=datetime.now(timezone.utc),
    )
    logger.info(
        "Message sent",
        extra={"messageId": message.id, "fromUser": from_username, "toUser": to_username},
    )
    return message


def get_message(repo: MessageRepository, message_id: str) -> Message:
    """Get a message by id.

    Raises:
        NotFoundError: no message with that id
    """
    message = repo.get_by_id(message_id)
    if message is None:
        raise NotFoundError(f"No such message: {message_id}")
    return message
