"""In-memory implementation of MessageRepository for testing.

Shares the FakeUserRepository store to perform the account joins.
"""

import uuid
from datetime import datetime

from adapter.fake.user_repository import FakeUserRepository
from domain.model.message import Message, ReceivedMessage, SentMessage


class FakeMessageRepository:
    def __init__(self, users: FakeUserRepository):
        self.users = users
        self.store: dict[str, Message] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, from_username: str, to_username: str, body: str, now: datetime) -> Message:
        message = Message(
            id=uuid.uuid4().hex,
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=now,
        )
        self.store[message.id] = message
        return message

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, message_id: str) -> Message | None:
        return self.store.get(message_id)

    def find_sent(self, from_username: str) -> list[SentMessage]:
        results = []
        for m in self.store.values():
            recipient = self.users.store.get(m.to_username)
            if m.from_username != from_username or recipient is None:
                continue
            results.append(SentMessage(
                id=m.id, body=m.body, sent_at=m.sent_at, read_at=m.read_at,
                to_user=recipient.summary(),
            ))
        return results

    def find_received(self, to_username: str) -> list[ReceivedMessage]:
        results = []
        for m in self.store.values():
            sender = self.users.store.get(m.from_username)
            if m.to_username != to_username or sender is None:
                continue
            results.append(ReceivedMessage(
                id=m.id, body=m.body, sent_at=m.sent_at, read_at=m.read_at,
                from_user=sender.summary(),
            ))
        return results
