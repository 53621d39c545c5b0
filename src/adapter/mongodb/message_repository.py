"""MongoDB implementation of MessageRepository."""

import uuid
from datetime import datetime
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import MESSAGES_COLLECTION_NAME, USERS_COLLECTION_NAME
from domain.model.message import Message, ReceivedMessage, SentMessage
from domain.model.user import UserSummary

logger = getLogger(__name__)


class MongoMessageRepository:
    def __init__(self, db: Database):
        self.collection = db[MESSAGES_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for messages collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('from_username', 1)], 'idx_messages_from')
            create_index_safe(self.collection, [('to_username', 1)], 'idx_messages_to')
            return True
        except PyMongoError as e:
            logger.error("Failed to create messages indexes", extra={"error": str(e)})
            return False

    # ── helpers ──────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Message:
        """Convert MongoDB document to Message domain model."""
        return Message(
            id=doc['_id'],
            from_username=doc['from_username'],
            to_username=doc['to_username'],
            body=doc['body'],
            sent_at=doc['sent_at'],
            read_at=doc.get('read_at'),
        )

    @staticmethod
    def _counterpart_pipeline(match_field: str, username: str, join_field: str) -> list[dict]:
        """Aggregation joining each matched message to the account on join_field.

        Inner-join semantics: messages whose counterpart account is missing are dropped.
        """
        return [
            {'$match': {match_field: username}},
            {'$lookup': {
                'from': USERS_COLLECTION_NAME,
                'localField': join_field,
                'foreignField': '_id',
                'as': 'counterpart',
            }},
            {'$unwind': '$counterpart'},
            {'$project': {
                'body': 1,
                'sent_at': 1,
                'read_at': 1,
                'counterpart._id': 1,
                'counterpart.first_name': 1,
                'counterpart.last_name': 1,
                'counterpart.phone': 1,
            }},
        ]

    @staticmethod
    def _summary(doc: dict) -> UserSummary:
        return UserSummary(
            username=doc['_id'],
            first_name=doc['first_name'],
            last_name=doc['last_name'],
            phone=doc['phone'],
        )

    # ── write operations ─────────────────────────────────────

    def create(self, from_username: str, to_username: str, body: str, now: datetime) -> Message:
        """Insert a new message and return it."""
        message_doc = {
            '_id': uuid.uuid4().hex,
            'from_username': from_username,
            'to_username': to_username,
            'body': body,
            'sent_at': now,
            'read_at': None,
        }
        try:
            self.collection.insert_one(message_doc)
        except PyMongoError as e:
            logger.error(
                "Failed to save message",
                extra={"fromUser": from_username, "toUser": to_username, "error": str(e)},
            )
            raise
        return self._to_domain(message_doc)

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, message_id: str) -> Message | None:
        """Find a message by ID. Return Message or None if not found."""
        try:
            doc = self.collection.find_one({'_id': message_id})
        except PyMongoError as e:
            logger.error("Failed to get message", extra={"messageId": message_id, "error": str(e)})
            raise
        return self._to_domain(doc) if doc else None

    def find_sent(self, from_username: str) -> list[SentMessage]:
        """Messages sent by a user, joined with the recipient."""
        pipeline = self._counterpart_pipeline('from_username', from_username, 'to_username')
        try:
            return [
                SentMessage(
                    id=doc['_id'],
                    body=doc['body'],
                    sent_at=doc['sent_at'],
                    read_at=doc.get('read_at'),
                    to_user=self._summary(doc['counterpart']),
                )
                for doc in self.collection.aggregate(pipeline)
            ]
        except PyMongoError as e:
            logger.error("Failed to get sent messages", extra={"username": from_username, "error": str(e)})
            raise

    def find_received(self, to_username: str) -> list[ReceivedMessage]:
        """Messages received by a user, joined with the sender."""
        pipeline = self._counterpart_pipeline('to_username', to_username, 'from_username')
        try:
            return [
                ReceivedMessage(
                    id=doc['_id'],
                    body=doc['body'],
                    sent_at=doc['sent_at'],
                    read_at=doc.get('read_at'),
                    from_user=self._summary(doc['counterpart']),
                )
                for doc in self.collection.aggregate(pipeline)
            ]
        except PyMongoError as e:
            logger.error("Failed to get received messages", extra={"username": to_username, "error": str(e)})
            raise
