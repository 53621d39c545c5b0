"""MongoDB implementation of UserRepository.

Accounts are keyed by ``_id = username`` so the primary-key index
enforces uniqueness.
"""

from datetime import datetime
from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateIdentityError
from domain.model.user import Account, UserSummary

logger = getLogger(__name__)

SUMMARY_PROJECTION = {'first_name': 1, 'last_name': 1, 'phone': 1}


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('joined_at', -1)], 'idx_users_joined_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> Account:
        """Convert MongoDB document to Account domain model."""
        return Account(
            username=doc['_id'],
            password_hash=doc['password_hash'],
            first_name=doc['first_name'],
            last_name=doc['last_name'],
            phone=doc['phone'],
            joined_at=doc['joined_at'],
            last_login_at=doc.get('last_login_at'),
        )

    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
        now: datetime,
    ) -> Account:
        """Insert a new account and return it."""
        user_doc = {
            '_id': username,
            'password_hash': password_hash,
            'first_name': first_name,
            'last_name': last_name,
            'phone': phone,
            'joined_at': now,
            'last_login_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("Account creation failed: username already exists", extra={"username": username})
            raise DuplicateIdentityError(username)
        except PyMongoError as e:
            logger.error("Failed to create account", extra={"username": username, "error": str(e)})
            raise

        logger.debug("Account created", extra={"username": username})
        return self._to_domain(user_doc)

    def get_by_username(self, username: str) -> Account | None:
        """Find an account by username. Return Account or None if not found."""
        try:
            doc = self.collection.find_one({'_id': username})
        except PyMongoError as e:
            logger.error("Failed to get account", extra={"username": username, "error": str(e)})
            raise
        return self._to_domain(doc) if doc else None

    def list_summaries(self) -> list[UserSummary]:
        """Return display fields of every account, ordered by username."""
        try:
            cursor = self.collection.find({}, SUMMARY_PROJECTION).sort('_id', 1)
            return [
                UserSummary(
                    username=doc['_id'],
                    first_name=doc['first_name'],
                    last_name=doc['last_name'],
                    phone=doc['phone'],
                )
                for doc in cursor
            ]
        except PyMongoError as e:
            logger.error("Failed to list accounts", extra={"error": str(e)})
            raise

    def update_last_login(self, username: str, now: datetime) -> bool:
        """Update the last login timestamp. Return False if no account matched."""
        # Pipeline update keeps last_login_at strictly increasing at BSON's ms resolution.
        pipeline = [{
            '$set': {
                'last_login_at': {
                    '$max': [now, {'$ifNull': [{'$add': ['$last_login_at', 1]}, now]}],
                },
            },
        }]
        try:
            result = self.collection.update_one({'_id': username}, pipeline)
        except PyMongoError as e:
            logger.error("Failed to update last_login_at", extra={"username": username, "error": str(e)})
            raise

        if result.matched_count == 0:
            return False
        logger.debug("Updated last_login_at", extra={"username": username})
        return True
