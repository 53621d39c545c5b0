"""MongoDB index management, shared by each MongoXxxRepository."""

from logging import getLogger

from pymongo.errors import OperationFailure

logger = getLogger(__name__)


def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create an index, replacing an existing one that clashes by name or key spec."""
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except OperationFailure as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise

    wanted = dict(keys)
    for existing_name, info in collection.index_information().items():
        if existing_name == '_id_':
            continue
        same_keys = dict(info.get('key', [])) == wanted
        if (existing_name == name) != same_keys:
            logger.warning("Dropping conflicting index", extra={"index": existing_name})
            collection.drop_index(existing_name)
            collection.create_index(keys, name=name, **kwargs)
            return True

    logger.error("Failed to resolve index conflict", extra={"index": name})
    return False


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.message_repository import MongoMessageRepository
    from adapter.mongodb.user_repository import MongoUserRepository

    results = [
        MongoUserRepository(db).ensure_indexes(),
        MongoMessageRepository(db).ensure_indexes(),
    ]
    return all(results)
