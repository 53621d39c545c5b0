from fastapi import Depends, HTTPException

from adapter.bcrypt.password_hasher import BcryptPasswordHasher
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.message_repository import MongoMessageRepository
from adapter.mongodb.user_repository import MongoUserRepository
from port.message_repository import MessageRepository
from port.password_hasher import PasswordHasher
from port.user_repository import UserRepository
from utils.settings import Settings, get_settings


def _get_db(settings: Settings = Depends(get_settings)):
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client(settings)
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[settings.database_name]


def get_user_repo(db=Depends(_get_db)) -> UserRepository:
    return MongoUserRepository(db)


def get_message_repo(db=Depends(_get_db)) -> MessageRepository:
    return MongoMessageRepository(db)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
