"""Auth service: registration, authentication and account lookup.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
from datetime import datetime, timezone

from domain.model.errors import InvalidCredentialsError, NotFoundError, ValidationError
from domain.model.user import Account, UserSummary
from port.password_hasher import MAX_PASSWORD_BYTES, PasswordHasher
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _validate_password(password: str) -> None:
    if not password:
        raise ValidationError("Password must not be empty")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


def register(
    repo: UserRepository,
    hasher: PasswordHasher,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    phone: str,
) -> Account:
    """Register a new account.

    joined_at and last_login_at are both set to the creation time.
    Uniqueness is left to the repository so concurrent registrations
    of the same username resolve to exactly one winner.

    Raises:
        DuplicateIdentityError: username already registered
        ValidationError: password is empty or longer than MAX_PASSWORD_BYTES
    """
    _validate_password(password)
    password_hash = hasher.hash(password)
    account = repo.create(
        username=username,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        now=_now(),
    )
    logger.info("Account registered", extra={"username": username})
    return account


def authenticate(repo: UserRepository, hasher: PasswordHasher, username: str, password: str) -> bool:
    """Is this username/password valid?

    An unknown username returns False just like a wrong password.
    Does not touch last_login_at.
    """
    account = repo.get_by_username(username)
    if account is None:
        return False
    return hasher.verify(password, account.password_hash)


def update_login_timestamp(repo: UserRepository, username: str) -> None:
    """Set last_login_at to now.

    Raises:
        NotFoundError: no account for username
    """
    if not repo.update_last_login(username, _now()):
        raise NotFoundError(f"Cannot find user: {username}")


def login(repo: UserRepository, hasher: PasswordHasher, username: str, password: str) -> Account:
    """Authenticate and stamp the login time before returning.

    Raises:
        InvalidCredentialsError: wrong password or unknown username
    """
    if not authenticate(repo, hasher, username, password):
        logger.info("Login rejected", extra={"username": username})
        raise InvalidCredentialsError()

    update_login_timestamp(repo, username)
    logger.info("User logged in", extra={"username": username})
    return get(repo, username)


def list_all(repo: UserRepository) -> list[UserSummary]:
    """Basic info on all users, ordered by username."""
    return repo.list_summaries()


def find(repo: UserRepository, username: str) -> Account | None:
    return repo.get_by_username(username)


def get(repo: UserRepository, username: str) -> Account:
    """Get an account by username.

    Raises:
        NotFoundError: no account for username
    """
    account = repo.get_by_username(username)
    if account is None:
        raise NotFoundError(f"Cannot find user: {username}")
    return account
