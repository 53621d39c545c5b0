"""Process-wide configuration.

Loaded once from the environment and passed explicitly to the pieces that
need it (password hasher, token signing, MongoDB connection).
"""

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_BCRYPT_ROUNDS = 12
DEFAULT_JWT_ALGORITHM = "HS256"
DEFAULT_JWT_EXPIRATION_DAYS = 7
DEFAULT_DATABASE_NAME = "messagely"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    jwt_secret_key: str
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    jwt_algorithm: str = DEFAULT_JWT_ALGORITHM
    jwt_expiration_days: int = DEFAULT_JWT_EXPIRATION_DAYS
    mongo_url: str | None = None
    database_name: str = DEFAULT_DATABASE_NAME

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ValueError: JWT_SECRET_KEY is missing, an integer variable is not an integer,
                or BCRYPT_ROUNDS is outside bcrypt's 4-31 range
        """
        secret = os.getenv("JWT_SECRET_KEY")
        if not secret:
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )

        rounds = _int_env("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)
        if not 4 <= rounds <= 31:
            raise ValueError(f"BCRYPT_ROUNDS must be between 4 and 31, got {rounds}")

        return cls(
            jwt_secret_key=secret,
            bcrypt_rounds=rounds,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", DEFAULT_JWT_ALGORITHM),
            jwt_expiration_days=_int_env("JWT_EXPIRATION_DAYS", DEFAULT_JWT_EXPIRATION_DAYS),
            mongo_url=os.getenv("MONGO_URL"),
            database_name=os.getenv("MONGODB_DATABASE", DEFAULT_DATABASE_NAME),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
