"""bcrypt implementation of PasswordHasher."""

from logging import getLogger

import bcrypt

from port.password_hasher import MAX_PASSWORD_BYTES

logger = getLogger(__name__)

# 2^12 key-expansion rounds
DEFAULT_ROUNDS = 12


class BcryptPasswordHasher:
    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash password using bcrypt with the configured work factor.

        Raises:
            ValueError: password longer than MAX_PASSWORD_BYTES once UTF-8 encoded
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode('utf-8'), salt).decode('utf-8')

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Verify password against hash.

        Over-long passwords and malformed hashes never match.
        """
        password = plaintext.encode('utf-8')
        if len(password) > MAX_PASSWORD_BYTES:
            logger.debug("Password exceeds bcrypt's byte limit", extra={"limit": MAX_PASSWORD_BYTES})
            return False
        try:
            return bcrypt.checkpw(password, hashed.encode('utf-8'))
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False
