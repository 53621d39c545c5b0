from typing import Protocol

# bcrypt only reads the first 72 bytes of its input; 5.x rejects anything longer
MAX_PASSWORD_BYTES = 72


class PasswordHasher(Protocol):
    """One-way salted password hashing."""
    def hash(self, plaintext: str) -> str:
        """Return an opaque salted hash. Two calls with the same input differ."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if plaintext matches the stored hash."""
        ...
