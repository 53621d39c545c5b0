"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class DuplicateIdentityError(DuplicateError):
    """Username is already registered."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")


class InvalidCredentialsError(ValidationError):
    """Username/password pair did not authenticate.

    Deliberately carries no hint about which half was wrong.
    """

    def __init__(self):
        super().__init__("Invalid username or password")
