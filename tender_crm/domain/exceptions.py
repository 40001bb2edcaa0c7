"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """A required field is missing or malformed"""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainException):
    """Referenced entity does not exist"""

    pass


class ConflictError(DomainException):
    """Unique constraint violated at the store level"""

    pass


class AuthenticationError(DomainException):
    """Credentials did not match a known user"""

    pass


class InternalError(DomainException):
    """Unexpected store failure while writing or deleting documents"""

    pass
