class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when stored or submitted data violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a credential (session or token) cannot be trusted."""


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing or invalid."""


class DatabaseConnectionError(Exception):
    """Raised when the database cannot be reached. Not retried."""

    def __init__(self, message: str, errno: int = 0):
        super().__init__(message)
        self.errno = errno
