class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when required fields are missing or malformed."""


class AuthenticationError(DomainError):
    """Base class for session and credential failures."""

    status_code = 401


class Unauthorized(AuthenticationError):
    """Raised when no admin session is present."""

    def __init__(self, message: str = "Unauthorized. Please login."):
        super().__init__(message)


class InvalidCredentials(AuthenticationError):
    """Raised on login failure; never says which part was wrong."""

    def __init__(self, message: str = "Invalid credentials."):
        super().__init__(message)


class AdminNotFound(AuthenticationError):
    def __init__(self, message: str = "Admin not found."):
        super().__init__(message)


class IncorrectPassword(AuthenticationError):
    status_code = 403

    def __init__(self, message: str = "Incorrect admin password."):
        super().__init__(message)


class NotFoundError(DomainError):
    status_code = 404


class InvalidStateError(DomainError):
    """Raised when a transition does not apply to the record's current status."""

    status_code = 409


class AlreadyInitializedError(DomainError):
    def __init__(self, message: str = "Admin already exists."):
        super().__init__(message)


class StorageError(DomainError):
    """Persistence failure. The message is generic; the cause is logged."""

    status_code = 500
