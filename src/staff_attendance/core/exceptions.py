class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid (empty name, missing or future date, bad status)."""


class DuplicateNameError(ValidationError):
    """Raised when a staff name is blank or already on the roster."""


class NotFoundError(DomainError):
    """Raised when an operation targets an employee that is not on the roster."""


class ConflictError(DomainError):
    """Raised when a rename would collide with another existing employee."""


class PersistenceError(DomainError):
    """Raised when the record store fails after the local state was already updated."""


class NoDataError(DomainError):
    """Signals that a report window holds no attendance entries."""
