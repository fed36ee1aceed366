class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input to a mutating operation is invalid."""


class FormatError(DomainError):
    """Raised when an imported or stored document is malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced subject, day or slot does not exist."""


class PersistenceError(DomainError):
    """Raised when the durable store cannot be read or written."""
