"""Domain-specific exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    pass


class TheaterNotFoundError(DomainError):
    """Raised when no theater (or no theater at all) matches the request."""

    pass


class TheaterAlreadyDeletedError(TheaterNotFoundError):
    """Raised when a delete cannot be confirmed by re-reading the row."""

    pass
