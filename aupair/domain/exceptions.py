"""
Domain-level exceptions for the matching and booking workflows.

These exceptions represent business rule violations and domain logic errors.
They are mapped to HTTP responses in the API layer. The match scorer and the
booking conflict checker never raise them.
"""


class DomainException(Exception):
    """Base exception for all domain-level errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation rules are violated."""
    pass


class NotFoundError(DomainException):
    """Base exception for entities not found."""
    pass


class MemberNotFoundError(NotFoundError):
    """Raised when a member is missing or inactive."""
    pass


class MatchNotFoundError(NotFoundError):
    """Raised when a match is not found."""
    pass


class BookingNotFoundError(NotFoundError):
    """Raised when a booking is not found."""
    pass


class AuthorizationError(DomainException):
    """Base exception for authorization errors."""
    pass


class NotParticipantError(AuthorizationError):
    """Raised when a member acts on a match or booking they are not part of."""
    pass


class ConflictError(DomainException):
    """Base exception for state conflicts with existing records."""
    pass


class MatchAlreadyExistsError(ConflictError):
    """Raised when a match already exists between two members."""
    pass


class BookingConflictError(ConflictError):
    """Raised when a booking overlaps an active booking of the same au pair."""
    pass


class ConfigurationError(DomainException):
    """Raised when configuration is invalid or missing."""
    pass


__all__ = [
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "MemberNotFoundError",
    "MatchNotFoundError",
    "BookingNotFoundError",
    "AuthorizationError",
    "NotParticipantError",
    "ConflictError",
    "MatchAlreadyExistsError",
    "BookingConflictError",
    "ConfigurationError",
]
