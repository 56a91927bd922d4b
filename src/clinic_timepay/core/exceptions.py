class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AlreadyExistsError(DomainError):
    """Raised when a record that must be unique already exists."""


class AlreadyCompletedError(DomainError):
    """Raised when acting on a record that is already closed."""


class InvalidTransitionError(DomainError):
    """Raised when a lifecycle status would move backwards or skip a step."""


class NoEligibleEmployeesError(DomainError):
    """Raised when a scheduling run has no active employees to assign."""


class OvernightShiftError(ValidationError):
    """Raised when clock-out precedes clock-in and overnight shifts are rejected."""
