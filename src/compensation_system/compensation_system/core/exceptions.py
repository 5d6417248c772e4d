class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnknownRoleError(DomainError):
    """Raised when no compensation strategy can be resolved for a role."""

    def __init__(self, role: str):
        super().__init__(f"No compensation strategy for role {role!r}")
        self.role = role


class PersistenceError(DomainError):
    """Raised when the backing store rejects or fails a save."""
