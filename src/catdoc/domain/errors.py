"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                   Entity construction errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when an entity is constructed with an invalid field value."""

    def __init__(self, kind: str, field: str, reason: str | None = None) -> None:
        if reason is None:
            reason = f"{field} must be a non-empty string"
        super().__init__(f"Invalid {kind}: {reason}")
        self.kind = kind
        self.field = field
        self.reason = reason
