"""Domain-specific exceptions — framework-independent."""

import uuid


class InvalidIdentifierError(ValueError):
    """Raised when a user identifier is not a valid UUID where one is required."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} '{value}' is not a valid user identifier")


def is_valid_uuid(value: str) -> bool:
    """True for a canonical hyphenated UUID string (any case)."""
    try:
        parsed = uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return str(parsed) == value.lower()
