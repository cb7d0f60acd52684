"""Domain services - pure business logic with no I/O."""

from message_api.domain.services.message_validation import (
    CONTENT_ERROR,
    TITLE_ERROR,
    validate_message_fields,
)

__all__ = [
    "CONTENT_ERROR",
    "TITLE_ERROR",
    "validate_message_fields",
]
