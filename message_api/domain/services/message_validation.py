"""
Field rules shared by message create and update.

Every field is checked independently so the caller receives the full set of
violations in one response.
"""

from typing import Optional

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 1000

TITLE_ERROR = (
    f"Title is required and must be between {TITLE_MIN_LENGTH} "
    f"and {TITLE_MAX_LENGTH} characters."
)
CONTENT_ERROR = (
    f"Content must be between {CONTENT_MIN_LENGTH} "
    f"and {CONTENT_MAX_LENGTH} characters."
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _within(value: Optional[str], minimum: int, maximum: int) -> bool:
    return not _is_blank(value) and minimum <= len(value) <= maximum


def validate_message_fields(
    title: Optional[str], content: Optional[str]
) -> dict[str, list[str]]:
    """Return field name -> violation messages; empty when both fields are valid."""
    errors: dict[str, list[str]] = {}

    if not _within(title, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH):
        errors.setdefault("title", []).append(TITLE_ERROR)

    if not _within(content, CONTENT_MIN_LENGTH, CONTENT_MAX_LENGTH):
        errors.setdefault("content", []).append(CONTENT_ERROR)

    return errors
