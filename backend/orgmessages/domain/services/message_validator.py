"""
Message field validation.

Checks a title/content pair and returns a mapping of field name to error
messages. An empty mapping means the pair is valid. Both fields are always
checked, so a caller can receive errors for title and content at once.
"""

from typing import Optional

FieldErrors = dict[str, list[str]]

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 1000

# Field names match the request body keys
TITLE_FIELD = "title"
CONTENT_FIELD = "content"
IS_ACTIVE_FIELD = "is_active"

TITLE_REQUIRED = "Title is required"
TITLE_LENGTH = (
    f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
)
CONTENT_REQUIRED = "Content is required"
CONTENT_LENGTH = (
    f"Content must be between {CONTENT_MIN_LENGTH} and {CONTENT_MAX_LENGTH} characters"
)


def _check_field(
    value: Optional[str],
    min_length: int,
    max_length: int,
    required_message: str,
    length_message: str,
) -> Optional[str]:
    if value is None or not value.strip():
        return required_message
    if len(value) < min_length or len(value) > max_length:
        return length_message
    return None


def validate_message(title: Optional[str], content: Optional[str]) -> FieldErrors:
    """
    Validate a message title and content.

    Args:
        title: Message title, may be None when the client omitted it
        content: Message content, may be None when the client omitted it

    Returns:
        Field name -> list of error messages. Empty when valid.
    """
    errors: FieldErrors = {}

    title_error = _check_field(
        title, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH, TITLE_REQUIRED, TITLE_LENGTH
    )
    if title_error:
        errors[TITLE_FIELD] = [title_error]

    content_error = _check_field(
        content,
        CONTENT_MIN_LENGTH,
        CONTENT_MAX_LENGTH,
        CONTENT_REQUIRED,
        CONTENT_LENGTH,
    )
    if content_error:
        errors[CONTENT_FIELD] = [content_error]

    return errors
