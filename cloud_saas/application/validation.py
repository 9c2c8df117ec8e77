from typing import Optional

from ..core.exceptions import ValidationError


def require_fields(*values: Optional[str]) -> None:
    """
    Reject the request unless every value is a non-blank string.

    Raises:
        ValidationError: If any value is missing or empty after trimming
    """
    for value in values:
        if value is None or not isinstance(value, str) or not value.strip():
            raise ValidationError()
