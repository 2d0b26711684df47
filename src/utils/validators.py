"""Request validation helpers."""

from typing import Optional

from utils.error_handling import ValidationError


def ensure_present(value: Optional[str]) -> str:
    """
    Return value unchanged, or raise ValidationError if it is missing.

    Only None counts as missing: an empty string is still an identifier and
    goes to the table as-is.
    """
    if value is None:
        raise ValidationError()
    return value
