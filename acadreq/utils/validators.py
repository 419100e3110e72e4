"""
Validation utilities
"""

import re
from typing import Any, Iterable, Optional
from acadreq.utils.exceptions import ValidationError


def validate_email(email: str) -> bool:
    """
    Validate email format

    Args:
        email: Email to validate

    Returns:
        True if valid email
    """
    if not email or not isinstance(email, str):
        return False

    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email.strip()))


def validate_password(password: str) -> bool:
    """
    Validate password strength

    Args:
        password: Password to validate

    Returns:
        True if valid password
    """
    if not password or not isinstance(password, str):
        return False

    # At least 6 characters
    return len(password) >= 6


def validate_required(value: Any, field_name: str) -> None:
    """
    Validate required field

    Args:
        value: Value to validate
        field_name: Name of the field for error message

    Raises:
        ValidationError: If value is empty or None
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")


def validate_string_length(value: str, min_length: int = 1, max_length: Optional[int] = None,
                          field_name: str = "Field") -> None:
    """
    Validate string length

    Args:
        value: String to validate
        min_length: Minimum length
        max_length: Maximum length
        field_name: Name of the field for error message

    Raises:
        ValidationError: If length is invalid
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")

    if len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")

    if max_length and len(value) > max_length:
        raise ValidationError(f"{field_name} cannot exceed {max_length} characters")


def validate_text_field(value: Any, field_name: str, max_length: int) -> str:
    """
    Validate a required free-text field and return it trimmed

    Raises:
        ValidationError: If the value is missing, blank or too long
    """
    validate_required(value, field_name)
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    value = value.strip()
    validate_string_length(value, 1, max_length, field_name)
    return value


def validate_choice(value: Any, choices: Iterable[str], field_name: str) -> str:
    """
    Validate that value is one of the allowed choices

    Raises:
        ValidationError: If value is not allowed
    """
    choices = list(choices)
    if value not in choices:
        quoted = ' or '.join(f'"{c}"' for c in choices)
        raise ValidationError(f"Invalid {field_name}. Must be {quoted}")
    return value
