# =============================================================================
# lib/validation.py - Request Validation Predicates
# =============================================================================
# Pure functions with no side effects. Routes run these before touching any
# store so a rejected request never leaves a partial write behind.
# =============================================================================

import re
from typing import Any, Iterable, Mapping

# local@domain.tld, no whitespace, exactly one @
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_PASSWORD_LENGTH = 6


def is_valid_email(value: Any) -> bool:
    """
    Check that a value has the basic shape of an email address.

    Example:
        is_valid_email("jane@example.com")  # True
        is_valid_email("not-an-email")      # False
    """
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


def is_strong_password(value: Any) -> bool:
    """Passwords need at least MIN_PASSWORD_LENGTH characters."""
    return isinstance(value, str) and len(value) >= MIN_PASSWORD_LENGTH


def is_blank(value: Any) -> bool:
    """None, empty strings and whitespace-only strings count as blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(payload: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """
    Return the names of required fields that are absent or blank.

    Args:
        payload: Field name -> submitted value
        required: Field names that must be present

    Returns:
        Missing field names, in the order they were required
    """
    return [name for name in required if is_blank(payload.get(name))]


def normalize_email(value: str) -> str:
    """Emails are stored and compared lowercase."""
    return value.strip().lower()


def credentials_missing(email: Any, password: Any) -> bool:
    """
    Email may not be blank; password only has to be non-empty.

    Whitespace is a legal password character, so "      " is present and is
    left to is_strong_password.
    """
    return is_blank(email) or password is None or password == ""
