"""
Format Validation Utilities

Provides helper functions for field formats including:
- SSN (9 digits) and its masked display
- Phone numbers in (XXX) XXX-XXXX form
- Email addresses
- ZIP codes (digit stripping and truncation)
- Lowercase normalisation for user IDs and emails
"""

import re
from ..config.constants import (
    REGEX_PATTERNS,
    SSN_MASK_CHAR,
    SSN_SEPARATOR,
    SSN_SEPARATOR_AFTER,
    ZIP_CODE_LENGTH,
)


def matches(pattern_name: str, value: str) -> bool:
    """
    Check a value against a named pattern from REGEX_PATTERNS.

    Args:
        pattern_name: Key in REGEX_PATTERNS
        value: Value to check (not stripped)

    Returns:
        True if the whole value matches, False otherwise
    """
    if not isinstance(value, str):
        return False
    return re.fullmatch(REGEX_PATTERNS[pattern_name], value, re.ASCII) is not None


def validate_ssn(ssn: str) -> bool:
    """
    Validate Social Security Number digits.

    Only the bare 9-digit form is accepted; the masked display is never
    validated.
    """
    if not ssn or not isinstance(ssn, str):
        return False
    return matches("ssn", ssn)


def validate_phone(phone: str) -> bool:
    """
    Validate phone number format.

    Accepts only: (555) 123-4567
    """
    if not phone or not isinstance(phone, str):
        return False
    return matches("phone", phone)


def validate_email(email: str) -> bool:
    """
    Validate email address format.

    Basic email validation - checks for:
    - Valid local-part characters
    - @ symbol
    - Domain with an alphabetic extension of 2+ letters
    """
    if not email or not isinstance(email, str):
        return False
    return matches("email", email)


def validate_zip_code(zip_code: str) -> bool:
    """Validate a 5-digit ZIP code."""
    if not zip_code or not isinstance(zip_code, str):
        return False
    return matches("zip_code", zip_code)


def normalize_zip_code(raw: str) -> str:
    """
    Strip non-digits and clip to 5 digits.

    Applied to the ZIP input on every change, so a 6-digit value never
    reaches validation.

    Args:
        raw: Raw text typed into the ZIP input

    Returns:
        At most 5 digits
    """
    if not raw:
        return ""
    return re.sub(r'\D', '', raw)[:ZIP_CODE_LENGTH]


def normalize_lowercase(raw: str) -> str:
    """Lowercase user-typed text (user ID, email)."""
    return raw.lower() if raw else ""


def mask_ssn_display(digit_count: int) -> str:
    """
    Build the masked SSN display for a number of held digits.

    Each digit becomes 'X'; a dash follows digit index 2 and index 4, so a
    full number shows as XXX-XX-XXXX.

    Args:
        digit_count: Number of digits entered so far

    Returns:
        Masked display string
    """
    masked = ""
    for i in range(digit_count):
        masked += SSN_MASK_CHAR
        if i in SSN_SEPARATOR_AFTER:
            masked += SSN_SEPARATOR
    return masked
