"""
Field Validators for the Registration Form

Pure rule functions mapping a field's current value (plus the values of the
fields it is compared against) to an error message, or None when valid.

Evaluation order for every field:
1. Required check - a required, empty field reports MSG_REQUIRED
2. Field rule - only runs on a non-empty value, so optional-and-empty is valid

Password checks collect every violated sub-rule rather than stopping at the
first one.
"""

import re
from datetime import date
from typing import Optional, List, Dict, Callable, Mapping

from ..config.constants import (
    REGEX_PATTERNS,
    MAX_AGE_YEARS,
    MSG_REQUIRED,
    MSG_PASSWORDS_DO_NOT_MATCH,
    MSG_DOB_INVALID,
    MSG_DOB_FUTURE,
    MSG_DOB_TOO_OLD,
    MSG_PASSWORD_LENGTH,
    MSG_PASSWORD_UPPERCASE,
    MSG_PASSWORD_LOWERCASE,
    MSG_PASSWORD_DIGIT,
    MSG_PASSWORD_SPECIAL,
    MSG_PASSWORD_QUOTES,
    MSG_PASSWORD_USER_ID,
    MSG_PASSWORD_FIRST_NAME,
    MSG_PASSWORD_LAST_NAME,
    PASSWORD_JOINER_LIVE,
)
from ..utils.format_utils import matches, validate_ssn, validate_email, validate_phone, validate_zip_code
from ..utils.date_utils import parse_date, is_future_date, is_older_than
from .rule_loader import get_rule_loader


FieldValidator = Callable[[str, Mapping[str, str]], Optional[str]]


# =============================================================================
# STANDALONE VALIDATORS
# =============================================================================

def validate_date_of_birth(value: Optional[str], today: Optional[date] = None) -> Optional[str]:
    """
    Validate a date of birth.

    Requirements:
    - Must be present (the standalone check reports MSG_REQUIRED itself)
    - Must parse as a calendar date
    - Not later than today
    - Not earlier than the same day 120 years ago

    Args:
        value: Date string, usually YYYY-MM-DD from a date input
        today: Reference day (defaults to date.today())

    Returns:
        Error message or None
    """
    if not value:
        return MSG_REQUIRED

    parsed = parse_date(value)
    if parsed is None:
        return MSG_DOB_INVALID

    today = today or date.today()

    if is_future_date(parsed, strict=True, today=today):
        return MSG_DOB_FUTURE
    if is_older_than(parsed, MAX_AGE_YEARS, today=today):
        return MSG_DOB_TOO_OLD

    return None


def validate_password(
    password: str,
    user_id: str = "",
    first_name: str = "",
    last_name: str = ""
) -> List[str]:
    """
    Collect every password rule the value violates.

    Rules, in order:
    - 8-30 characters
    - at least one uppercase, lowercase, digit and special character
    - no single or double quotes
    - must not contain the user ID, first name or last name
      (case-insensitive, skipped when that field is empty)

    Args:
        password: Candidate password
        user_id: Current desired user ID
        first_name: Current first name
        last_name: Current last name

    Returns:
        List of violation messages (empty when valid)
    """
    password = password or ""
    errors = []

    if len(password) < 8 or len(password) > 30:
        errors.append(MSG_PASSWORD_LENGTH)
    if not re.search(r"[A-Z]", password):
        errors.append(MSG_PASSWORD_UPPERCASE)
    if not re.search(r"[a-z]", password):
        errors.append(MSG_PASSWORD_LOWERCASE)
    if not re.search(r"[0-9]", password):
        errors.append(MSG_PASSWORD_DIGIT)
    if not re.search(REGEX_PATTERNS["password_special"], password):
        errors.append(MSG_PASSWORD_SPECIAL)
    if re.search(REGEX_PATTERNS["password_quote"], password):
        errors.append(MSG_PASSWORD_QUOTES)

    lowered = password.lower()
    if user_id and user_id.lower() in lowered:
        errors.append(MSG_PASSWORD_USER_ID)
    if first_name and first_name.lower() in lowered:
        errors.append(MSG_PASSWORD_FIRST_NAME)
    if last_name and last_name.lower() in lowered:
        errors.append(MSG_PASSWORD_LAST_NAME)

    return errors


def format_password_errors(errors: List[str], joiner: str = PASSWORD_JOINER_LIVE) -> Optional[str]:
    """Join password violations into one message, or None if there are none."""
    return joiner.join(errors) if errors else None


# =============================================================================
# FIELD RULES (value is always non-empty here)
# =============================================================================

def _first_name(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not matches("first_name", value):
        return "Enter 1-30 characters, letters, apostrophes, and dashes only"
    return None


def _middle_initial(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not matches("middle_initial", value):
        return "Enter single letter only"
    return None


def _last_name(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not matches("last_name", value):
        return "Enter 1-30 characters, letters, apostrophes, dashes, spaces, and numbers allowed"
    return None


def _date_of_birth(value: str, context: Mapping[str, str]) -> Optional[str]:
    return validate_date_of_birth(value)


def _social_security(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not validate_ssn(value):
        return "Must be exactly 9 digits"
    return None


def _address_line1(value: str, context: Mapping[str, str]) -> Optional[str]:
    if len(value) < 2 or len(value) > 30:
        return "Enter 2-30 characters"
    return None


def _address_line2(value: str, context: Mapping[str, str]) -> Optional[str]:
    if len(value) < 2 or len(value) > 30:
        return "Must be 2-30 characters if entered"
    return None


def _city(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not matches("city", value):
        return "Enter 2-30 characters, letters and spaces only"
    return None


def _zip_code(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not validate_zip_code(value):
        return "Must be exactly 5 digits"
    return None


def _email_address(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not validate_email(value):
        return "Enter valid email: name@domain.tld"
    return None


def _phone(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not validate_phone(value):
        return "Format: (XXX) XXX-XXXX"
    return None


def _letters_and_spaces(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not matches("letters_and_spaces", value):
        return "Letters and spaces only"
    return None


def _policy_number(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not matches("alphanumeric", value):
        return "Alphanumeric characters only"
    return None


def _desired_user_id(value: str, context: Mapping[str, str]) -> Optional[str]:
    if not matches("user_id", value):
        return "5-30 characters, letters, numbers, underscore, dash - first character cannot be a number"
    return None


def _password(value: str, context: Mapping[str, str]) -> Optional[str]:
    errors = validate_password(
        value,
        user_id=context.get("desired_user_id", ""),
        first_name=context.get("first_name", ""),
        last_name=context.get("last_name", ""),
    )
    return format_password_errors(errors, PASSWORD_JOINER_LIVE)


def _confirm_password(value: str, context: Mapping[str, str]) -> Optional[str]:
    if value != context.get("password", ""):
        return MSG_PASSWORDS_DO_NOT_MATCH
    return None


# Fields not listed here (radio groups, selects, free text) only get the
# required check.
FIELD_VALIDATORS: Dict[str, FieldValidator] = {
    "first_name": _first_name,
    "middle_initial": _middle_initial,
    "last_name": _last_name,
    "date_of_birth": _date_of_birth,
    "social_security": _social_security,
    "address_line1": _address_line1,
    "address_line2": _address_line2,
    "city": _city,
    "zip_code": _zip_code,
    "email_address": _email_address,
    "phone_number": _phone,
    "emergency_phone": _phone,
    "emergency_contact": _letters_and_spaces,
    "insurance_provider": _letters_and_spaces,
    "physician_name": _letters_and_spaces,
    "pharmacy_name": _letters_and_spaces,
    "policy_number": _policy_number,
    "desired_user_id": _desired_user_id,
    "password": _password,
    "confirm_password": _confirm_password,
}


# =============================================================================
# EVALUATION
# =============================================================================

def evaluate(
    field_name: str,
    value: Optional[str],
    context: Optional[Mapping[str, str]] = None,
    required: Optional[bool] = None
) -> Optional[str]:
    """
    Evaluate one field.

    Args:
        field_name: Name of the field
        value: Current value (masked fields pass their real value)
        context: Current values of other fields (password, user ID, names)
        required: Override the required flag; None uses the field definition

    Returns:
        Error message, or None when the field is valid
    """
    value = value or ""
    context = context if context is not None else {}

    if required is None:
        required = get_rule_loader().is_required(field_name)

    if not value:
        if required:
            return MSG_REQUIRED
        if field_name == "state":
            return "Please select a state"
        return None

    validator = FIELD_VALIDATORS.get(field_name)
    if validator is None:
        return None
    return validator(value, context)
