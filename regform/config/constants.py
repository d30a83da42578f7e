"""
Application Constants and Enumerations

Defines constants used throughout the registration form engine including
field kinds, form sections, counter tones and message text. Field
definitions themselves live in form_fields.yaml.

KEY DESIGN PRINCIPLES:

1. ONE MESSAGE PER FIELD:
   - A field shows at most one error message at a time
   - Required-and-empty always wins over format messages

2. ALL-AT-ONCE VALIDATION:
   - The VALIDATE button evaluates every validated field in one pass
   - The user sees everything wrong at once, then focus moves to the first error

3. SECRETS NEVER LEAVE THE ENGINE:
   - The SSN display is masked while typing
   - Review and logs never show SSN or password values
"""

from enum import Enum


class FieldKind(str, Enum):
    """How a field's raw surface value is read"""
    TEXT = "text"
    SELECT = "select"
    RADIO_GROUP = "radio_group"
    CHECKBOX = "checkbox"
    SECRET = "secret"


class FormSection(str, Enum):
    """Registration form sections"""
    PERSONAL_INFORMATION = "Personal Information"
    CONTACT_INFORMATION = "Contact Information"
    MEDICAL_HISTORY = "Medical History"
    INSURANCE_INFORMATION = "Insurance Information"
    ACCOUNT_SETUP = "Account Setup"
    CONSENT = "Consent"


class CounterTone(str, Enum):
    """Visual tone of the global error counter"""
    ERROR = "error"
    NEUTRAL = "neutral"
    SUCCESS = "success"


class FormButton(str, Enum):
    """Buttons whose visibility the engine controls"""
    SUBMIT = "submit"
    VALIDATE = "validate"


# Counter colors per tone (host renders these as-is)
COUNTER_STYLES = {
    CounterTone.ERROR: {"color": "#d32f2f", "bold": True},
    CounterTone.NEUTRAL: {"color": "#666", "bold": False},
    CounterTone.SUCCESS: {"color": "#2e7d32", "bold": True},
}


# Regex patterns for format validation
REGEX_PATTERNS = {
    "first_name": r"^[A-Za-z'\-]{1,30}$",
    "middle_initial": r"^[A-Za-z]?$",
    "last_name": r"^[A-Za-z'\-\s0-9]{1,30}$",
    "ssn": r"^\d{9}$",
    "city": r"^[A-Za-z\s]{2,30}$",
    "zip_code": r"^\d{5}$",
    "email": r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$",
    "phone": r"^\(\d{3}\) \d{3}-\d{4}$",
    "letters_and_spaces": r"^[A-Za-z\s]*$",
    "alphanumeric": r"^[A-Za-z0-9]*$",
    "user_id": r"^[A-Za-z_\-][A-Za-z0-9_\-]{4,29}$",
    "password_special": r"[!@#%^&*()\-_+=/><.,`~]",
    "password_quote": r"[\"']",
}


# Error messages
MSG_REQUIRED = "Required field is empty"
MSG_PASSWORDS_DO_NOT_MATCH = "Passwords do not match"
MSG_DOB_INVALID = "Enter a valid date"
MSG_DOB_FUTURE = "Cannot be in the future"
MSG_DOB_TOO_OLD = "Cannot be more than 120 years ago"

# Password sub-rule messages, in evaluation order
MSG_PASSWORD_LENGTH = "Must be 8-30 characters"
MSG_PASSWORD_UPPERCASE = "Must contain 1 uppercase letter"
MSG_PASSWORD_LOWERCASE = "Must contain 1 lowercase letter"
MSG_PASSWORD_DIGIT = "Must contain 1 digit"
MSG_PASSWORD_SPECIAL = "Must contain 1 special character"
MSG_PASSWORD_QUOTES = "Cannot contain quotes"
MSG_PASSWORD_USER_ID = "Cannot contain User ID"
MSG_PASSWORD_FIRST_NAME = "Cannot contain first name"
MSG_PASSWORD_LAST_NAME = "Cannot contain last name"

# Live validation joins password violations with "; ", submit joins with ", "
PASSWORD_JOINER_LIVE = "; "
PASSWORD_JOINER_SUBMIT = ", "


# Counter text
COUNTER_INITIAL = "Fill out the form and click VALIDATE to check for errors"
COUNTER_FILL_REQUIRED = "Fill out all required fields and click VALIDATE to check for errors"
COUNTER_ALL_CLEAR = "All validations passed! You can now submit the form."

SUBMIT_ALERT_HEADER = "Please correct the following errors:"


# Review placeholders
REVIEW_NOT_ENTERED = "(not entered)"
REVIEW_NO_CONDITIONS = "None"
REVIEW_STATUS_PASS = "pass"
REVIEW_STATUS_ERROR_PREFIX = "ERROR: "


# Sentinel recorded in the touch set once bulk validation has run
VALIDATE_ALL_SENTINEL = "__validate_all__"


# SSN masking
SSN_DIGIT_COUNT = 9
SSN_MASK_CHAR = "X"
SSN_SEPARATOR = "-"
SSN_SEPARATOR_AFTER = (2, 4)  # separator follows these digit indexes

ZIP_CODE_LENGTH = 5

# Date of birth may be at most this many years ago
MAX_AGE_YEARS = 120


# Fields normalised on input
LOWERCASE_FIELDS = ["desired_user_id", "email_address"]
SECRET_FIELD = "social_security"


# Sensitive fields to mask in logs
SENSITIVE_FIELDS = [
    "social_security",
    "ssn",
    "password",
    "confirm_password",
    "date_of_birth",
]
