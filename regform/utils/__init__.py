"""
Utilities Module

Helper functions and utilities used across the engine.

Components:
- logger.py: Centralized logging with sensitive value masking
- error_handler.py: Surface and configuration errors
- date_utils.py: Date parsing and age limit helpers
- format_utils.py: Format checks, ZIP/lowercase normalisation, SSN mask
- reporting.py: Review summary and submit alert rendering
"""

from .logger import get_logger, get_module_logger
from .date_utils import parse_date, is_future_date, is_older_than
from .format_utils import validate_ssn, validate_phone, validate_email, validate_zip_code
from .reporting import ReviewRenderer, format_review_report, format_submission_alert

__all__ = [
    "get_logger",
    "get_module_logger",
    "parse_date",
    "is_future_date",
    "is_older_than",
    "validate_ssn",
    "validate_phone",
    "validate_email",
    "validate_zip_code",
    "ReviewRenderer",
    "format_review_report",
    "format_submission_alert",
]
