"""
Data Models Module

Pydantic models for type safety and validation.

Components:
- form_state.py: Snapshot, submit and review models
"""

from .form_state import FieldError, FormSnapshot, SubmitResult, ReviewEntry, ReviewSummary

__all__ = [
    "FieldError",
    "FormSnapshot",
    "SubmitResult",
    "ReviewEntry",
    "ReviewSummary",
]
