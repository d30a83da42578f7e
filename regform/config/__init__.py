"""
Configuration Module

Manages form configuration and settings.

Components:
- constants.py: Application constants and enums
- form_fields.yaml: Field definitions (label, kind, section, required)
"""

from .constants import FieldKind, FormSection, CounterTone, FormButton

__all__ = [
    "FieldKind",
    "FormSection",
    "CounterTone",
    "FormButton",
]
