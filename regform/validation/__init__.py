"""
Validation Module

Field rules, error aggregation, touch tracking, SSN masking and the form
session that ties them together.

Components:
- rule_loader.py: Loads field definitions from form_fields.yaml
- field_validators.py: Individual field rule functions and evaluate()
- ssn_masker.py: Masked SSN entry state machine
- value_accessor.py: Reads field values by field kind
- touch_tracker.py: Which fields may show errors
- error_aggregator.py: Error table and derived UI state
- validation_engine.py: FormSession command interface
"""

from .rule_loader import RuleLoader, FieldRule, get_rule_loader
from .field_validators import (
    evaluate,
    validate_date_of_birth,
    validate_password,
    format_password_errors,
    FIELD_VALIDATORS,
)
from .ssn_masker import SSNMasker
from .touch_tracker import TouchTracker
from .value_accessor import ValueAccessor, FieldContext
from .error_aggregator import ErrorAggregator, counter_state
from .validation_engine import FormSession

__all__ = [
    "RuleLoader",
    "FieldRule",
    "get_rule_loader",
    "evaluate",
    "validate_date_of_birth",
    "validate_password",
    "format_password_errors",
    "FIELD_VALIDATORS",
    "SSNMasker",
    "TouchTracker",
    "ValueAccessor",
    "FieldContext",
    "ErrorAggregator",
    "counter_state",
    "FormSession",
]
