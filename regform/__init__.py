"""
Registration Form Validation Engine

Field validation and form-state engine for a multi-section patient
registration form: per-field rules, cross-field password rules, masked SSN
entry, error aggregation and submit gating.
"""

__version__ = "0.1.0"

from . import config
from . import models
from . import utils
from .validation import FormSession, evaluate
from .surface import FormSurface, InMemoryFormSurface

__all__ = [
    "config",
    "models",
    "utils",
    "FormSession",
    "evaluate",
    "FormSurface",
    "InMemoryFormSurface",
]
