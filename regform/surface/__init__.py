"""
Form Surface Module

The engine never touches markup directly. It talks to a FormSurface that
reads and writes named field values and renders error slots, the counter,
button visibility, focus and the review area.

Components:
- base.py: FormSurface abstract interface
- memory_surface.py: Dictionary-backed surface for tests and scripting
"""

from .base import FormSurface
from .memory_surface import InMemoryFormSurface, ErrorSlot

__all__ = [
    "FormSurface",
    "InMemoryFormSurface",
    "ErrorSlot",
]
