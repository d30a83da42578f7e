"""
Error Aggregator

Keeps the error table (field name -> current message) and derives the
global affordances from it after every change:

- error count
- whether every required field is filled (values compared after strip())
- counter text and tone
- submit button visible only with zero errors and all required filled;
  validate button visible otherwise
"""

from typing import Dict, List, Optional, Tuple

from ..config.constants import (
    CounterTone,
    FormButton,
    COUNTER_INITIAL,
    COUNTER_FILL_REQUIRED,
    COUNTER_ALL_CLEAR,
)
from ..models.form_state import FormSnapshot
from ..surface.base import FormSurface
from ..utils.error_handler import ErrorHandler
from ..utils.logger import get_module_logger
from .rule_loader import RuleLoader, get_rule_loader
from .value_accessor import ValueAccessor

logger = get_module_logger()


def counter_state(error_count: int, all_required_filled: bool) -> Tuple[str, CounterTone]:
    """
    Pick the counter text and tone.

    Args:
        error_count: Fields currently in error
        all_required_filled: Every required field has a value

    Returns:
        Tuple of (text, tone)
    """
    if error_count > 0:
        plural = "s" if error_count != 1 else ""
        return f"{error_count} validation error{plural} remaining", CounterTone.ERROR
    if not all_required_filled:
        return COUNTER_FILL_REQUIRED, CounterTone.NEUTRAL
    return COUNTER_ALL_CLEAR, CounterTone.SUCCESS


class ErrorAggregator:
    """Error table plus the UI state derived from it."""

    def __init__(
        self,
        surface: FormSurface,
        accessor: ValueAccessor,
        rule_loader: Optional[RuleLoader] = None,
        error_handler: Optional[ErrorHandler] = None
    ):
        self.surface = surface
        self.accessor = accessor
        self.rule_loader = rule_loader or get_rule_loader()
        self.error_handler = error_handler or ErrorHandler(logger)
        self._errors: Dict[str, str] = {}
        self._counter: Tuple[str, CounterTone] = (COUNTER_INITIAL, CounterTone.NEUTRAL)
        self._show_submit = False

    # ==========================================================================
    # TABLE
    # ==========================================================================

    def set_error(self, field_name: str, message: Optional[str]) -> None:
        """
        Record (or clear) a field's error and refresh the UI state.

        Setting the same message twice leaves a single table entry and a
        single rendered slot.

        Args:
            field_name: Name of the field
            message: Error message, or None when the field is valid
        """
        if message:
            self._errors[field_name] = message
        else:
            self._errors.pop(field_name, None)

        self.error_handler.wrap_operation(self.surface.render_field_error, field_name, message)
        self.refresh()

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    def get_error(self, field_name: str) -> Optional[str]:
        return self._errors.get(field_name)

    def first_error(self, field_order: List[str]) -> Optional[str]:
        """First field in `field_order` that has an error."""
        for field_name in field_order:
            if field_name in self._errors:
                return field_name
        return None

    # ==========================================================================
    # DERIVED STATE
    # ==========================================================================

    def all_required_filled(self) -> bool:
        """Every required field has a non-blank value."""
        for field_name in self.rule_loader.get_required_fields():
            if not self.accessor.get_value(field_name).strip():
                return False
        return True

    def refresh(self) -> None:
        """Recompute the counter and button visibility and push them to the surface."""
        all_filled = self.all_required_filled()
        self._counter = counter_state(self.error_count, all_filled)
        self._show_submit = self.error_count == 0 and all_filled
        self._render()

    def render_initial(self) -> None:
        """Counter and buttons as shown before any interaction."""
        self._counter = (COUNTER_INITIAL, CounterTone.NEUTRAL)
        self._show_submit = False
        self._render()

    def _render(self) -> None:
        text, tone = self._counter
        self.error_handler.wrap_operation(self.surface.render_counter, text, tone)
        self.error_handler.wrap_operation(
            self.surface.set_button_visible, FormButton.SUBMIT, self._show_submit
        )
        self.error_handler.wrap_operation(
            self.surface.set_button_visible, FormButton.VALIDATE, not self._show_submit
        )

    def snapshot(self, focus_field: Optional[str] = None) -> FormSnapshot:
        """Current table and UI state."""
        text, tone = self._counter
        return FormSnapshot(
            errors=self.errors,
            error_count=self.error_count,
            all_required_filled=self.all_required_filled(),
            counter_text=text,
            counter_tone=tone,
            show_submit=self._show_submit,
            show_validate=not self._show_submit,
            focus_field=focus_field,
        )

    def clear(self) -> None:
        """Drop every error and hide their slots."""
        for field_name in list(self._errors):
            self._errors.pop(field_name)
            self.error_handler.wrap_operation(self.surface.render_field_error, field_name, None)
        self.render_initial()
