"""
Form surface interface.

Every host (web page binding, Streamlit app, test double) implements this
interface. Methods that reference a field or slot the host does not have
raise FieldNotFoundError; the engine turns that into a logged no-op.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..config.constants import CounterTone, FormButton
from ..models.form_state import ReviewSummary


class FormSurface(ABC):
    """Abstract host surface the validation engine drives."""

    # ==========================================================================
    # FIELD VALUES
    # ==========================================================================

    @abstractmethod
    def has_field(self, field_name: str) -> bool:
        """Whether the host renders a control for this field."""
        pass

    @abstractmethod
    def read(self, field_name: str) -> Any:
        """
        Raw current value of a control.

        Text, select and secret controls return their text; radio groups
        return the selected option or None; checkboxes return a bool.
        """
        pass

    @abstractmethod
    def write(self, field_name: str, value: Any) -> None:
        """Overwrite a control's value (lowercasing, ZIP clipping, SSN mask)."""
        pass

    @abstractmethod
    def is_required(self, field_name: str) -> bool:
        """Whether the host marks the control required."""
        pass

    # ==========================================================================
    # RENDERING
    # ==========================================================================

    @abstractmethod
    def render_field_error(self, field_name: str, message: Optional[str]) -> None:
        """
        Show or hide a field's error slot.

        The slot is created on first use and holds one message at a time.
        A message also flags the control as errored; None hides the slot
        and clears the flag.
        """
        pass

    @abstractmethod
    def render_counter(self, text: str, tone: CounterTone) -> None:
        """Update the global error counter."""
        pass

    @abstractmethod
    def set_button_visible(self, button: FormButton, visible: bool) -> None:
        """Show or hide the submit or validate button."""
        pass

    @abstractmethod
    def focus(self, field_name: str) -> None:
        """Scroll to and focus a control."""
        pass

    @abstractmethod
    def render_review(self, summary: Optional[ReviewSummary]) -> None:
        """Show the review area, or hide it when summary is None."""
        pass

    @abstractmethod
    def show_alert(self, message: str) -> None:
        """Show a blocking message (submission refused)."""
        pass
