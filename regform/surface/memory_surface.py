"""
Dictionary-backed form surface.

Builds one control per field definition (grouped checkbox members
included) and records everything the engine renders, so tests and scripts
can drive a full form session without a browser.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..config.constants import CounterTone, FieldKind, FormButton
from ..models.form_state import ReviewSummary
from ..utils.error_handler import field_not_found_error
from ..validation.rule_loader import RuleLoader, get_rule_loader
from .base import FormSurface


class ErrorSlot(BaseModel):
    """Per-field error indicator"""
    message: str = Field("", description="Last message shown in the slot")
    visible: bool = Field(False, description="Whether the slot is shown")


class _Control(BaseModel):
    kind: FieldKind
    value: Any = None
    required: bool = False
    errored: bool = False


class InMemoryFormSurface(FormSurface):
    """
    Form surface holding control state in memory.

    Args:
        rule_loader: Field definitions (uses the singleton if None)
        omit: Field names to leave out, simulating a partially rendered page
    """

    def __init__(
        self,
        rule_loader: Optional[RuleLoader] = None,
        omit: Iterable[str] = ()
    ):
        rule_loader = rule_loader or get_rule_loader()
        omitted = set(omit)

        self._controls: Dict[str, _Control] = {}
        for name, rule in rule_loader.get_all_rules().items():
            if rule.members:
                for member_name in rule.members:
                    if member_name not in omitted:
                        self._controls[member_name] = _Control(kind=FieldKind.CHECKBOX, value=False)
                continue
            if name in omitted:
                continue
            self._controls[name] = _Control(
                kind=rule.kind, value=self._empty_value(rule.kind), required=rule.required
            )

        self.error_slots: Dict[str, ErrorSlot] = {}
        self.counter: Tuple[str, Optional[CounterTone]] = ("", None)
        self.buttons: Dict[FormButton, bool] = {FormButton.SUBMIT: True, FormButton.VALIDATE: True}
        self.focused: Optional[str] = None
        self.review: Optional[ReviewSummary] = None
        self.alerts: List[str] = []
        self.slot_creations = 0

    @staticmethod
    def _empty_value(kind: FieldKind) -> Any:
        if kind == FieldKind.RADIO_GROUP:
            return None
        if kind == FieldKind.CHECKBOX:
            return False
        return ""

    def _control(self, field_name: str) -> _Control:
        control = self._controls.get(field_name)
        if control is None:
            raise field_not_found_error(field_name)
        return control

    # Field values

    def has_field(self, field_name: str) -> bool:
        return field_name in self._controls

    def read(self, field_name: str) -> Any:
        return self._control(field_name).value

    def write(self, field_name: str, value: Any) -> None:
        self._control(field_name).value = value

    def is_required(self, field_name: str) -> bool:
        control = self._controls.get(field_name)
        return bool(control and control.required)

    def set_required(self, field_name: str, required: bool) -> None:
        self._control(field_name).required = required

    def is_errored(self, field_name: str) -> bool:
        return self._control(field_name).errored

    # Rendering

    def render_field_error(self, field_name: str, message: Optional[str]) -> None:
        control = self._control(field_name)

        slot = self.error_slots.get(field_name)
        if slot is None:
            slot = self.error_slots[field_name] = ErrorSlot()
            self.slot_creations += 1

        if message:
            slot.message = message
            slot.visible = True
            control.errored = True
        else:
            slot.visible = False
            control.errored = False

    def visible_errors(self) -> Dict[str, str]:
        """Messages of every error slot currently shown."""
        return {name: slot.message for name, slot in self.error_slots.items() if slot.visible}

    def render_counter(self, text: str, tone: CounterTone) -> None:
        self.counter = (text, tone)

    def set_button_visible(self, button: FormButton, visible: bool) -> None:
        self.buttons[button] = visible

    def focus(self, field_name: str) -> None:
        self._control(field_name)
        self.focused = field_name

    def render_review(self, summary: Optional[ReviewSummary]) -> None:
        self.review = summary

    def show_alert(self, message: str) -> None:
        self.alerts.append(message)
