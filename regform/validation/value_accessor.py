"""
Value Accessor

Reads a field's current value from the form surface as a plain string,
dispatching on the field's kind:

- SECRET: the real SSN digits held by the masker, never the masked display
- RADIO_GROUP: the selected option, or "" when nothing is selected
- CHECKBOX: "Yes" when checked, "No" otherwise
- TEXT / SELECT: the raw text, untrimmed

Unknown fields and fields the surface does not render read as "".
"""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional

from ..config.constants import FieldKind, REVIEW_NO_CONDITIONS
from ..surface.base import FormSurface
from ..utils.error_handler import ErrorHandler
from ..utils.logger import get_module_logger
from .rule_loader import RuleLoader, get_rule_loader
from .ssn_masker import SSNMasker

logger = get_module_logger()


class ValueAccessor:
    """Normalises surface values into FieldValue strings."""

    def __init__(
        self,
        surface: FormSurface,
        masker: SSNMasker,
        rule_loader: Optional[RuleLoader] = None,
        error_handler: Optional[ErrorHandler] = None
    ):
        self.surface = surface
        self.masker = masker
        self.rule_loader = rule_loader or get_rule_loader()
        self.error_handler = error_handler or ErrorHandler(logger)

    def get_value(self, field_name: str) -> str:
        """
        Current value of a field.

        Args:
            field_name: Name of the field

        Returns:
            Field value as a string ("" when absent)
        """
        rule = self.rule_loader.get_rule(field_name)
        if rule is None or not self.surface.has_field(field_name):
            return ""

        if rule.kind == FieldKind.SECRET:
            return self.masker.digits

        raw = self.error_handler.wrap_operation(self.surface.read, field_name).unwrap_or(None)

        if rule.kind == FieldKind.RADIO_GROUP:
            return str(raw) if raw else ""
        if rule.kind == FieldKind.CHECKBOX:
            return "Yes" if raw else "No"
        return "" if raw is None else str(raw)

    def get_values(self, field_names: Iterable[str]) -> Dict[str, str]:
        """Current values of several fields."""
        return {name: self.get_value(name) for name in field_names}

    def get_checked_labels(self, group_name: str) -> List[str]:
        """Labels of the checked members of a grouped checkbox field."""
        return [
            label
            for member_name, label in self.rule_loader.get_member_fields(group_name).items()
            if self.get_value(member_name) == "Yes"
        ]

    def get_medical_conditions(self) -> str:
        """Checked medical conditions joined by ", ", or "None"."""
        labels = self.get_checked_labels("medical_conditions")
        return ", ".join(labels) if labels else REVIEW_NO_CONDITIONS

    def context(self) -> "FieldContext":
        """Read-only mapping view over current values, for cross-field rules."""
        return FieldContext(self)


class FieldContext(Mapping):
    """
    Mapping of field name to current value, read lazily through a
    ValueAccessor so cross-field rules always see live values.
    """

    def __init__(self, accessor: ValueAccessor):
        self._accessor = accessor

    def __getitem__(self, field_name: str) -> str:
        if not self._accessor.rule_loader.has_field(field_name):
            raise KeyError(field_name)
        return self._accessor.get_value(field_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._accessor.rule_loader.get_field_names())

    def __len__(self) -> int:
        return len(self._accessor.rule_loader.get_field_names())
