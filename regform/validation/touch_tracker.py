"""
Field Touch Tracking

A field only shows its error once the user has interacted with it, or once
bulk validation has run (recorded by a sentinel in the same set).
"""

from typing import Iterable, Set

from ..config.constants import VALIDATE_ALL_SENTINEL


class TouchTracker:
    """Records which fields are eligible to display errors."""

    def __init__(self):
        self._touched: Set[str] = set()

    def touch(self, field_name: str) -> None:
        self._touched.add(field_name)

    def touch_all(self, field_names: Iterable[str]) -> None:
        """Set the bulk sentinel and mark every given field touched."""
        self._touched.add(VALIDATE_ALL_SENTINEL)
        self._touched.update(field_names)

    def is_touched(self, field_name: str) -> bool:
        return field_name in self._touched

    @property
    def bulk_validated(self) -> bool:
        return VALIDATE_ALL_SENTINEL in self._touched

    def is_eligible(self, field_name: str) -> bool:
        """Whether the field's error may be shown."""
        return self.is_touched(field_name) or self.bulk_validated

    def touched_fields(self) -> Set[str]:
        """Touched field names, without the sentinel."""
        return self._touched - {VALIDATE_ALL_SENTINEL}

    def reset(self) -> None:
        self._touched.clear()
