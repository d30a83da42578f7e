"""
SSN Masking State Machine

Keeps the real Social Security digits behind a masked display. The host
sends the raw text of the SSN input after each edit; the masker compares
its length with the last masked display it produced:

- longer: the last character is taken as the typed key; a digit is kept
  if fewer than 9 are held
- shorter: the last held digit is dropped, wherever the edit happened

Deletion is not cursor-aware. Editing a middle digit is not supported;
the user deletes back to it and retypes.
"""

from ..config.constants import SSN_DIGIT_COUNT
from ..utils.format_utils import mask_ssn_display


class SSNMasker:
    """Tracks SSN digits and the masked text shown in their place."""

    def __init__(self):
        self._digits = ""
        self._last_masked_length = 0

    @property
    def digits(self) -> str:
        """The real digits typed so far."""
        return self._digits

    @property
    def display(self) -> str:
        """The masked display for the digits held."""
        return mask_ssn_display(len(self._digits))

    def apply_display(self, displayed: str) -> str:
        """
        Update the digits from the input's new raw text.

        Args:
            displayed: Raw text currently in the SSN input

        Returns:
            Masked text to write back into the input
        """
        displayed = displayed or ""
        current_length = len(displayed)

        if current_length > self._last_masked_length:
            new_char = displayed[-1]
            if new_char in "0123456789" and len(self._digits) < SSN_DIGIT_COUNT:
                self._digits += new_char
        elif current_length < self._last_masked_length:
            self._digits = self._digits[:-1]

        masked = self.display
        self._last_masked_length = len(masked)
        return masked

    def reset(self) -> None:
        """Forget all digits."""
        self._digits = ""
        self._last_masked_length = 0
