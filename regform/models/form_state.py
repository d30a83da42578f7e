"""
Form State Data Models

Defines the snapshots the engine hands back to its host after every
command: error table and derived UI state, submit outcome, and the
read-only review projection.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict
from datetime import datetime
from ..config.constants import CounterTone


class FieldError(BaseModel):
    """A field paired with its current error message"""

    field_name: str = Field(..., description="Name of the field")
    message: str = Field(..., min_length=1, description="Human-readable error message")


class FormSnapshot(BaseModel):
    """Error table and UI affordances after a command"""

    errors: Dict[str, str] = Field(
        default_factory=dict,
        description="Field name to current error message (absent = valid)"
    )

    error_count: int = Field(0, description="Number of fields with an error")
    all_required_filled: bool = Field(False, description="Every required field is non-empty")

    counter_text: str = Field(..., description="Global counter/status text")
    counter_tone: CounterTone = Field(..., description="Counter color tone")

    show_submit: bool = Field(False, description="Whether the submit button is visible")
    show_validate: bool = Field(True, description="Whether the validate button is visible")

    focus_field: Optional[str] = Field(
        None,
        description="Field that received focus (first error after bulk validation)"
    )

    def field_errors(self) -> List[FieldError]:
        """Errors as FieldError objects, in table order."""
        return [
            FieldError(field_name=name, message=message)
            for name, message in self.errors.items()
        ]

    class Config:
        json_schema_extra = {
            "example": {
                "errors": {"zip_code": "Must be exactly 5 digits"},
                "error_count": 1,
                "all_required_filled": False,
                "counter_text": "1 validation error remaining",
                "counter_tone": "error",
                "show_submit": False,
                "show_validate": True,
                "focus_field": "zip_code"
            }
        }


class SubmitResult(BaseModel):
    """Outcome of a submit request"""

    accepted: bool = Field(..., description="Whether submission may proceed")

    errors: List[str] = Field(
        default_factory=list,
        description="Ordered violations shown to the user"
    )

    alert_message: Optional[str] = Field(
        None,
        description="Alert text shown when submission is blocked"
    )

    snapshot: FormSnapshot = Field(..., description="Form state after full validation")


class ReviewEntry(BaseModel):
    """One row of the review summary"""

    field_name: str = Field(..., description="Name of the field")
    label: str = Field(..., description="Display label")
    section: str = Field(..., description="Form section")
    display_value: str = Field(..., description="Value, mask, or placeholder")
    status: Optional[str] = Field(
        None,
        description="'pass' or 'ERROR: <message>' for validated fields"
    )


class ReviewSummary(BaseModel):
    """Read-only projection of the whole form"""

    entries: List[ReviewEntry] = Field(default_factory=list)

    snapshot: FormSnapshot = Field(..., description="Form state after full validation")

    generated_at: datetime = Field(
        default_factory=datetime.now,
        description="When this summary was generated"
    )

    def entry(self, field_name: str) -> Optional[ReviewEntry]:
        """Look up a row by field name."""
        for entry in self.entries:
            if entry.field_name == field_name:
                return entry
        return None

    def by_section(self) -> Dict[str, List[ReviewEntry]]:
        """Rows grouped by section, in form order."""
        sections: Dict[str, List[ReviewEntry]] = {}
        for entry in self.entries:
            sections.setdefault(entry.section, []).append(entry)
        return sections
