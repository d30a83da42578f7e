"""
Review Rendering Module

Projects the current form state into a read-only review summary:
- every field's value, or "(not entered)" when empty
- SSN and both passwords replaced by fixed masks, never their values
- medical conditions joined into a list, or "None"
- a pass/ERROR status per field from a full validation pass

Also formats the blocking alert shown when submission is refused.
"""

from typing import List, Optional, TYPE_CHECKING

from ..config.constants import (
    FieldKind,
    REVIEW_NOT_ENTERED,
    REVIEW_NO_CONDITIONS,
    REVIEW_STATUS_PASS,
    REVIEW_STATUS_ERROR_PREFIX,
    SUBMIT_ALERT_HEADER,
)
from ..models.form_state import ReviewEntry, ReviewSummary, FormSnapshot
from .logger import get_module_logger

if TYPE_CHECKING:
    from ..validation.validation_engine import FormSession

logger = get_module_logger()


def format_submission_alert(errors: List[str]) -> str:
    """
    Build the alert shown when submission is blocked.

    Args:
        errors: Ordered violation lines

    Returns:
        Alert text
    """
    return f"{SUBMIT_ALERT_HEADER}\n\n" + "\n".join(errors)


class ReviewRenderer:
    """
    Builds the review summary for a form session.

    Rendering runs a full validation pass first, so the review always shows
    current statuses.
    """

    def __init__(self, session: "FormSession"):
        """
        Initialize the renderer.

        Args:
            session: Form session whose values and errors are projected
        """
        self.session = session

    def _display_value(self, field_name: str) -> str:
        accessor = self.session.accessor
        rule = self.session.rule_loader.get_rule(field_name)

        if rule.members:
            labels = accessor.get_checked_labels(field_name)
            return ", ".join(labels) if labels else REVIEW_NO_CONDITIONS

        value = accessor.get_value(field_name)

        if rule.kind == FieldKind.CHECKBOX:
            return value
        if not value:
            return REVIEW_NOT_ENTERED
        if rule.review_mask:
            return rule.review_mask
        if field_name == "desired_user_id":
            return value.lower()
        return value

    def _status(self, field_name: str, snapshot: FormSnapshot) -> Optional[str]:
        if not self.session.rule_loader.get_rule(field_name).validated:
            return None
        error = snapshot.errors.get(field_name)
        if error:
            return f"{REVIEW_STATUS_ERROR_PREFIX}{error}"
        return REVIEW_STATUS_PASS

    def build(self) -> ReviewSummary:
        """
        Validate every field and project the form into a summary.

        Returns:
            ReviewSummary with one entry per field, in form order
        """
        snapshot = self.session.validate_all_now()

        entries = [
            ReviewEntry(
                field_name=name,
                label=rule.label,
                section=rule.section.value,
                display_value=self._display_value(name),
                status=self._status(name, snapshot),
            )
            for name, rule in self.session.rule_loader.get_all_rules().items()
        ]

        logger.debug("Review built", entries=len(entries), error_count=snapshot.error_count)
        return ReviewSummary(entries=entries, snapshot=snapshot)

    def render(self) -> ReviewSummary:
        """Build the summary and show it on the surface."""
        summary = self.build()
        self.session.error_handler.wrap_operation(self.session.surface.render_review, summary)
        return summary

    def close(self) -> None:
        """Hide the review area."""
        self.session.error_handler.wrap_operation(self.session.surface.render_review, None)


def format_review_report(summary: ReviewSummary) -> str:
    """
    Plain-text rendering of a review summary, grouped by section.

    Args:
        summary: Review summary to format

    Returns:
        Formatted report as string
    """
    report_lines = []

    report_lines.append("=" * 80)
    report_lines.append("REGISTRATION REVIEW")
    report_lines.append("=" * 80)
    report_lines.append(f"Generated: {summary.generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
    report_lines.append(f"Status: {summary.snapshot.counter_text}")
    report_lines.append("")

    for section, entries in summary.by_section().items():
        report_lines.append("-" * 80)
        report_lines.append(section.upper())
        report_lines.append("-" * 80)
        for entry in entries:
            if entry.status is None:
                status_symbol = " "
            else:
                status_symbol = "✓" if entry.status == REVIEW_STATUS_PASS else "✗"
            report_lines.append(f"  {status_symbol} {entry.label}: {entry.display_value}")
            if entry.status and entry.status != REVIEW_STATUS_PASS:
                report_lines.append(f"      {entry.status}")
        report_lines.append("")

    report_lines.append("=" * 80)
    report_lines.append("END OF REVIEW")
    report_lines.append("=" * 80)

    return "\n".join(report_lines)
