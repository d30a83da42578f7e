"""
Validation Engine

A FormSession owns all state for one registration form: the SSN masker,
the touch tracker and the error table. The host drives it through a small
command interface and gets a snapshot of the resulting state back:

    session = FormSession(surface)
    session.on_field_changed("zip_code", "94105")
    session.on_field_blurred("city")
    session.on_validate_all_requested()
    result = session.on_submit_requested()

Every command runs to completion and leaves the table, the masked SSN
display and the rendered affordances consistent with each other.
"""

from datetime import date
from typing import Any, List, Optional, Tuple

from ..config.constants import (
    FieldKind,
    LOWERCASE_FIELDS,
    MAX_AGE_YEARS,
    MSG_PASSWORDS_DO_NOT_MATCH,
    PASSWORD_JOINER_SUBMIT,
    SECRET_FIELD,
)
from ..models.form_state import FormSnapshot, SubmitResult, ReviewSummary
from ..surface.base import FormSurface
from ..utils.date_utils import date_of_birth_limits
from ..utils.error_handler import ErrorHandler, unknown_field_error
from ..utils.format_utils import normalize_lowercase, normalize_zip_code
from ..utils.logger import get_module_logger
from ..utils.reporting import ReviewRenderer, format_submission_alert
from .error_aggregator import ErrorAggregator
from .field_validators import evaluate, validate_date_of_birth, validate_password, format_password_errors
from .rule_loader import RuleLoader, get_rule_loader
from .ssn_masker import SSNMasker
from .touch_tracker import TouchTracker
from .value_accessor import ValueAccessor

logger = get_module_logger()

# Fields the submit-time checks already report on; other table errors are appended
SUBMIT_CHECKED_FIELDS = ("date_of_birth", "address_line2", "password", "confirm_password")


class FormSession:
    """
    Validation state and command interface for one form.

    Args:
        surface: Host surface holding the controls
        rule_loader: Field definitions (uses singleton if None)
    """

    def __init__(self, surface: FormSurface, rule_loader: Optional[RuleLoader] = None):
        self.surface = surface
        self.rule_loader = rule_loader or get_rule_loader()
        self.error_handler = ErrorHandler(logger)

        self.masker = SSNMasker()
        self.tracker = TouchTracker()
        self.accessor = ValueAccessor(surface, self.masker, self.rule_loader, self.error_handler)
        self.aggregator = ErrorAggregator(surface, self.accessor, self.rule_loader, self.error_handler)
        self.reviewer = ReviewRenderer(self)

        self.aggregator.render_initial()

    @property
    def validated_fields(self) -> List[str]:
        """Fields wired for validation, in focus order."""
        return self.rule_loader.get_validated_fields()

    # ==========================================================================
    # COMMANDS
    # ==========================================================================

    def on_field_changed(self, field_name: str, raw_value: Any) -> FormSnapshot:
        """
        Handle an input/change event.

        The raw value is normalised and written back to the surface (SSN
        masked, user ID and email lowercased, ZIP clipped to 5 digits),
        then the field is touched and validated.

        Args:
            field_name: Name of the changed field
            raw_value: New raw control value (text, selected option, or bool)

        Returns:
            FormSnapshot after the change
        """
        rule = self.rule_loader.get_rule(field_name)
        if rule is None:
            self.error_handler.handle(unknown_field_error(field_name))
            return self.snapshot()

        if rule.kind == FieldKind.SECRET:
            value = self.masker.apply_display(raw_value or "")
        elif field_name in LOWERCASE_FIELDS:
            value = normalize_lowercase(raw_value)
        elif field_name == "zip_code":
            value = normalize_zip_code(raw_value)
        else:
            value = raw_value

        logger.log_field_event("change", field_name, value)
        self.error_handler.wrap_operation(self.surface.write, field_name, value)

        if rule.validated:
            self.tracker.touch(field_name)
            self._validate_field(field_name)

        # A confirmation the user already typed must follow the new password
        if field_name == "password" and self.tracker.is_touched("confirm_password"):
            self._validate_field("confirm_password")

        return self.snapshot()

    def on_field_blurred(self, field_name: str) -> FormSnapshot:
        """
        Handle a blur event: touch and validate the field.

        Args:
            field_name: Name of the field that lost focus

        Returns:
            FormSnapshot after validation
        """
        rule = self.rule_loader.get_rule(field_name)
        if rule is None:
            self.error_handler.handle(unknown_field_error(field_name))
            return self.snapshot()

        logger.log_field_event("blur", field_name)
        if rule.validated:
            self.tracker.touch(field_name)
            self._validate_field(field_name)

        return self.snapshot()

    def on_validate_all_requested(self) -> FormSnapshot:
        """Handle the VALIDATE button."""
        return self.validate_all_now()

    def on_submit_requested(self) -> SubmitResult:
        """
        Handle form submission.

        Runs a full validation pass, then the submit-time checks. Any
        violation blocks submission and is shown as one alert.

        Returns:
            SubmitResult with the ordered violations
        """
        snapshot = self.validate_all_now()

        errors = self.submission_errors()
        for field_name in self.validated_fields:
            message = snapshot.errors.get(field_name)
            if message and field_name not in SUBMIT_CHECKED_FIELDS:
                errors.append(f"{self.rule_loader.get_rule(field_name).label}: {message}")

        # Table errors the submit checks did not restate still block
        if not errors and snapshot.error_count:
            errors = [
                f"{self.rule_loader.get_rule(error.field_name).label}: {error.message}"
                for error in snapshot.field_errors()
            ]

        logger.log_submission(not errors, errors)

        if errors:
            alert = format_submission_alert(errors)
            self.error_handler.wrap_operation(self.surface.show_alert, alert)
            return SubmitResult(accepted=False, errors=errors, alert_message=alert, snapshot=snapshot)

        return SubmitResult(accepted=True, snapshot=snapshot)

    def on_review_requested(self) -> ReviewSummary:
        """Validate everything and show the review area."""
        return self.reviewer.render()

    def close_review(self) -> None:
        """Hide the review area."""
        self.reviewer.close()

    def reset(self) -> FormSnapshot:
        """Start over: forget SSN digits, touches and errors."""
        self.masker.reset()
        self.tracker.reset()
        self.error_handler.wrap_operation(self.surface.write, SECRET_FIELD, "")
        self.aggregator.clear()
        return self.snapshot()

    # ==========================================================================
    # VALIDATION
    # ==========================================================================

    def validate_all_now(self) -> FormSnapshot:
        """
        Touch and validate every validated field, then focus the first
        field in error (in form order).

        Returns:
            FormSnapshot with focus_field set to the first errored field
        """
        fields = self.validated_fields
        self.tracker.touch_all(fields)

        for field_name in fields:
            self._validate_field(field_name)

        first_error = self.aggregator.first_error(fields)
        if first_error:
            self.error_handler.wrap_operation(self.surface.focus, first_error)

        logger.info("Bulk validation", error_count=self.aggregator.error_count, first_error=first_error)
        return self.snapshot(focus_field=first_error)

    def _validate_field(self, field_name: str) -> Optional[str]:
        """Evaluate one field and record the outcome, if it may be shown."""
        if not self.surface.has_field(field_name):
            return None
        if not self.tracker.is_eligible(field_name):
            return None

        value = self.accessor.get_value(field_name)
        error = evaluate(
            field_name,
            value,
            self.accessor.context(),
            required=self.surface.is_required(field_name),
        )
        logger.log_validation(field_name, error)
        self.aggregator.set_error(field_name, error)
        return error

    def submission_errors(self) -> List[str]:
        """
        Submit-time checks, in order: date of birth, address line 2,
        password (violations joined with ", ") and password match.
        """
        get = self.accessor.get_value
        errors = []

        dob_error = validate_date_of_birth(get("date_of_birth"))
        if dob_error:
            errors.append(f"Date of Birth: {dob_error}")

        address_line2 = get("address_line2")
        if address_line2 and not 2 <= len(address_line2) <= 30:
            errors.append("Address Line 2: Must be 2-30 characters if entered")

        password = get("password")
        password_errors = validate_password(
            password,
            user_id=get("desired_user_id"),
            first_name=get("first_name"),
            last_name=get("last_name"),
        )
        if password_errors:
            errors.append(f"Password: {format_password_errors(password_errors, PASSWORD_JOINER_SUBMIT)}")

        if password != get("confirm_password"):
            errors.append(MSG_PASSWORDS_DO_NOT_MATCH)

        return errors

    # ==========================================================================
    # STATE
    # ==========================================================================

    def snapshot(self, focus_field: Optional[str] = None) -> FormSnapshot:
        return self.aggregator.snapshot(focus_field=focus_field)

    @property
    def ssn_display(self) -> str:
        return self.masker.display

    @staticmethod
    def date_of_birth_limits(today: Optional[date] = None) -> Tuple[str, str]:
        """ISO (min, max) bounds for the date of birth control."""
        return date_of_birth_limits(MAX_AGE_YEARS, today=today)
