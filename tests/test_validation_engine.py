from datetime import date

import pytest

from regform.config.constants import (
    COUNTER_ALL_CLEAR,
    COUNTER_INITIAL,
    MSG_REQUIRED,
    SUBMIT_ALERT_HEADER,
    CounterTone,
    FormButton,
)
from regform.surface.memory_surface import InMemoryFormSurface
from regform.validation.validation_engine import FormSession


# =============================================================================
# SESSION START
# =============================================================================

def test_initial_state(session, surface):
    snapshot = session.snapshot()
    assert snapshot.errors == {}
    assert snapshot.counter_text == COUNTER_INITIAL
    assert surface.counter == (COUNTER_INITIAL, CounterTone.NEUTRAL)
    assert surface.buttons[FormButton.SUBMIT] is False
    assert surface.buttons[FormButton.VALIDATE] is True


def test_sessions_are_independent():
    first = FormSession(InMemoryFormSurface())
    second = FormSession(InMemoryFormSurface())
    first.on_field_changed("city", "X")
    assert "city" in first.snapshot().errors
    assert second.snapshot().errors == {}


# =============================================================================
# CHANGE AND BLUR
# =============================================================================

def test_change_validates_only_that_field(session, surface):
    snapshot = session.on_field_changed("city", "X")
    assert snapshot.errors == {"city": "Enter 2-30 characters, letters and spaces only"}
    assert surface.visible_errors() == {"city": "Enter 2-30 characters, letters and spaces only"}
    assert snapshot.counter_text == "1 validation error remaining"


def test_correcting_a_field_clears_its_error(session, surface):
    session.on_field_changed("city", "X")
    snapshot = session.on_field_changed("city", "Boston")
    assert snapshot.errors == {}
    assert not surface.is_errored("city")


def test_blur_on_empty_required_field(session):
    snapshot = session.on_field_blurred("email_address")
    assert snapshot.errors == {"email_address": MSG_REQUIRED}


def test_blur_on_empty_optional_field(session):
    assert session.on_field_blurred("middle_initial").errors == {}


def test_unvalidated_field_change_records_nothing(session, surface):
    snapshot = session.on_field_changed("current_symptoms", "cough")
    assert snapshot.errors == {}
    assert surface.read("current_symptoms") == "cough"
    assert not session.tracker.is_touched("current_symptoms")


def test_unknown_field_is_ignored(session):
    assert session.on_field_changed("favourite_colour", "blue").errors == {}
    assert session.on_field_blurred("favourite_colour").errors == {}


def test_zip_code_is_clipped_to_five_digits(session, surface):
    snapshot = session.on_field_changed("zip_code", "94105-1234")
    assert surface.read("zip_code") == "94105"
    assert snapshot.errors == {}


def test_zip_code_non_digits_are_stripped(session, surface):
    snapshot = session.on_field_changed("zip_code", "9a4b1")
    assert surface.read("zip_code") == "941"
    assert snapshot.errors == {"zip_code": "Must be exactly 5 digits"}


def test_user_id_and_email_are_lowercased(session, surface):
    session.on_field_changed("desired_user_id", "JDoe_01")
    session.on_field_changed("email_address", "Jane@Example.COM")
    assert surface.read("desired_user_id") == "jdoe_01"
    assert surface.read("email_address") == "jane@example.com"


def test_password_error_uses_live_values(session):
    session.on_field_changed("first_name", "Jane")
    snapshot = session.on_field_changed("password", "Jane#2024x")
    assert snapshot.errors["password"] == "Cannot contain first name"


def test_confirm_password_mismatch(session):
    session.on_field_changed("password", "Str0ng!Pass")
    snapshot = session.on_field_changed("confirm_password", "Str0ng!Pas")
    assert snapshot.errors["confirm_password"] == "Passwords do not match"


# =============================================================================
# SSN ENTRY
# =============================================================================

def test_ssn_entry_is_masked(session, surface, type_ssn):
    type_ssn(session, "12a3")
    assert surface.read("social_security") == "XXX-"
    assert session.masker.digits == "123"
    assert session.snapshot().errors["social_security"] == "Must be exactly 9 digits"


def test_ssn_complete_clears_error(session, surface, type_ssn):
    type_ssn(session, "123456789")
    assert surface.read("social_security") == "XXX-XX-XXXX"
    assert "social_security" not in session.snapshot().errors


def test_ssn_backspace_drops_last_digit(session, surface, type_ssn, delete_ssn_char):
    type_ssn(session, "123456789")
    delete_ssn_char(session)
    assert session.masker.digits == "12345678"
    assert surface.read("social_security") == "XXX-XX-XXX"
    assert session.snapshot().errors["social_security"] == "Must be exactly 9 digits"


# =============================================================================
# BULK VALIDATION
# =============================================================================

def test_validate_all_on_empty_form(session, surface):
    snapshot = session.on_validate_all_requested()

    required = session.rule_loader.get_required_fields()
    assert snapshot.errors == {name: MSG_REQUIRED for name in required}
    assert snapshot.counter_text == f"{len(required)} validation errors remaining"
    assert snapshot.focus_field == "first_name"
    assert surface.focused == "first_name"
    assert set(surface.visible_errors()) == set(required)


def test_validate_all_focuses_first_error_in_form_order(filled_session, surface):
    filled_session.on_field_changed("zip_code", "12")
    filled_session.on_field_changed("city", "X")
    snapshot = filled_session.on_validate_all_requested()
    assert snapshot.focus_field == "city"
    assert surface.focused == "city"


def test_validate_all_on_valid_form(filled_session, surface):
    snapshot = filled_session.on_validate_all_requested()
    assert snapshot.errors == {}
    assert snapshot.focus_field is None
    assert snapshot.counter_text == COUNTER_ALL_CLEAR
    assert snapshot.show_submit is True
    assert surface.buttons[FormButton.SUBMIT] is True
    assert surface.buttons[FormButton.VALIDATE] is False


def test_fields_become_eligible_after_bulk_validation(session):
    session.on_validate_all_requested()
    session.on_field_changed("first_name", "Jane")
    assert "first_name" not in session.snapshot().errors
    assert session.snapshot().errors["last_name"] == MSG_REQUIRED


def test_host_optional_state_reports_selection(session, surface):
    surface.set_required("state", False)
    snapshot = session.on_validate_all_requested()
    assert snapshot.errors["state"] == "Please select a state"


def test_missing_controls_are_skipped():
    surface = InMemoryFormSurface(omit=["city", "first_name"])
    session = FormSession(surface)

    session.on_field_changed("city", "Boston")
    snapshot = session.on_validate_all_requested()

    assert "city" not in snapshot.errors
    assert "first_name" not in snapshot.errors
    assert snapshot.focus_field == "last_name"


# =============================================================================
# SUBMIT
# =============================================================================

def test_submit_valid_form(filled_session, surface):
    result = filled_session.on_submit_requested()
    assert result.accepted is True
    assert result.errors == []
    assert result.alert_message is None
    assert surface.alerts == []


def test_submit_empty_form(session, surface):
    result = session.on_submit_requested()

    assert result.accepted is False
    assert result.errors[0] == "Date of Birth: Required field is empty"
    assert result.errors[1] == (
        "Password: Must be 8-30 characters, Must contain 1 uppercase letter, "
        "Must contain 1 lowercase letter, Must contain 1 digit, Must contain 1 special character"
    )
    assert "First Name: Required field is empty" in result.errors
    assert "Password: Required field is empty" not in result.errors
    assert result.alert_message == f"{SUBMIT_ALERT_HEADER}\n\n" + "\n".join(result.errors)
    assert surface.alerts == [result.alert_message]


def test_submit_password_mismatch(filled_session):
    filled_session.on_field_changed("confirm_password", "Different1!")
    result = filled_session.on_submit_requested()
    assert result.errors == ["Passwords do not match"]


def test_submit_short_address_line2(filled_session):
    filled_session.on_field_changed("address_line2", "A")
    result = filled_session.on_submit_requested()
    assert result.errors == ["Address Line 2: Must be 2-30 characters if entered"]


def test_submit_reports_remaining_table_errors_in_form_order(filled_session):
    filled_session.on_field_changed("zip_code", "12")
    filled_session.on_field_changed("city", "X")
    result = filled_session.on_submit_requested()
    assert result.errors == [
        "City: Enter 2-30 characters, letters and spaces only",
        "Zip Code: Must be exactly 5 digits",
    ]


def test_submit_long_address_line2(filled_session):
    filled_session.on_field_changed("address_line2", "A" * 31)
    result = filled_session.on_submit_requested()
    assert result.accepted is False
    assert result.errors == ["Address Line 2: Must be 2-30 characters if entered"]


@pytest.mark.parametrize("edits", [
    [],
    [("address_line2", "A")],
    [("address_line2", "A" * 31)],
    [("confirm_password", "Different1!")],
    [("password", "weak")],
    [("date_of_birth", "2999-01-01")],
    [("zip_code", "12"), ("city", "X")],
])
def test_submit_accepts_only_a_clean_form(filled_session, edits):
    for field_name, value in edits:
        filled_session.on_field_changed(field_name, value)
    result = filled_session.on_submit_requested()
    assert result.accepted == (result.snapshot.error_count == 0 and not result.errors)
    assert result.accepted == (not edits)


def test_submit_blocks_on_table_errors_the_checks_miss(filled_session, monkeypatch):
    filled_session.on_field_changed("address_line2", "A")
    monkeypatch.setattr(filled_session, "submission_errors", lambda: [])
    result = filled_session.on_submit_requested()
    assert result.accepted is False
    assert result.errors == ["Address Line 2: Must be 2-30 characters if entered"]


def test_snapshot_field_errors(filled_session):
    filled_session.on_field_changed("zip_code", "12")
    field_errors = filled_session.snapshot().field_errors()
    assert [(error.field_name, error.message) for error in field_errors] == [
        ("zip_code", "Must be exactly 5 digits"),
    ]


# =============================================================================
# PASSWORD CONFIRMATION
# =============================================================================

def test_password_change_rechecks_typed_confirmation(filled_session, surface):
    snapshot = filled_session.on_field_changed("password", "N3w!Passw0rd")
    assert snapshot.errors == {"confirm_password": "Passwords do not match"}
    assert snapshot.show_submit is False
    assert surface.buttons[FormButton.SUBMIT] is False

    snapshot = filled_session.on_field_changed("password", "Str0ng!Pass")
    assert snapshot.errors == {}
    assert snapshot.show_submit is True


def test_password_change_leaves_untouched_confirmation_alone(session):
    snapshot = session.on_field_changed("password", "Str0ng!Pass")
    assert "confirm_password" not in snapshot.errors


# =============================================================================
# RESET AND LIMITS
# =============================================================================

def test_reset(session, surface, type_ssn):
    type_ssn(session, "1234")
    session.on_validate_all_requested()

    snapshot = session.reset()

    assert snapshot.errors == {}
    assert snapshot.counter_text == COUNTER_INITIAL
    assert session.ssn_display == ""
    assert surface.read("social_security") == ""
    assert surface.visible_errors() == {}
    assert not session.tracker.bulk_validated


def test_date_of_birth_limits():
    assert FormSession.date_of_birth_limits(today=date(2025, 6, 15)) == ("1905-06-15", "2025-06-15")
