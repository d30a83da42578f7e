# tests/conftest.py

import pytest

from regform.surface.memory_surface import InMemoryFormSurface
from regform.validation.validation_engine import FormSession


VALID_FORM = {
    "first_name": "Jane",
    "last_name": "Doe",
    "date_of_birth": "1990-05-17",
    "gender": "Female",
    "address_line1": "12 Main St",
    "city": "Springfield",
    "state": "CA",
    "zip_code": "94105",
    "email_address": "jane@example.com",
    "phone_number": "(555) 123-4567",
    "is_vaccinated": "Yes",
    "has_insurance": "No",
    "desired_user_id": "jdoe_01",
    "password": "Str0ng!Pass",
    "confirm_password": "Str0ng!Pass",
}


def _type_ssn(session, digits):
    for char in digits:
        session.on_field_changed("social_security", session.ssn_display + char)


@pytest.fixture
def valid_form():
    """Valid values for every required field except the SSN."""
    return dict(VALID_FORM)


@pytest.fixture
def type_ssn():
    """Type characters into the SSN input one keystroke at a time."""
    return _type_ssn


@pytest.fixture
def delete_ssn_char():
    """Press backspace once in the SSN input."""
    def delete(session):
        session.on_field_changed("social_security", session.ssn_display[:-1])
    return delete


@pytest.fixture
def surface():
    """A fully rendered in-memory form."""
    return InMemoryFormSurface()


@pytest.fixture
def session(surface):
    """A fresh form session over the in-memory form."""
    return FormSession(surface)


@pytest.fixture
def filled_session(session):
    """A session where every required field holds a valid value."""
    for field_name, value in VALID_FORM.items():
        session.on_field_changed(field_name, value)
    _type_ssn(session, "123456789")
    return session
