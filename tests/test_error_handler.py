import pytest

from regform.utils.error_handler import (
    ErrorCode,
    ErrorHandler,
    ErrorLevel,
    ErrorResult,
    FieldNotFoundError,
    FormError,
    configuration_error,
    field_not_found_error,
    unknown_field_error,
)


def test_field_not_found_error():
    error = field_not_found_error("city")
    assert isinstance(error, FieldNotFoundError)
    assert error.code == ErrorCode.FIELD_NOT_FOUND
    assert error.level == ErrorLevel.WARNING
    assert error.to_dict()["details"] == {"field": "city", "slot": "field"}


def test_slot_not_found_error():
    assert field_not_found_error("city", slot="error slot").code == ErrorCode.SLOT_NOT_FOUND


def test_unknown_field_error():
    error = unknown_field_error("favourite_colour")
    assert error.code == ErrorCode.UNKNOWN_FIELD
    assert "favourite_colour" in error.message


def test_configuration_error_keeps_cause():
    error = configuration_error("bad file", cause=ValueError("boom"))
    assert error.level == ErrorLevel.CRITICAL
    assert error.details["original_error"] == "boom"


def test_error_result():
    assert ErrorResult.ok(5).unwrap() == 5
    failed = ErrorResult.fail(unknown_field_error("x"))
    assert failed.unwrap_or("default") == "default"
    with pytest.raises(FormError):
        failed.unwrap()


def test_wrap_operation_absorbs_form_errors():
    def missing():
        raise field_not_found_error("city")

    result = ErrorHandler().wrap_operation(missing)
    assert not result.success
    assert result.error.code == ErrorCode.FIELD_NOT_FOUND


def test_wrap_operation_propagates_other_errors():
    def broken():
        raise ValueError("bug")

    with pytest.raises(ValueError):
        ErrorHandler().wrap_operation(broken)


def test_wrap_operation_returns_value():
    assert ErrorHandler().wrap_operation(lambda a, b: a + b, 2, b=3).unwrap() == 5
