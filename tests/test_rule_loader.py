import pytest
import yaml

from regform.config.constants import FieldKind, FormSection
from regform.utils.error_handler import ErrorCode, FormError
from regform.validation.rule_loader import RuleLoader, get_rule_loader


@pytest.fixture
def loader():
    return RuleLoader()


def test_enumeration_order(loader):
    names = loader.get_field_names()
    assert len(names) == 32
    assert names[:5] == ["first_name", "middle_initial", "last_name", "date_of_birth", "social_security"]
    assert names[-2:] == ["consent_marketing", "consent_data_sharing"]


def test_required_fields(loader):
    assert loader.get_required_fields() == [
        "first_name", "last_name", "date_of_birth", "social_security", "gender",
        "address_line1", "city", "state", "zip_code", "email_address", "phone_number",
        "is_vaccinated", "has_insurance", "desired_user_id", "password", "confirm_password",
    ]


def test_validated_fields(loader):
    validated = loader.get_validated_fields()
    assert len(validated) == 20
    assert "emergency_contact" in validated
    assert "policy_number" not in validated
    assert "consent_marketing" not in validated


def test_field_kinds(loader):
    assert loader.get_rule("social_security").kind == FieldKind.SECRET
    assert loader.get_rule("gender").kind == FieldKind.RADIO_GROUP
    assert loader.get_rule("state").kind == FieldKind.SELECT
    assert loader.get_rule("consent_data_sharing").kind == FieldKind.CHECKBOX
    assert loader.get_rule("city").section == FormSection.CONTACT_INFORMATION


def test_member_fields(loader):
    members = loader.get_member_fields("medical_conditions")
    assert len(members) == 8
    assert members["has_covid19"] == "COVID-19"

    member = loader.get_rule("has_heart_disease")
    assert member.kind == FieldKind.CHECKBOX
    assert member.section == FormSection.MEDICAL_HISTORY
    assert loader.has_field("has_heart_disease")
    assert "has_heart_disease" not in loader.get_field_names()


def test_unknown_field(loader):
    assert loader.get_rule("favourite_colour") is None
    assert not loader.is_required("favourite_colour")
    assert loader.get_member_fields("favourite_colour") == {}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RuleLoader(tmp_path / "missing.yaml").load_rules()


def test_invalid_yaml(tmp_path):
    path = tmp_path / "fields.yaml"
    path.write_text("first_name: [unclosed", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        RuleLoader(path).load_rules()


def test_non_mapping_root(tmp_path):
    path = tmp_path / "fields.yaml"
    path.write_text("- first_name\n- last_name\n", encoding="utf-8")
    with pytest.raises(FormError) as exc_info:
        RuleLoader(path).load_rules()
    assert exc_info.value.code == ErrorCode.CONFIGURATION_ERROR


def test_invalid_definition(tmp_path):
    path = tmp_path / "fields.yaml"
    path.write_text("first_name:\n  label: First Name\n  kind: dropdown\n  section: Consent\n", encoding="utf-8")
    with pytest.raises(FormError) as exc_info:
        RuleLoader(path).load_rules()
    assert "first_name" in exc_info.value.message


def test_reload(tmp_path):
    path = tmp_path / "fields.yaml"
    path.write_text("city:\n  label: City\n  kind: text\n  section: Contact Information\n", encoding="utf-8")
    loader = RuleLoader(path)
    assert loader.get_field_names() == ["city"]

    path.write_text(
        "city:\n  label: City\n  kind: text\n  section: Contact Information\n  required: true\n",
        encoding="utf-8",
    )
    loader.reload_rules()
    assert loader.is_required("city")


def test_singleton():
    assert get_rule_loader() is get_rule_loader()
