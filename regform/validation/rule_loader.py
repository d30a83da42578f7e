"""
Field Definition Loader

Loads and parses the registration form field definitions from
form_fields.yaml. Provides type-safe access to each field's kind, section,
required flag and review settings.
"""

import yaml
from pathlib import Path
from typing import Dict, Optional, List, Any
from pydantic import BaseModel, Field, ValidationError
from functools import lru_cache

from ..config.constants import FieldKind, FormSection
from ..utils.error_handler import configuration_error
from ..utils.logger import get_module_logger

logger = get_module_logger()


class FieldRule(BaseModel):
    """Definition of a single form field"""

    field_name: str = Field(
        ...,
        description="Name of the field"
    )

    label: str = Field(
        ...,
        description="Display label used in review and submit messages"
    )

    kind: FieldKind = Field(
        ...,
        description="How the raw surface value is read"
    )

    section: FormSection = Field(
        ...,
        description="Form section the field belongs to"
    )

    required: bool = Field(
        False,
        description="Whether field must be non-empty"
    )

    validated: bool = Field(
        False,
        description="Whether field is wired for live and bulk validation"
    )

    review_mask: Optional[str] = Field(
        None,
        description="Placeholder shown in review instead of a non-empty value"
    )

    options: List[str] = Field(
        default_factory=list,
        description="Choices for select and radio_group fields"
    )

    members: Dict[str, str] = Field(
        default_factory=dict,
        description="Grouped checkbox fields mapped to their labels"
    )


class RuleLoader:
    """
    Loads and manages field definitions from YAML configuration.

    Field order in the YAML file is the form's enumeration order.
    """

    def __init__(self, rules_path: Optional[Path] = None):
        """
        Initialize the RuleLoader.

        Args:
            rules_path: Path to form_fields.yaml. If None, uses default location.
        """
        if rules_path is None:
            current_file = Path(__file__)
            rules_path = current_file.parent.parent / "config" / "form_fields.yaml"

        self.rules_path = Path(rules_path)
        self._rules: Dict[str, FieldRule] = {}
        self._members: Dict[str, FieldRule] = {}
        self._raw_yaml: Dict[str, Any] = {}
        self._loaded = False

    def load_rules(self, force_reload: bool = False) -> Dict[str, FieldRule]:
        """
        Load field definitions from YAML file.

        Args:
            force_reload: If True, reload rules even if already loaded

        Returns:
            Dictionary mapping field names to FieldRule objects

        Raises:
            FileNotFoundError: If rules file doesn't exist
            yaml.YAMLError: If YAML parsing fails
            FormError: If the file is not a mapping of field definitions
        """
        if self._loaded and not force_reload:
            return self._rules

        if not self.rules_path.exists():
            raise FileNotFoundError(
                f"Field definitions file not found: {self.rules_path}"
            )

        try:
            with open(self.rules_path, 'r', encoding='utf-8') as f:
                self._raw_yaml = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {self.rules_path}: {e}")

        if not isinstance(self._raw_yaml, dict):
            raise configuration_error(
                f"Field definitions in {self.rules_path} must be a mapping"
            )

        rules: Dict[str, FieldRule] = {}
        members: Dict[str, FieldRule] = {}

        for field_name, rule_dict in self._raw_yaml.items():
            if not isinstance(rule_dict, dict):
                continue

            rule_dict = dict(rule_dict, field_name=field_name)

            try:
                field_rule = FieldRule(**rule_dict)
            except ValidationError as e:
                raise configuration_error(
                    f"Invalid definition for field '{field_name}'", cause=e
                )

            rules[field_name] = field_rule

            for member_name, member_label in field_rule.members.items():
                members[member_name] = FieldRule(
                    field_name=member_name,
                    label=member_label,
                    kind=FieldKind.CHECKBOX,
                    section=field_rule.section,
                )

        self._rules = rules
        self._members = members
        self._loaded = True

        logger.debug(
            "Field definitions loaded",
            path=str(self.rules_path),
            field_count=len(rules),
            member_count=len(members)
        )
        return self._rules

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load_rules()

    def get_rule(self, field_name: str) -> Optional[FieldRule]:
        """
        Get the definition for a field, including grouped checkbox members.

        Args:
            field_name: Name of the field

        Returns:
            FieldRule object, or None if field not defined
        """
        self._ensure_loaded()
        return self._rules.get(field_name) or self._members.get(field_name)

    def get_all_rules(self) -> Dict[str, FieldRule]:
        """Top-level field definitions in enumeration order."""
        self._ensure_loaded()
        return self._rules.copy()

    def get_field_names(self) -> List[str]:
        """All top-level field names in enumeration order."""
        self._ensure_loaded()
        return list(self._rules.keys())

    def get_required_fields(self) -> List[str]:
        """Names of required fields in enumeration order."""
        self._ensure_loaded()
        return [name for name, rule in self._rules.items() if rule.required]

    def get_validated_fields(self) -> List[str]:
        """Names of fields wired for validation in enumeration order."""
        self._ensure_loaded()
        return [name for name, rule in self._rules.items() if rule.validated]

    def get_member_fields(self, field_name: str) -> Dict[str, str]:
        """Grouped checkbox members (name -> label) of a field."""
        rule = self.get_rule(field_name)
        return dict(rule.members) if rule else {}

    def is_required(self, field_name: str) -> bool:
        """Whether the field definition marks the field required."""
        rule = self.get_rule(field_name)
        return bool(rule and rule.required)

    def has_field(self, field_name: str) -> bool:
        """Check if a field (or grouped member) is defined."""
        return self.get_rule(field_name) is not None

    def reload_rules(self) -> Dict[str, FieldRule]:
        """
        Force reload of field definitions from file.

        Returns:
            Dictionary of reloaded rules
        """
        return self.load_rules(force_reload=True)


@lru_cache(maxsize=1)
def get_rule_loader() -> RuleLoader:
    """
    Get singleton instance of RuleLoader.

    Returns:
        RuleLoader instance
    """
    return RuleLoader()
