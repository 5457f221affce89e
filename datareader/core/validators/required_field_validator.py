"""
RequiredFieldValidator - a field must be present and carry a value.
"""

from typing import Any

from .base_validator import BaseValidator, ValidationError, has_field


class RequiredFieldValidator(BaseValidator):
    """
    Fails when the field is absent from the record, is None, or is a
    blank string. Blank strings pass when ``allow_empty_string`` is set.
    """

    def __init__(self, field_name: Any, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.allow_empty_string = self.parameters.get("allow_empty_string", False)

    def validate(self, value: Any, record: Any) -> None:
        if not has_field(record, self.field_name):
            raise ValidationError("required_field", self.field_name, "Field is missing from record")

        if value is None:
            raise ValidationError("required_field", self.field_name, "Field value is null")

        if not self.allow_empty_string and isinstance(value, str) and not value.strip():
            raise ValidationError("required_field", self.field_name, "Field value is empty string")

    @property
    def rule_type(self) -> str:
        return "required_field"
