"""
CustomValidator - wraps a caller-supplied check function.
"""

from typing import Any

from .base_validator import BaseValidator, ValidationError


class CustomValidator(BaseValidator):
    """
    Validates using a caller-supplied function.

    Parameters:
    - validator_func: callable taking (value, record). It fails the rule by
      returning False or by raising ValueError/TypeError; any other return
      value passes.
    - error_message: optional message prefix for failures
    """

    def __init__(self, field_name: Any, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.validator_func = self.parameters.get("validator_func")
        if not self.validator_func:
            raise ValueError("CustomValidator requires 'validator_func' parameter")
        if not callable(self.validator_func):
            raise ValueError("validator_func must be callable")

        self.error_message = self.parameters.get("error_message", "Custom validation failed")

    def validate(self, value: Any, record: Any) -> None:
        try:
            result = self.validator_func(value, record)
        except (ValueError, TypeError) as e:
            raise ValidationError("custom", self.field_name, f"{self.error_message}: {e}")

        if result is False:
            raise ValidationError("custom", self.field_name, self.error_message)

    @property
    def rule_type(self) -> str:
        return "custom"
