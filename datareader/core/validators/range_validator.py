"""
RangeValidator - numeric bounds on a field.
"""

from typing import Any

from .base_validator import BaseValidator, ValidationError


class RangeValidator(BaseValidator):
    """
    Validates that a numeric field falls within configured bounds.

    Numeric strings ("42", "9.5") are parsed before comparison because
    CSV and XML sources never carry native numbers.

    Parameters:
    - min / max: inclusive bounds
    - min_exclusive / max_exclusive: exclusive bounds
    """

    def __init__(self, field_name: Any, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.min_value = self.parameters.get("min")
        self.max_value = self.parameters.get("max")
        self.min_exclusive = self.parameters.get("min_exclusive")
        self.max_exclusive = self.parameters.get("max_exclusive")

        if all(v is None for v in (self.min_value, self.max_value, self.min_exclusive, self.max_exclusive)):
            raise ValueError("RangeValidator requires at least one of: min, max, min_exclusive, max_exclusive")

    def _as_number(self, value: Any) -> float:
        if isinstance(value, bool):
            raise ValidationError("range", self.field_name, "Value must be numeric, got bool")
        if isinstance(value, int | float):
            return value
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                pass
        raise ValidationError(
            "range", self.field_name,
            f"Value must be numeric, got {type(value).__name__}"
        )

    def validate(self, value: Any, record: Any) -> None:
        if value is None:
            return

        number = self._as_number(value)

        if self.min_value is not None and number < self.min_value:
            raise ValidationError("range", self.field_name, f"Value {value} is less than minimum {self.min_value}")

        if self.min_exclusive is not None and number <= self.min_exclusive:
            raise ValidationError("range", self.field_name, f"Value {value} must be greater than {self.min_exclusive}")

        if self.max_value is not None and number > self.max_value:
            raise ValidationError("range", self.field_name, f"Value {value} exceeds maximum {self.max_value}")

        if self.max_exclusive is not None and number >= self.max_exclusive:
            raise ValidationError("range", self.field_name, f"Value {value} must be less than {self.max_exclusive}")

    @property
    def rule_type(self) -> str:
        return "range"
