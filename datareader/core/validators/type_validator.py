"""
TypeValidator - checks a field's type, optionally accepting coercible strings.
"""

from typing import Any

from .base_validator import BaseValidator, ValidationError

TRUE_STRINGS = ("true", "1", "yes", "y", "on")
FALSE_STRINGS = ("false", "0", "no", "n", "off")


def coerce_value(value: Any, target: type) -> Any:
    """
    Convert ``value`` to ``target``.

    Strings are parsed for bool ("yes"/"no" and friends) instead of relying
    on truthiness, so "false" never becomes True.

    Raises:
        ValueError: If the value cannot be converted
    """
    if target is bool:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_STRINGS:
                return True
            if lowered in FALSE_STRINGS:
                return False
            raise ValueError(f"Cannot parse '{value}' as boolean")
        return bool(value)

    if target is int and isinstance(value, str):
        # "30.0" is a valid int in CSV exports
        number = float(value.strip())
        if not number.is_integer():
            raise ValueError(f"'{value}' is not a whole number")
        return int(number)

    return target(value)


class TypeValidator(BaseValidator):
    """
    Validates that a field holds the expected type.

    Values read from CSV and XML are always strings, so by default a string
    that coerces cleanly to the expected type is accepted. Set
    ``coerce: false`` for a strict isinstance check.

    Supported type names: int/integer, float/decimal/double, str/string,
    bool/boolean.
    """

    TYPE_MAPPING = {
        "integer": int,
        "int": int,
        "decimal": float,
        "float": float,
        "double": float,
        "string": str,
        "str": str,
        "boolean": bool,
        "bool": bool,
    }

    def __init__(self, field_name: Any, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        expected_type = self.parameters.get("expected_type")
        if not expected_type:
            raise ValueError("TypeValidator requires 'expected_type' parameter")

        if isinstance(expected_type, str):
            self.expected_type = self.TYPE_MAPPING.get(expected_type.lower())
            if not self.expected_type:
                raise ValueError(f"Unsupported type: {expected_type}")
        else:
            self.expected_type = expected_type

        self.coerce = self.parameters.get("coerce", True)

    def validate(self, value: Any, record: Any) -> None:
        # None is the required_field validator's concern
        if value is None:
            return

        # bool is an int subclass; True is not an acceptable age
        if isinstance(value, bool) and self.expected_type is not bool:
            raise ValidationError(
                "type_check", self.field_name,
                f"Expected {self.expected_type.__name__}, got bool"
            )

        if isinstance(value, self.expected_type):
            return

        if not self.coerce:
            raise ValidationError(
                "type_check", self.field_name,
                f"Expected {self.expected_type.__name__}, got {type(value).__name__}"
            )

        try:
            coerce_value(value, self.expected_type)
        except (ValueError, TypeError) as e:
            raise ValidationError(
                "type_check", self.field_name,
                f"Cannot coerce {type(value).__name__} to {self.expected_type.__name__}: {e}"
            )

    @property
    def rule_type(self) -> str:
        return "type_check"
