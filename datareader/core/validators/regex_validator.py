"""
RegexValidator - a field's text must match a pattern.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseValidator, ValidationError


class RegexValidator(BaseValidator):
    """
    Parameters:
    - pattern: regular expression (string or compiled Pattern)
    - flags: optional re flags, ignored for compiled patterns
    - full_match: require the whole value to match (default False, i.e. re.match)
    """

    def __init__(self, field_name: Any, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        pattern = self.parameters.get("pattern")
        if not pattern:
            raise ValueError("RegexValidator requires 'pattern' parameter")

        if isinstance(pattern, Pattern):
            self.pattern = pattern
        elif isinstance(pattern, str):
            try:
                self.pattern = re.compile(pattern, self.parameters.get("flags", 0))
            except re.error as e:
                raise ValueError(f"Invalid regex pattern: {e}")
        else:
            raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")

        self.full_match = self.parameters.get("full_match", False)

    def validate(self, value: Any, record: Any) -> None:
        if value is None:
            return

        text = value if isinstance(value, str) else str(value)
        matcher = self.pattern.fullmatch if self.full_match else self.pattern.match

        if not matcher(text):
            raise ValidationError(
                "regex", self.field_name,
                f"Value '{text}' does not match pattern '{self.pattern.pattern}'"
            )

    @property
    def rule_type(self) -> str:
        return "regex"
