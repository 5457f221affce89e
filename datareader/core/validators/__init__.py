"""
Field validators usable as validator-chain predicates.

Provides validators for required fields, type checking, ranges, regex
patterns, and custom validation logic.
"""

from .base_validator import BaseValidator, ValidationError, has_field, lookup_field
from .custom_validator import CustomValidator
from .range_validator import RangeValidator
from .regex_validator import RegexValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import TypeValidator, coerce_value

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "TypeValidator",
    "RangeValidator",
    "RegexValidator",
    "CustomValidator",
    "coerce_value",
    "has_field",
    "lookup_field",
]
