"""
Base validator interface for record predicates.

A validator checks one field of a record. Subclasses implement validate(),
which raises ValidationError on failure; calling the validator with a whole
record turns that into a boolean so validators slot directly into a
transformer's validator chain.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from datareader.core.exceptions import DataReaderError

_MISSING = object()


class ValidationError(DataReaderError):
    """Raised when a record field fails a validation rule."""

    def __init__(self, rule_name: str, field_name: Any, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


def lookup_field(record: Any, field_name: Any, default: Any = None) -> Any:
    """
    Read a field from a string-keyed or positional record.

    Args:
        record: Mapping (JSON/XML records) or sequence (CSV rows)
        field_name: Key, or integer index for positional records
        default: Value returned when the field is absent

    Returns:
        The field value, or default
    """
    if isinstance(record, Mapping):
        return record.get(field_name, default)
    if isinstance(record, Sequence) and not isinstance(record, str) and isinstance(field_name, int):
        if -len(record) <= field_name < len(record):
            return record[field_name]
    return default


def has_field(record: Any, field_name: Any) -> bool:
    """Return True if the record carries the field at all (even as None)."""
    return lookup_field(record, field_name, _MISSING) is not _MISSING


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements a specific rule type
    (required_field, type_check, range, regex, custom).
    """

    def __init__(self, field_name: Any, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Key (or positional index) of the field to validate
            parameters: Rule-specific parameters (e.g., min/max for range)
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def validate(self, value: Any, record: Any) -> None:
        """
        Validate a value against this rule.

        Args:
            value: The field value to validate
            record: The entire record (for context-dependent validation)

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def check(self, record: Any) -> None:
        """Validate this validator's field of ``record``, raising on failure."""
        self.validate(lookup_field(record, self.field_name), record)

    def __call__(self, record: Any) -> bool:
        try:
            self.check(record)
        except ValidationError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name!r}, params={self.parameters})"
