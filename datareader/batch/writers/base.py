"""
OutputFormatter contract.
"""

from abc import ABC, abstractmethod
from typing import Any


class OutputFormatter(ABC):
    """
    Serializes a record list into its final text representation.

    Formatters hold only their options, so serializing the same records
    twice yields identical text.
    """

    format_name: str = "unknown"

    @abstractmethod
    def serialize(self, records: list[Any]) -> str:
        """
        Serialize ``records``.

        Raises:
            OutputError: If the records cannot be represented in this format
        """


def scalar_to_text(value: Any) -> str:
    """Text form of a scalar for the CSV and XML formatters."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
