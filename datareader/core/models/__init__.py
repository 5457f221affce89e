"""
Core data models for the datareader pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .outcome import DROP, Drop, ItemOutcome, Keep
from .validation_result import ValidationResult

__all__ = [
    "Keep",
    "Drop",
    "DROP",
    "ItemOutcome",
    "ValidationResult",
]
