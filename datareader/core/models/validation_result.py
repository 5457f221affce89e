"""
ValidationResult model representing the outcome of validating a record (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator
from typing import List


class ValidationResult(BaseModel):
    """
    Outcome of running a rule engine over one record.

    Note: ValidationResult is ephemeral, never persisted (used in-memory
    while a transformer decides whether to keep a record).

    Attributes:
        record_index: Position of the record in its source
        passed: Overall validation status
        passed_rules: Rules that succeeded
        failed_rules: Rules that failed with severity "error"
        warnings: Rules that failed with severity "warning" (non-blocking)
    """

    record_index: int | None = None
    passed: bool
    passed_rules: List[str] = Field(default_factory=list)
    failed_rules: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @field_validator('failed_rules')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "record_index": 3,
                "passed": False,
                "passed_rules": [
                    "name_required",
                    "age_type_check"
                ],
                "failed_rules": [
                    "age_range"
                ],
                "warnings": [
                    "email_regex"
                ]
            }
        }
