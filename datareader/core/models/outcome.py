"""
Per-item outcome returned by transformers.

A transformer answers every record with either Keep (append the carried
record to the output) or Drop (exclude the record). Both the first-record
and later-record paths use the same two outcomes.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Keep(BaseModel):
    """
    Keep the record in the output sequence.

    Attributes:
        record: The transformed record to append
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    record: Any


class Drop(BaseModel):
    """
    Exclude the record from the output sequence.

    Attributes:
        reason: Optional human-readable reason, used for debug logging
    """

    model_config = ConfigDict(frozen=True)

    reason: str | None = None


ItemOutcome = Keep | Drop

DROP = Drop()
