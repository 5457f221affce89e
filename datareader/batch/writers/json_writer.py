"""
JSON output formatter.
"""

import json
from typing import Any

from datareader.core.exceptions import OutputError

from .base import OutputFormatter


class JSONWriter(OutputFormatter):
    """
    Encodes the record list as one JSON array.

    Non-finite floats (NaN, Infinity) are rejected rather than emitted as
    invalid JSON.
    """

    format_name = "json"

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 4,
        sort_keys: bool = False,
        ensure_ascii: bool = True,
    ):
        self.pretty_print = pretty_print
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii

    def serialize(self, records: list[Any]) -> str:
        try:
            return json.dumps(
                list(records),
                indent=self.indent if self.pretty_print else None,
                separators=None if self.pretty_print else (",", ":"),
                sort_keys=self.sort_keys,
                ensure_ascii=self.ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise OutputError(f"JSON encoding error: {e}", format_name=self.format_name) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pretty_print={self.pretty_print})"
