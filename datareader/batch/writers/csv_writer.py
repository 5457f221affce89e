"""
CSV output formatter.
"""

import csv
import io
from collections.abc import Mapping, Sequence
from typing import Any

from datareader.core.exceptions import OutputError
from datareader.core.validators import lookup_field
from datareader.utils.validation import validate_single_char

from .base import OutputFormatter, scalar_to_text


class CSVWriter(OutputFormatter):
    """
    Writes a header row followed by one row per record.

    The header is the key order of the FIRST record (indices for positional
    records). Every record is written in that order: keys it lacks become
    empty fields and keys the first record lacked are not written. An empty
    record list produces an empty string with no header.
    """

    format_name = "csv"

    def __init__(
        self,
        delimiter: str = ",",
        enclosure: str = '"',
        line_terminator: str = "\n",
        include_header: bool = True,
    ):
        self.delimiter = validate_single_char(delimiter, "delimiter")
        self.enclosure = validate_single_char(enclosure, "enclosure")
        self.line_terminator = line_terminator
        self.include_header = include_header

    def _keys(self, record: Any) -> list[Any]:
        if isinstance(record, Mapping):
            return list(record.keys())
        if isinstance(record, Sequence) and not isinstance(record, str):
            return list(range(len(record)))
        raise OutputError(
            f"Record must be a mapping or sequence, got {type(record).__name__}",
            format_name=self.format_name,
        )

    def _row(self, record: Any, keys: list[Any], index: int) -> list[str]:
        if not isinstance(record, Mapping | Sequence) or isinstance(record, str):
            raise OutputError(
                f"Record {index} must be a mapping or sequence, got {type(record).__name__}",
                format_name=self.format_name,
            )
        row = []
        for key in keys:
            value = lookup_field(record, key)
            if isinstance(value, Mapping) or (isinstance(value, Sequence) and not isinstance(value, str)):
                raise OutputError(
                    f"Record {index} field {key!r} holds a nested {type(value).__name__}; CSV needs scalars",
                    format_name=self.format_name,
                )
            row.append(scalar_to_text(value))
        return row

    def serialize(self, records: list[Any]) -> str:
        if not records:
            return ""

        keys = self._keys(records[0])
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=self.delimiter,
            quotechar=self.enclosure,
            lineterminator=self.line_terminator,
            quoting=csv.QUOTE_MINIMAL,
        )

        try:
            if self.include_header:
                writer.writerow([scalar_to_text(key) for key in keys])
            for index, record in enumerate(records):
                writer.writerow(self._row(record, keys, index))
        except csv.Error as e:
            raise OutputError(f"CSV encoding error: {e}", format_name=self.format_name) from e

        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(delimiter={self.delimiter!r})"
