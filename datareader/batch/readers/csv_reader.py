"""
CSV format reader.
"""

import csv
from typing import Any, TextIO

from datareader.core.exceptions import ResourceError
from datareader.core.transformers import Transformer
from datareader.observability.logger import get_logger
from datareader.utils.validation import validate_single_char

from .base import FormatReader

logger = get_logger(__name__)


class CSVReader(FormatReader):
    """
    Reads delimited text, one raw record per row.

    Rows are positional lists of strings; row 0 (usually the header) is the
    first record. Quoted fields may contain the delimiter and line breaks,
    so the handle should be opened with ``newline=""``.
    """

    format_name = "csv"

    def __init__(
        self,
        delimiter: str = ",",
        enclosure: str = '"',
        escape_char: str | None = None,
        skip_blank_lines: bool = True,
        strict: bool = False,
    ):
        """
        Args:
            delimiter: Field separator
            enclosure: Quote character around fields
            escape_char: Optional escape character inside quoted fields
            skip_blank_lines: Ignore rows with no fields at all
            strict: Raise on malformed quoting instead of reading leniently
        """
        super().__init__()
        self.delimiter = validate_single_char(delimiter, "delimiter")
        self.enclosure = validate_single_char(enclosure, "enclosure")
        self.escape_char = validate_single_char(escape_char, "escape_char", allow_none=True)
        self.skip_blank_lines = skip_blank_lines
        self.strict = strict

    def _rows(self, handle: TextIO):
        reader = csv.reader(
            handle,
            delimiter=self.delimiter,
            quotechar=self.enclosure,
            escapechar=self.escape_char,
            strict=self.strict,
        )
        for row in reader:
            if not row and self.skip_blank_lines:
                continue
            yield row

    def read(self, handle: TextIO, transformer: Transformer) -> list[Any]:
        source = self._source_name(handle)
        try:
            items = self._collect(self._rows(handle), transformer, source)
        except csv.Error as e:
            raise ResourceError("Malformed CSV", source=source, reason=str(e)) from e
        except UnicodeDecodeError as e:
            raise ResourceError("Cannot decode CSV text", source=source, reason=str(e)) from e

        logger.info(f"Read {len(items)} CSV records", extra={"source": source, "dropped": self.dropped_count})
        return items
