"""
JSON format reader.
"""

import json
from typing import Any, TextIO

from datareader.core.exceptions import ResourceError
from datareader.core.transformers import Transformer
from datareader.observability.logger import get_logger

from .base import FormatReader

logger = get_logger(__name__)


class JSONReader(FormatReader):
    """
    Reads a JSON document whose top-level value is an array.

    Each element (an object or an array) is one raw record; element 0 is
    the first record.
    """

    format_name = "json"

    def _decode(self, handle: TextIO, source: str) -> list[Any]:
        try:
            content = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceError("Failed to read JSON", source=source, reason=str(e)) from e

        # A UTF-8 byte order mark survives decoding with the "utf-8" codec
        content = content.removeprefix("\ufeff")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ResourceError(f"JSON decode error: {e.msg}", source=source, reason=str(e)) from e

        if not isinstance(data, list):
            raise ResourceError(
                f"JSON top-level value must be an array, got {type(data).__name__}",
                source=source,
                reason="not_an_array",
            )

        for idx, element in enumerate(data):
            if not isinstance(element, dict | list):
                raise ResourceError(
                    f"JSON element {idx} must be an object or array, got {type(element).__name__}",
                    source=source,
                    reason="scalar_element",
                )
        return data

    def read(self, handle: TextIO, transformer: Transformer) -> list[Any]:
        source = self._source_name(handle)
        data = self._decode(handle, source)
        items = self._collect(data, transformer, source)

        logger.info(f"Read {len(items)} JSON records", extra={"source": source, "dropped": self.dropped_count})
        return items
