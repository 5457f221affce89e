"""
XML format reader.
"""

import xml.etree.ElementTree as ET
from typing import Any, TextIO

from datareader.core.exceptions import ResourceError
from datareader.core.transformers import Transformer
from datareader.observability.logger import get_logger
from datareader.utils.validation import validate_element_name

from .base import FormatReader

logger = get_logger(__name__)

TEXT_KEY = "#text"


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


def element_to_record(element: ET.Element) -> dict[str, Any]:
    """
    Convert an element into a string-keyed mapping.

    Attributes and child elements become keys. A child tag that repeats
    collects its values into a list. Text alongside attributes or children
    is kept under ``#text``.
    """
    record: dict[str, Any] = {local_name(k): v for k, v in element.attrib.items()}
    repeated: set[str] = set()

    for child in element:
        key = local_name(child.tag)
        value = element_to_value(child)
        if key not in record:
            record[key] = value
        elif key in repeated:
            record[key].append(value)
        else:
            record[key] = [record[key], value]
            repeated.add(key)

    text = (element.text or "").strip()
    if text:
        record[TEXT_KEY] = text
    return record


def element_to_value(element: ET.Element) -> Any:
    """Plain leaves become their text; anything with structure becomes a mapping."""
    if len(element) == 0 and not element.attrib:
        return (element.text or "").strip()
    return element_to_record(element)


class XMLReader(FormatReader):
    """
    Reads the direct children of the document root whose tag matches
    ``item_tag``; each one is a raw record.
    """

    format_name = "xml"

    def __init__(self, item_tag: str = "item"):
        super().__init__()
        self.item_tag = validate_element_name(item_tag, "item_tag")

    def _parse(self, handle: TextIO, source: str) -> ET.Element:
        try:
            content = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceError("Failed to read XML", source=source, reason=str(e)) from e

        # A UTF-8 byte order mark survives decoding with the "utf-8" codec
        content = content.removeprefix("\ufeff")

        try:
            return ET.fromstring(content)
        except ET.ParseError as e:
            raise ResourceError(f"Failed to parse XML: {e}", source=source, reason=str(e)) from e

    def read(self, handle: TextIO, transformer: Transformer) -> list[Any]:
        source = self._source_name(handle)
        root = self._parse(handle, source)

        raw_records = [
            element_to_record(child)
            for child in root
            if isinstance(child.tag, str) and local_name(child.tag) == self.item_tag
        ]
        items = self._collect(raw_records, transformer, source)

        logger.info(f"Read {len(items)} XML records", extra={"source": source, "dropped": self.dropped_count})
        return items

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(item_tag={self.item_tag!r})"
