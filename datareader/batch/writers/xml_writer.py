"""
XML output formatter.
"""

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from typing import Any

from datareader.core.exceptions import OutputError
from datareader.utils.validation import is_xml_name, validate_element_name

from .base import OutputFormatter, scalar_to_text

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters outside the XML 1.0 Char production
_ILLEGAL_XML_CHARS = re.compile(r"[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


class XMLWriter(OutputFormatter):
    """
    Builds ``<root><item>...</item>...</root>`` with one item element per
    record.

    Mapping values become nested elements named by their keys; sequence
    values become repeated ``value_element`` children; scalars become
    escaped text. An empty record list gives an empty root element.

    Text holding characters XML 1.0 cannot represent, and structures nested
    deeper than the interpreter recursion limit, raise OutputError.
    """

    format_name = "xml"

    def __init__(
        self,
        root_element: str = "data",
        item_element: str = "item",
        value_element: str = "value",
        pretty_print: bool = False,
        xml_declaration: bool = True,
    ):
        self.root_element = validate_element_name(root_element, "root_element")
        self.item_element = validate_element_name(item_element, "item_element")
        self.value_element = validate_element_name(value_element, "value_element")
        self.pretty_print = pretty_print
        self.xml_declaration = xml_declaration

    def serialize(self, records: list[Any]) -> str:
        root = ET.Element(self.root_element)
        try:
            for record in records:
                item = ET.SubElement(root, self.item_element)
                self._fill(item, record, set())

            if self.pretty_print:
                ET.indent(root)

            body = ET.tostring(root, encoding="unicode")
        except RecursionError as e:
            raise OutputError("Record nesting is too deep to serialize", format_name=self.format_name) from e

        return (XML_DECLARATION if self.xml_declaration else "") + body + "\n"

    def _fill(self, element: ET.Element, data: Any, ancestors: set[int]) -> None:
        if isinstance(data, Mapping) or _is_sequence(data):
            if id(data) in ancestors:
                raise OutputError("Cyclic structure cannot be serialized", format_name=self.format_name)
            ancestors = ancestors | {id(data)}

        if isinstance(data, Mapping):
            for key, value in data.items():
                if not is_xml_name(key):
                    raise OutputError(f"Key {key!r} is not a valid XML element name", format_name=self.format_name)
                self._fill(ET.SubElement(element, key), value, ancestors)
        elif _is_sequence(data):
            for value in data:
                self._fill(ET.SubElement(element, self.value_element), value, ancestors)
        elif data is not None:
            text = scalar_to_text(data)
            match = _ILLEGAL_XML_CHARS.search(text)
            if match:
                raise OutputError(
                    f"Field {element.tag!r} contains character {match.group()!r} not allowed in XML",
                    format_name=self.format_name,
                )
            element.text = text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root_element!r}, item={self.item_element!r})"
