"""
Input validation for formatter and reader options.

Checked once at construction so a misconfigured reader or formatter fails
before any record is read.
"""

import re

from datareader.core.exceptions import ConfigurationError

_XML_NAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_.\-]*$')


def is_xml_name(name: object) -> bool:
    """
    True if ``name`` can be used as an XML element name.

    Examples:
        >>> is_xml_name("item")
        True
        >>> is_xml_name("2nd")
        False
        >>> is_xml_name("xmlData")
        False
    """
    if not isinstance(name, str) or not _XML_NAME.match(name):
        return False
    # Names beginning with "xml" in any case are reserved
    return not name.lower().startswith("xml")


def validate_element_name(name: str, field_name: str = "element name") -> str:
    """
    Validate an XML element or tag name.

    Raises:
        ConfigurationError: If the name is not a usable element name
    """
    if not is_xml_name(name):
        raise ConfigurationError(
            f"{field_name} {name!r} is not a valid XML element name. "
            "Use letters, digits, '_', '-' or '.', starting with a letter or underscore."
        )
    return name


def validate_single_char(value: str | None, field_name: str, allow_none: bool = False) -> str | None:
    """
    Validate a one-character CSV dialect option (delimiter, quote, escape).

    Examples:
        >>> validate_single_char(";", "delimiter")
        ';'
        >>> validate_single_char("||", "delimiter")  # doctest: +SKIP
        ConfigurationError: delimiter must be a single character
    """
    if value is None and allow_none:
        return None

    if not isinstance(value, str) or len(value) != 1:
        raise ConfigurationError(f"{field_name} must be a single character, got {value!r}")

    if value in ("\r", "\n"):
        raise ConfigurationError(f"{field_name} cannot be a line break")

    return value
