"""
Shared helpers.
"""

from .validation import is_xml_name, validate_element_name, validate_single_char

__all__ = [
    "is_xml_name",
    "validate_element_name",
    "validate_single_char",
]
