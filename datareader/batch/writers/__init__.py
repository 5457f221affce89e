"""
Output formatters.
"""

from .base import OutputFormatter
from .csv_writer import CSVWriter
from .json_writer import JSONWriter
from .xml_writer import XMLWriter

__all__ = [
    "OutputFormatter",
    "CSVWriter",
    "JSONWriter",
    "XMLWriter",
]
