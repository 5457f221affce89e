"""
Format readers for file-backed resources.
"""

from .base import FormatReader
from .csv_reader import CSVReader
from .json_reader import JSONReader
from .xml_reader import XMLReader

__all__ = [
    "FormatReader",
    "CSVReader",
    "JSONReader",
    "XMLReader",
]
