"""
Batch read -> transform -> serialize pipeline.
"""

from .pipeline import Reader
from .readers import CSVReader, FormatReader, JSONReader, XMLReader
from .resources import ArrayData, File, Resource
from .writers import CSVWriter, JSONWriter, OutputFormatter, XMLWriter

__all__ = [
    "Reader",
    "Resource",
    "ArrayData",
    "File",
    "FormatReader",
    "CSVReader",
    "JSONReader",
    "XMLReader",
    "OutputFormatter",
    "CSVWriter",
    "JSONWriter",
    "XMLWriter",
]
