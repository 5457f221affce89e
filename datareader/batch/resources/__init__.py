"""
Record sources: in-memory sequences and files.
"""

from .array_data import ArrayData
from .base import Resource
from .file_resource import File

__all__ = [
    "Resource",
    "ArrayData",
    "File",
]
