"""
Transformer contract, base strategy, and ready-made transformers.
"""

from .base import BaseTransformer, ItemCollector, Predicate, Transformer
from .transformers import (
    CsvHeaderTransformer,
    HeaderSkippingTransformer,
    IdentityTransformer,
    MappingTransformer,
)

__all__ = [
    "Transformer",
    "BaseTransformer",
    "ItemCollector",
    "Predicate",
    "IdentityTransformer",
    "HeaderSkippingTransformer",
    "MappingTransformer",
    "CsvHeaderTransformer",
]
