"""
In-memory resource.
"""

from collections.abc import Iterable
from typing import Any

from datareader.core.transformers import ItemCollector, Transformer

from .base import Resource


class ArrayData(Resource):
    """
    Resource over records the caller already holds in memory.

    The backing sequence is iterated in its original order on every
    apply(); it is never modified.
    """

    def __init__(self, data: Iterable[Any] | None = None):
        super().__init__()
        self.raw_data = list(data) if data is not None else []

    def apply(self, transformer: Transformer) -> list[Any]:
        collector = ItemCollector(transformer, source=self.name)
        items = collector.collect(self.raw_data)
        self.dropped_count = collector.dropped
        self.set_data(items)
        return self.get_data()

    def __len__(self) -> int:
        return len(self.raw_data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(records={len(self.raw_data)})"
