"""
FormatReader contract shared by the CSV, JSON and XML readers.
"""

from abc import ABC, abstractmethod
from typing import Any, TextIO

from datareader.core.transformers import ItemCollector, Transformer


class FormatReader(ABC):
    """
    Decodes one open text stream into records, threading each through a
    transformer.

    A failed read never returns partial records. ``dropped_count`` reports
    how many records the transformer dropped during the last read.
    """

    format_name: str = "unknown"

    def __init__(self):
        self.dropped_count = 0

    @abstractmethod
    def read(self, handle: TextIO, transformer: Transformer) -> list[Any]:
        """
        Decode ``handle`` and apply ``transformer``.

        Raises:
            ResourceError: If the stream cannot be read or decoded
        """

    def _collect(self, raw_records, transformer: Transformer, source: str) -> list[Any]:
        collector = ItemCollector(transformer, source=source)
        items = collector.collect(raw_records)
        self.dropped_count = collector.dropped
        return items

    @staticmethod
    def _source_name(handle: Any) -> str:
        return str(getattr(handle, "name", "<stream>"))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
