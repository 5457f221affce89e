"""
Resource contract: where records come from.
"""

from abc import ABC, abstractmethod
from typing import Any

from datareader.core.exceptions import ResourceError
from datareader.core.transformers import Transformer


class Resource(ABC):
    """
    Produces a record list by applying a transformer to a backing store.

    The resource keeps the list produced by its most recent successful
    apply() as its data; each call replaces it, never merges. That field is
    the only mutable state, so one instance must not be applied from two
    threads at once; give each concurrent caller its own resource.
    """

    def __init__(self):
        self._data: list[Any] = []
        self.dropped_count = 0

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def apply(self, transformer: Transformer) -> list[Any]:
        """
        Run every raw record through ``transformer``.

        Raises:
            ConfigurationError: If transformer is None
            ResourceError: If the backing store cannot be read or decoded
        """

    def get_data(self) -> list[Any]:
        """Records produced by the last successful apply(), or []."""
        return self._data

    def set_data(self, data: list[Any]) -> None:
        if not isinstance(data, list):
            raise ResourceError(f"Data must be a list, got {type(data).__name__}", source=self.name)
        self._data = data
