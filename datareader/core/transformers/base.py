"""
Transformer contract and the shared first-record/rest-record loop.

Every source (in-memory or file format) feeds its raw records through
ItemCollector, so the Keep/Drop handling lives in exactly one place:
record 0 goes to configure_first_item, every later record to
configure_item, and a Drop outcome from either path excludes the record.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from datareader.core.exceptions import ConfigurationError
from datareader.core.models import Drop, ItemOutcome, Keep
from datareader.core.validators import lookup_field
from datareader.observability.logger import get_logger

logger = get_logger(__name__)

Predicate = Callable[[Any], bool]


class Transformer(ABC):
    """
    Caller-supplied strategy turning raw records into output records.

    Implementations may keep internal state (counters, a captured header
    row) for the duration of one apply() call.
    """

    @abstractmethod
    def configure_item(self, record: Any) -> ItemOutcome:
        """Transform a record at position >= 1, or drop it."""

    @abstractmethod
    def configure_first_item(self, record: Any) -> ItemOutcome:
        """Transform the record at position 0, or drop it (e.g. a header row)."""


class ItemCollector:
    """
    Runs raw records through a transformer and accumulates kept records.

    A collector is single-use: create one per apply()/read() call.
    """

    def __init__(self, transformer: Transformer | None, source: str = "records"):
        if transformer is None:
            raise ConfigurationError("A transformer is required to apply a resource")
        self.transformer = transformer
        self.source = source
        self.dropped = 0

    def collect(self, raw_records: Iterable[Any]) -> list[Any]:
        """
        Feed every raw record through the transformer.

        Returns:
            Kept records, in source order

        Raises:
            TypeError: If the transformer returns something other than Keep or Drop
        """
        items: list[Any] = []
        for index, raw in enumerate(raw_records):
            if index == 0:
                outcome = self.transformer.configure_first_item(raw)
            else:
                outcome = self.transformer.configure_item(raw)

            if isinstance(outcome, Keep):
                items.append(outcome.record)
            elif isinstance(outcome, Drop):
                self.dropped += 1
                logger.debug(
                    f"Dropped record {index} from {self.source}",
                    extra={"record_index": index, "reason": outcome.reason},
                )
            else:
                raise TypeError(
                    f"{type(self.transformer).__name__} returned {type(outcome).__name__} "
                    f"for record {index}; expected Keep or Drop"
                )

        logger.debug(
            f"Collected {len(items)} records from {self.source}",
            extra={"kept": len(items), "dropped": self.dropped},
        )
        return items


class BaseTransformer(Transformer):
    """
    Reusable base with field mapping and a validator chain.

    Concrete transformers call map_fields() and validate_item() from their
    configure_* methods.
    """

    def __init__(
        self,
        field_mapping: Mapping[Any, Any] | None = None,
        validators: Iterable[Predicate] | None = None,
    ):
        self.field_mapping: dict[Any, Any] = dict(field_mapping or {})
        self.validators: list[Predicate] = list(validators or [])

    def set_field_mapping(self, mapping: Mapping[Any, Any]) -> "BaseTransformer":
        self.field_mapping = dict(mapping)
        return self

    def add_validator(self, validator: Predicate) -> "BaseTransformer":
        if not callable(validator):
            raise ConfigurationError(f"Validator must be callable, got {type(validator).__name__}")
        self.validators.append(validator)
        return self

    def map_fields(self, record: Any) -> Any:
        """
        Rename fields according to the mapping.

        Only mapped fields survive, in mapping order. A source field missing
        from the record maps to None. With no mapping the record is returned
        unchanged.
        """
        if not self.field_mapping:
            return record

        return {
            target: lookup_field(record, source)
            for source, target in self.field_mapping.items()
        }

    def validate_item(self, record: Any) -> bool:
        """
        True iff every validator accepts the record; stops at the first rejection.
        """
        for validator in self.validators:
            if not validator(record):
                return False
        return True
