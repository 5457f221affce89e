"""
Ready-made transformers.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from datareader.core.models import Drop, ItemOutcome, Keep
from datareader.observability.metrics import MetricsCollector

from .base import BaseTransformer, Predicate, Transformer


class IdentityTransformer(Transformer):
    """Keeps every record, including the first, unchanged."""

    def configure_item(self, record: Any) -> ItemOutcome:
        return Keep(record=record)

    def configure_first_item(self, record: Any) -> ItemOutcome:
        return Keep(record=record)


class HeaderSkippingTransformer(Transformer):
    """Drops the first record and keeps the rest unchanged."""

    def configure_item(self, record: Any) -> ItemOutcome:
        return Keep(record=record)

    def configure_first_item(self, record: Any) -> ItemOutcome:
        return Drop(reason="header row")


class MappingTransformer(BaseTransformer):
    """
    Maps fields, validates the mapped record, and drops records that fail.

    Attributes:
        stats: Running counts of kept and invalid records
    """

    def __init__(
        self,
        field_mapping: Mapping[Any, Any] | None = None,
        validators: Iterable[Predicate] | None = None,
        skip_first: bool = False,
        metrics: MetricsCollector | None = None,
    ):
        super().__init__(field_mapping, validators)
        self.skip_first = skip_first
        self.metrics = metrics
        self.stats = {"kept": 0, "invalid": 0}

    def configure_item(self, record: Any) -> ItemOutcome:
        mapped = self.map_fields(record)

        if not self.validate_item(mapped):
            self.stats["invalid"] += 1
            if self.metrics:
                self.metrics.record_validation_failure(type(self).__name__)
            return Drop(reason="validation failed")

        self.stats["kept"] += 1
        return Keep(record=mapped)

    def configure_first_item(self, record: Any) -> ItemOutcome:
        if self.skip_first:
            return Drop(reason="header row")
        return self.configure_item(record)


class CsvHeaderTransformer(MappingTransformer):
    """
    Uses the first positional row as column names.

    Later rows become dicts keyed by those names before mapping and
    validation. Short rows are padded with None; long rows are truncated.
    """

    def __init__(
        self,
        field_mapping: Mapping[Any, Any] | None = None,
        validators: Iterable[Predicate] | None = None,
        metrics: MetricsCollector | None = None,
    ):
        super().__init__(field_mapping, validators, skip_first=True, metrics=metrics)
        self.header: list[str] | None = None

    def configure_first_item(self, record: Any) -> ItemOutcome:
        header = [str(name).strip() for name in record]
        if header:
            header[0] = header[0].lstrip("\ufeff")
        self.header = header
        return Drop(reason="header row")

    def configure_item(self, record: Any) -> ItemOutcome:
        if self.header is not None and not isinstance(record, Mapping):
            values = list(record)
            values += [None] * (len(self.header) - len(values))
            record = dict(zip(self.header, values))
        return super().configure_item(record)
