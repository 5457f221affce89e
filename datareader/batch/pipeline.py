"""
Reader: the read -> transform -> serialize pipeline.

Flow:
1. Resource.apply(transformer) produces the ordered record list
2. OutputFormatter.serialize(records) produces the final text
"""

import logging
import time
from typing import Any

from datareader.batch.resources import Resource
from datareader.batch.writers import OutputFormatter
from datareader.core.exceptions import ConfigurationError, PipelineError
from datareader.core.transformers import Transformer
from datareader.observability.logger import get_logger, log_operation
from datareader.observability.metrics import MetricsCollector


class Reader:
    """
    Orchestrates a resource, a transformer and an output formatter.

    All three collaborators can be given at construction or set later.
    run() needs all of them; get_items() needs only the resource and the
    transformer. A Reader is not safe for concurrent use because its
    resource keeps the last result.
    """

    def __init__(
        self,
        resource: Resource | None = None,
        output: OutputFormatter | None = None,
        transformer: Transformer | None = None,
        logger: logging.Logger | None = None,
        metrics: MetricsCollector | None = None,
    ):
        """
        Args:
            resource: Where records come from
            output: How records are serialized
            transformer: Per-record transform/validation strategy
            logger: Logger for pipeline events (defaults to the package logger)
            metrics: Metrics collector (defaults to the Prometheus-backed one)
        """
        self.resource = resource
        self.output = output
        self.transformer = transformer
        self.logger = logger or get_logger(__name__)
        self.metrics = metrics or MetricsCollector()

    def set_resource(self, resource: Resource) -> "Reader":
        self.resource = resource
        return self

    def set_output(self, output: OutputFormatter) -> "Reader":
        self.output = output
        return self

    def set_transformer(self, transformer: Transformer) -> "Reader":
        self.transformer = transformer
        return self

    def _require(self, *names: str) -> None:
        missing = [name for name in names if getattr(self, name) is None]
        if missing:
            raise ConfigurationError(f"Reader is missing required collaborator(s): {', '.join(missing)}")

    def _apply_resource(self) -> list[Any]:
        items = self.resource.apply(self.transformer)
        self.metrics.record_items(
            self.resource.name,
            kept=len(items) if isinstance(items, list) else 0,
            dropped=self.resource.dropped_count,
        )
        return items

    def run(self) -> str:
        """
        Read, transform and serialize.

        Returns:
            The serialized output

        Raises:
            ConfigurationError: If any collaborator is unset
            PipelineError: Wrapping any resource or output failure
        """
        self._require("resource", "transformer", "output")
        output_name = self.output.format_name
        start = time.perf_counter()
        stage = "resource"

        try:
            with log_operation("Pipeline run", logger=self.logger,
                               resource=self.resource.name, output=output_name):
                items = self._apply_resource()
                stage = "output"
                payload = self.output.serialize(items)
        except Exception as e:
            self.metrics.record_error(stage, e)
            self.metrics.record_run(output_name, success=False, duration_seconds=time.perf_counter() - start)
            raise PipelineError(stage, e) from e

        self.metrics.record_run(output_name, success=True, duration_seconds=time.perf_counter() - start)
        self.logger.info(
            f"Serialized {len(items)} records as {output_name}",
            extra={"records": len(items), "dropped": self.resource.dropped_count},
        )
        return payload

    def get_items(self) -> list[Any]:
        """
        Run the resource stage only.

        Raises:
            ConfigurationError: If the resource or transformer is unset
            ResourceError: If the source cannot be read
        """
        self._require("resource", "transformer")
        try:
            return self._apply_resource()
        except Exception as e:
            self.metrics.record_error("resource", e)
            raise

    def get_total_items(self) -> int:
        """Number of records get_items() yields; 0 if it did not yield a list."""
        items = self.get_items()
        return len(items) if isinstance(items, list) else 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(resource={self.resource!r}, "
            f"transformer={self.transformer!r}, output={self.output!r})"
        )
