"""
Prometheus metrics for datareader pipelines

Metrics live in a private registry so embedding applications decide
whether and where to expose them.
"""
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


REGISTRY = CollectorRegistry()


records_processed_total = Counter(
    name="datareader_records_processed_total",
    documentation="Records seen by a resource, by transformer outcome",
    labelnames=["resource", "status"],  # status: kept, dropped
    registry=REGISTRY,
)

pipeline_runs_total = Counter(
    name="datareader_pipeline_runs_total",
    documentation="Reader.run() invocations",
    labelnames=["output", "status"],  # status: success, failure
    registry=REGISTRY,
)

pipeline_duration_seconds = Histogram(
    name="datareader_pipeline_duration_seconds",
    documentation="Wall time of Reader.run() in seconds",
    labelnames=["output"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)

errors_total = Counter(
    name="datareader_errors_total",
    documentation="Errors raised by pipeline stages",
    labelnames=["stage", "error_type"],
    registry=REGISTRY,
)

validation_failures_total = Counter(
    name="datareader_validation_failures_total",
    documentation="Records rejected by a transformer's validator chain",
    labelnames=["transformer"],
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Render the registry in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST


class MetricsCollector:
    """
    Facade over the module metrics, injected into Reader.

    Tests and embedding code can pass a subclass (or a stub) to observe
    what the pipeline reports without touching the global registry.
    """

    def record_items(self, resource: str, kept: int, dropped: int) -> None:
        if kept:
            records_processed_total.labels(resource=resource, status="kept").inc(kept)
        if dropped:
            records_processed_total.labels(resource=resource, status="dropped").inc(dropped)

    def record_run(self, output: str, success: bool, duration_seconds: float) -> None:
        status = "success" if success else "failure"
        pipeline_runs_total.labels(output=output, status=status).inc()
        pipeline_duration_seconds.labels(output=output).observe(duration_seconds)

    def record_error(self, stage: str, error: BaseException) -> None:
        errors_total.labels(stage=stage, error_type=type(error).__name__).inc()

    def record_validation_failure(self, transformer: str) -> None:
        validation_failures_total.labels(transformer=transformer).inc()
