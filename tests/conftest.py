"""
Pytest configuration and fixtures for datareader tests

This module provides shared fixtures for unit and integration tests.
"""
from pathlib import Path

import pytest

from datareader.core.models import Drop, Keep
from datareader.core.transformers import Transformer
from datareader.observability.metrics import MetricsCollector


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise one component in memory"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that read real files end to end"
    )


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """
    Path to the tests/fixtures directory
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def write_file(tmp_path):
    """
    Write text to a temporary file and return its path

    Usage:
        path = write_file("data.json", '[{"a": 1}]')
    """
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =======================
# RECORD FIXTURES
# =======================

@pytest.fixture
def people() -> list[dict]:
    return [
        {"name": "John", "age": "30"},
        {"name": "Jane", "age": "25"},
    ]


# =======================
# TRANSFORMER FIXTURES
# =======================

class RecordingTransformer(Transformer):
    """
    Keeps every record, tags it with the path that produced it, and
    remembers the calls made. ``drop_first`` drops record 0 instead.
    """

    def __init__(self, drop_first: bool = False):
        self.drop_first = drop_first
        self.calls: list[tuple[str, object]] = []

    def configure_item(self, record):
        self.calls.append(("item", record))
        return Keep(record={"path": "item", "record": record})

    def configure_first_item(self, record):
        self.calls.append(("first", record))
        if self.drop_first:
            return Drop(reason="header")
        return Keep(record={"path": "first", "record": record})


@pytest.fixture
def recording_transformer() -> RecordingTransformer:
    return RecordingTransformer()


class RecordingMetrics(MetricsCollector):
    """MetricsCollector that records calls instead of touching Prometheus."""

    def __init__(self):
        self.items: list[tuple] = []
        self.runs: list[tuple] = []
        self.errors: list[tuple] = []
        self.validation_failures: list[str] = []

    def record_items(self, resource, kept, dropped):
        self.items.append((resource, kept, dropped))

    def record_run(self, output, success, duration_seconds):
        self.runs.append((output, success))

    def record_error(self, stage, error):
        self.errors.append((stage, type(error).__name__))

    def record_validation_failure(self, transformer):
        self.validation_failures.append(transformer)


@pytest.fixture
def metrics() -> RecordingMetrics:
    return RecordingMetrics()
