"""Shared test fixtures for all test modules."""

from datetime import datetime, timezone

import pytest

from gcpslog.adapters.sinks.in_memory import InMemorySink
from gcpslog.core.models import Level, Record


@pytest.fixture
def sink() -> InMemorySink:
    """Provide an empty in-memory sink."""
    return InMemorySink()


@pytest.fixture
def some_time() -> datetime:
    """A fixed record time."""
    return datetime(2020, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_record(some_time: datetime):
    """Factory fixture for records with a fixed time.

    Usage:
        def test_something(make_record):
            record = make_record(Level.ERROR, "failed", Attr("error", "boom"))
    """

    def _record(
        level: int = Level.INFO, message: str = "test message", *attrs, **kwargs
    ):
        kwargs.setdefault("time", some_time)
        return Record(level=level, message=message, attrs=attrs, **kwargs)

    return _record
