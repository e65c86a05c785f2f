"""Sink adapters implementing RecordSinkPort."""

from gcpslog.adapters.sinks.in_memory import InMemorySink
from gcpslog.adapters.sinks.stream import StreamSink

__all__ = [
    "InMemorySink",
    "StreamSink",
]
