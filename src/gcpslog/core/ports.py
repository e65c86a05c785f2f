"""Port interfaces for sinks and for capabilities of attribute values.

The core depends only on these protocols. Sinks are adapters; the value
capabilities are checked structurally, so any object with the right method
qualifies without subclassing.
"""

from typing import Any, Protocol, runtime_checkable

from gcpslog.core.models import ReportLocation


@runtime_checkable
class RecordSinkPort(Protocol):
    """Port for writing compiled log documents.

    Adapters implementing this protocol must make "encode + write" one
    atomic unit so concurrent records never interleave.
    Examples: StreamSink, InMemorySink.
    """

    def write(self, document: dict[str, Any]) -> None:
        """Encode and write one document."""
        ...


@runtime_checkable
class LogValuer(Protocol):
    """A value that produces its own structured representation."""

    def log_value(self) -> Any:
        """Return the value to log in place of this object."""
        ...


@runtime_checkable
class StackTracer(Protocol):
    """An error that carries a stack trace from the point it was created."""

    def stack_trace(self) -> bytes | str:
        """Return the stack trace text."""
        ...


@runtime_checkable
class ReportLocator(Protocol):
    """An error that knows the source location it was created at."""

    def report_location(self) -> ReportLocation | None:
        """Return the error's origin, or None if unknown."""
        ...
