"""Handler writing Cloud Logging documents with Error Reporting support."""

from collections.abc import Iterable

from gcpslog.core.compiler import HandlerOptions, compile_record
from gcpslog.core.models import Attr, Record
from gcpslog.core.ports import RecordSinkPort
from gcpslog.core.scope import ScopeNode, root, with_attrs, with_group


class ErrorReportingHandler:
    """Compiles records into Cloud Logging documents and writes them to a sink.

    Documents follow https://cloud.google.com/logging/docs/structured-logging.
    A record carrying an ``error`` attribute at the top level becomes an
    Error Reporting event: ``@type`` is set, ``message`` is replaced by the
    error's message or stack trace and ``reportLocation`` is added when the
    error provides one.

    ``with_attrs`` and ``with_group`` return new handlers sharing the sink
    and options; the receiver is never modified.

    Example:
        ```python
        from gcpslog import ErrorReportingHandler, Logger, StreamSink

        logger = Logger(ErrorReportingHandler(StreamSink()))
        logger.error("payment failed", error=exc, order_id=42)
        ```
    """

    def __init__(
        self,
        sink: RecordSinkPort,
        options: HandlerOptions | None = None,
        *,
        chain: ScopeNode | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            sink: Sink adapter implementing RecordSinkPort.
            options: Level threshold, source capture and key-rewrite hook.
            chain: Scope chain of bound groups and attributes, empty if None.
        """
        self._sink = sink
        self._options = options or HandlerOptions()
        self._chain = chain if chain is not None else root()

    @property
    def options(self) -> HandlerOptions:
        return self._options

    @property
    def chain(self) -> ScopeNode:
        return self._chain

    def enabled(self, level: int) -> bool:
        """Report whether records at ``level`` would be written."""
        return level >= self._options.level

    def handle(self, record: Record) -> None:
        """Compile a record and write it, unless its level is filtered out.

        Encoder and sink errors propagate to the caller.
        """
        document = compile_record(self._chain, record, self._options)
        if document is not None:
            self._sink.write(document)

    def with_attrs(self, attrs: Iterable[Attr]) -> "ErrorReportingHandler":
        """Return a handler that adds ``attrs`` to every record."""
        chain = with_attrs(self._chain, attrs)
        if chain is self._chain:
            return self
        return ErrorReportingHandler(self._sink, self._options, chain=chain)

    def with_group(self, name: str) -> "ErrorReportingHandler":
        """Return a handler that nests later attributes under ``name``."""
        chain = with_group(self._chain, name)
        if chain is self._chain:
            return self
        return ErrorReportingHandler(self._sink, self._options, chain=chain)
