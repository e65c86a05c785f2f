"""Python logging handler adapter for gcpslog.

This adapter bridges Python's standard library logging module to an
ErrorReportingHandler, so existing ``logging`` calls produce Cloud Logging
documents and exceptions logged with ``exc_info`` become Error Reporting
events.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from gcpslog.core.errors import ERROR_KEY, TracebackError
from gcpslog.core.models import Attr, Level, Record, SourceLocation
from gcpslog.handler import ErrorReportingHandler

# Returns attributes to add to every record, e.g. from a contextvar
ContextProvider = Callable[[], Mapping[str, Any]]

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


_LEVELS = {
    logging.DEBUG: Level.DEBUG,
    logging.INFO: Level.INFO,
    logging.WARNING: Level.WARN,
    logging.ERROR: Level.ERROR,
}


def level_from_levelno(levelno: int) -> float:
    """Map a ``logging`` level number onto the gcpslog level scale.

    DEBUG, INFO, WARNING and ERROR map to Level.DEBUG, INFO, WARN and ERROR.
    CRITICAL and custom numbers are scaled without rounding, so they keep
    their order, never coincide with a named level and get the DEFAULT
    severity.
    """
    level = _LEVELS.get(levelno)
    if level is not None:
        return level
    return (levelno - logging.INFO) * 4 / 10


class CloudLoggingHandler(logging.Handler):
    """Logging handler that writes log records through an ErrorReportingHandler.

    Example:
        ```python
        from gcpslog import CloudLoggingHandler, ErrorReportingHandler, StreamSink

        handler = CloudLoggingHandler(ErrorReportingHandler(StreamSink()))
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        handler: ErrorReportingHandler,
        context_provider: ContextProvider | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            handler: Handler compiling and writing the documents. Its level
                threshold applies on top of this handler's own level.
            context_provider: Optional callable returning attributes to add
                to every record. ``extra`` attributes override them.
        """
        super().__init__()
        self._handler = handler
        self._context_provider = context_provider

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record as a Cloud Logging document.

        Args:
            record: The log record to emit.
        """
        level = level_from_levelno(record.levelno)
        if not self._handler.enabled(level):
            return

        attrs: list[Attr] = []
        if self._context_provider is not None:
            attrs.extend(Attr(k, v) for k, v in self._context_provider().items())

        # Add any extra attributes passed via logging call
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_LOGRECORD_ATTRS
        }
        attrs.extend(Attr(k, v) for k, v in extras.items())

        # An explicit error extra takes precedence over exc_info
        if record.exc_info and ERROR_KEY not in extras:
            exc_value = record.exc_info[1]
            if exc_value is not None:
                attrs.append(Attr(ERROR_KEY, TracebackError(exc_value)))

        self._handler.handle(
            Record(
                time=datetime.fromtimestamp(record.created, tz=timezone.utc),
                level=level,
                message=record.getMessage(),
                attrs=tuple(attrs),
                source=SourceLocation(
                    function=record.funcName or "",
                    file=record.pathname,
                    line=record.lineno,
                ),
            )
        )
