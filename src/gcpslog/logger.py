"""Logger facade over ErrorReportingHandler."""

import sys
from datetime import datetime, timezone
from typing import Any

from gcpslog.core.errors import frame_function_name
from gcpslog.core.models import Attr, Level, Record, SourceLocation
from gcpslog.handler import ErrorReportingHandler


def capture_source(skip: int = 0) -> SourceLocation | None:
    """Capture a call site from the current stack.

    Args:
        skip: Number of stack frames to skip. 0 identifies the caller of
            capture_source.

    Returns:
        The call site, or None if the stack is not that deep.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return None
    return SourceLocation(
        function=frame_function_name(frame),
        file=frame.f_code.co_filename,
        line=frame.f_lineno,
    )


def _to_attrs(args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[Attr, ...]:
    for arg in args:
        if not isinstance(arg, Attr):
            raise TypeError(
                f"positional log arguments must be Attr, got {type(arg).__name__}"
            )
    return (*args, *(Attr(key, value) for key, value in kwargs.items()))


class Logger:
    """Leveled logger emitting records to an ErrorReportingHandler.

    Attributes are passed as ``Attr`` objects or keyword arguments, in that
    order. ``with_`` and ``with_group`` return new loggers; the receiver
    keeps its own bindings.

    Example:
        ```python
        logger = Logger(ErrorReportingHandler(StreamSink()))
        request_logger = logger.with_group("request").with_(id="abc123")
        request_logger.info("served", status=200)
        ```
    """

    def __init__(self, handler: ErrorReportingHandler) -> None:
        self._handler = handler

    @property
    def handler(self) -> ErrorReportingHandler:
        return self._handler

    def with_(self, *attrs: Attr, **kwargs: Any) -> "Logger":
        """Return a logger that adds the given attributes to every record."""
        return Logger(self._handler.with_attrs(_to_attrs(attrs, kwargs)))

    def with_group(self, name: str) -> "Logger":
        """Return a logger that nests later attributes under ``name``."""
        return Logger(self._handler.with_group(name))

    def enabled(self, level: int) -> bool:
        return self._handler.enabled(level)

    def log(self, level: int, message: str, *attrs: Attr, **kwargs: Any) -> None:
        """Log a message at an arbitrary level."""
        self._log(level, message, attrs, kwargs)

    def debug(self, message: str, *attrs: Attr, **kwargs: Any) -> None:
        self._log(Level.DEBUG, message, attrs, kwargs)

    def info(self, message: str, *attrs: Attr, **kwargs: Any) -> None:
        self._log(Level.INFO, message, attrs, kwargs)

    def warn(self, message: str, *attrs: Attr, **kwargs: Any) -> None:
        self._log(Level.WARN, message, attrs, kwargs)

    def error(self, message: str, *attrs: Attr, **kwargs: Any) -> None:
        self._log(Level.ERROR, message, attrs, kwargs)

    def _log(
        self,
        level: int,
        message: str,
        attrs: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        if not self._handler.enabled(level):
            return
        # 0 is this method, 1 the public method, 2 its caller
        source = capture_source(2) if self._handler.options.add_source else None
        record = Record(
            time=datetime.now(timezone.utc),
            level=level,
            message=message,
            attrs=_to_attrs(attrs, kwargs),
            source=source,
        )
        self._handler.handle(record)
