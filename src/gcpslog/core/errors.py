"""Error Reporting support for the ``error`` attribute.

An ``error`` attribute at the root of a record turns the log entry into a
Cloud Error Reporting event. Its value may be a string, an exception, or an
exception that also provides a stack trace and/or a report location.
See https://cloud.google.com/error-reporting/docs/formatting-error-messages
"""

import sys
import traceback
from types import FrameType
from typing import Any

from gcpslog.core.models import ReportLocation
from gcpslog.core.ports import LogValuer, ReportLocator, StackTracer
from gcpslog.core.values import expand

# Key by which errors are retrieved from record attributes
ERROR_KEY = "error"

ERROR_REPORT_TYPE_KEY = "@type"
ERROR_REPORT_TYPE_VALUE = (
    "type.googleapis.com/google.devtools.clouderrorreporting.v1beta1.ReportedErrorEvent"
)
REPORT_LOCATION_KEY = "reportLocation"


def new_report_location(skip: int = 0) -> ReportLocation | None:
    """Build a report location from the current call stack.

    The result can be stored and returned from an exception's
    ``report_location()``.

    Args:
        skip: Number of stack frames to skip. 0 identifies the caller of
            new_report_location.

    Returns:
        The location, or None if the stack is not that deep.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return None
    code = frame.f_code
    return ReportLocation(
        file_path=code.co_filename,
        line_number=frame.f_lineno,
        function_name=frame_function_name(frame),
    )


def frame_function_name(frame: FrameType) -> str:
    """Return the module-qualified name of the function running in a frame."""
    name = frame.f_code.co_qualname
    module = frame.f_globals.get("__name__")
    return f"{module}.{name}" if module else name


class TracebackError(Exception):
    """Wraps a raised exception for error reporting.

    The stack trace is the exception's formatted traceback and the report
    location is the innermost frame of that traceback. ``str()`` is the
    wrapped exception's text.
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error

    def __str__(self) -> str:
        return str(self.error)

    def stack_trace(self) -> str:
        return "".join(traceback.format_exception(self.error))

    def report_location(self) -> ReportLocation | None:
        tb = self.error.__traceback__
        if tb is None:
            return None
        while tb.tb_next is not None:
            tb = tb.tb_next
        frame = tb.tb_frame
        return ReportLocation(
            file_path=frame.f_code.co_filename,
            line_number=tb.tb_lineno,
            function_name=frame_function_name(frame),
        )


def _stack_text(error: StackTracer) -> str:
    stack = error.stack_trace()
    if isinstance(stack, bytes):
        return stack.decode("utf-8", errors="replace")
    return str(stack)


def extract(value: Any) -> tuple[str, ReportLocation | None]:
    """Derive the error-report message and location of an error value.

    Capabilities are checked in a fixed priority order: stack trace and
    report location, stack trace only, report location only, plain
    exception, string. Anything else yields a diagnostic message and a
    location pointing here, so the entry can still be found.

    Returns:
        ``(message, location)``; location is None when none was derived.
    """
    if isinstance(value, BaseException):
        has_stack = isinstance(value, StackTracer)
        has_location = isinstance(value, ReportLocator)
        if has_stack and has_location:
            return _stack_text(value), value.report_location()
        if has_stack:
            return _stack_text(value), None
        if has_location:
            return str(value), value.report_location()
        return str(value), None
    if isinstance(value, str):
        return value, None
    return (
        f"!!! can't handle error report for type {type(value).__qualname__} !!!",
        new_report_location(0),
    )


def stored_value(value: Any) -> Any:
    """Return the representation of an error value under the error key.

    LogValuers are expanded, exceptions become their text, anything else
    is kept for the encoder.
    """
    if isinstance(value, LogValuer):
        return expand(value)
    if isinstance(value, BaseException):
        return str(value)
    return value
