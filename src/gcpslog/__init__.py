"""gcpslog: Cloud Logging structured documents with Error Reporting support."""

from gcpslog.adapters.logging import CloudLoggingHandler, ContextProvider
from gcpslog.adapters.sinks import InMemorySink, StreamSink
from gcpslog.core.compiler import HandlerOptions, ReplaceAttr, compile_record
from gcpslog.core.errors import (
    ERROR_KEY,
    ERROR_REPORT_TYPE_KEY,
    ERROR_REPORT_TYPE_VALUE,
    REPORT_LOCATION_KEY,
    TracebackError,
    extract,
    new_report_location,
)
from gcpslog.core.models import (
    Attr,
    GroupValue,
    Level,
    Record,
    ReportLocation,
    SourceLocation,
    group,
)
from gcpslog.core.ports import LogValuer, RecordSinkPort, ReportLocator, StackTracer
from gcpslog.core.severity import replace_attr, severity_from_level
from gcpslog.handler import ErrorReportingHandler
from gcpslog.logger import Logger, capture_source

__all__ = [
    "ERROR_KEY",
    "ERROR_REPORT_TYPE_KEY",
    "ERROR_REPORT_TYPE_VALUE",
    "REPORT_LOCATION_KEY",
    "Attr",
    "CloudLoggingHandler",
    "ContextProvider",
    "ErrorReportingHandler",
    "GroupValue",
    "HandlerOptions",
    "InMemorySink",
    "Level",
    "LogValuer",
    "Logger",
    "Record",
    "RecordSinkPort",
    "ReplaceAttr",
    "ReportLocation",
    "ReportLocator",
    "SourceLocation",
    "StackTracer",
    "StreamSink",
    "TracebackError",
    "capture_source",
    "compile_record",
    "extract",
    "group",
    "new_report_location",
    "replace_attr",
    "severity_from_level",
]
