"""Step definitions for error_reporting.feature."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from gcpslog.adapters.sinks.in_memory import InMemorySink
from gcpslog.core.compiler import HandlerOptions
from gcpslog.core.models import Attr, Level
from gcpslog.handler import ErrorReportingHandler
from gcpslog.logger import Logger
from tests.mocks import (
    Foo,
    MockReportLocationError,
    MockStackAndReport,
    MockStackTraceError,
)

_ERRORS = {
    "stack-and-location": MockStackAndReport,
    "report-location": MockReportLocationError,
    "stack-trace": MockStackTraceError,
}


@dataclass
class ErrorReportingContext:
    """Shared state between steps in an error reporting scenario."""

    sink: InMemorySink = field(default_factory=InMemorySink)
    options: HandlerOptions = field(default_factory=HandlerOptions)
    bindings: list[tuple[str, Any]] = field(default_factory=list)

    def logger(self) -> Logger:
        logger = Logger(ErrorReportingHandler(self.sink, self.options))
        for kind, value in self.bindings:
            if kind == "group":
                logger = logger.with_group(value)
            else:
                logger = logger.with_(value)
        return logger

    def document(self) -> dict[str, Any]:
        documents = self.sink.read()
        assert len(documents) == 1, f"expected one document, got {documents}"
        return documents[0]


def _level(name: str) -> int:
    return Level[name] if name in Level.__members__ else int(name)


def _field(document: dict[str, Any], path: str) -> Any:
    value: Any = document
    for key in path.split("."):
        value = value[key]
    return value


@pytest.fixture
def ctx() -> ErrorReportingContext:
    """Fresh scenario context for each test."""
    return ErrorReportingContext()


# === Given ===
@given("a handler writing to an in-memory sink")
def step_handler(ctx: ErrorReportingContext) -> None:
    ctx.sink = InMemorySink()


@given(parsers.parse("the threshold is {level}"))
def step_threshold(ctx: ErrorReportingContext, level: str) -> None:
    ctx.options = HandlerOptions(level=_level(level))


@given(parsers.parse('the logger is grouped under "{name}"'))
def step_grouped(ctx: ErrorReportingContext, name: str) -> None:
    ctx.bindings.append(("group", name))


@given(parsers.parse('the logger is bound with error "{error}"'))
def step_bound_error(ctx: ErrorReportingContext, error: str) -> None:
    ctx.bindings.append(("attr", Attr("error", error)))


# === When ===
@when(parsers.parse('a record at {level} with message "{message}" is logged'))
def step_log(ctx: ErrorReportingContext, level: str, message: str) -> None:
    ctx.logger().log(_level(level), message)


@when(
    parsers.parse(
        'a record at {level} with message "{message}" is logged with error "{error}"'
    )
)
def step_log_error(
    ctx: ErrorReportingContext, level: str, message: str, error: str
) -> None:
    ctx.logger().log(_level(level), message, error=error)


@when(
    parsers.parse(
        'a record at {level} with message "{message}" is logged with a {kind} error'
    )
)
def step_log_error_kind(
    ctx: ErrorReportingContext, level: str, message: str, kind: str
) -> None:
    ctx.logger().log(_level(level), message, error=_ERRORS[kind]())


@when(
    parsers.parse(
        'a record at {level} with message "{message}" is logged '
        'with foo bar "{bar}" and baz {baz:d}'
    )
)
def step_log_foo(
    ctx: ErrorReportingContext, level: str, message: str, bar: str, baz: int
) -> None:
    ctx.logger().log(_level(level), message, foo=Foo(bar=bar, baz=baz))


# === Then ===
@then("nothing should be written")
def step_nothing_written(ctx: ErrorReportingContext) -> None:
    assert ctx.sink.lines == []


@then("the document should have:")
def step_document_has(ctx: ErrorReportingContext, datatable: list[list[str]]) -> None:
    document = ctx.document()
    expected = {row[0]: row[1] for row in datatable[1:]}
    for key, value in expected.items():
        assert document.get(key) == value, f"{key}: {document.get(key)!r} != {value!r}"


@then(parsers.parse('the document should not have "{key}"'))
def step_document_lacks(ctx: ErrorReportingContext, key: str) -> None:
    assert key not in ctx.document()


@then(parsers.parse('the document field "{path}" should be "{value}"'))
def step_field_text(ctx: ErrorReportingContext, path: str, value: str) -> None:
    assert _field(ctx.document(), path) == value


@then(parsers.parse('the document field "{path}" should be {value:d}'))
def step_field_int(ctx: ErrorReportingContext, path: str, value: int) -> None:
    assert _field(ctx.document(), path) == value


@then(
    parsers.parse(
        'the report location should be "{file}" line {line:d} in "{function}"'
    )
)
def step_report_location(
    ctx: ErrorReportingContext, file: str, line: int, function: str
) -> None:
    assert ctx.document()["reportLocation"] == {
        "filePath": file,
        "lineNumber": line,
        "functionName": function,
    }
