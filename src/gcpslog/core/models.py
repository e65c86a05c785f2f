"""Core domain models for log records."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any


class Level(IntEnum):
    """Log levels.

    Any other number is a valid custom level; levels are ordered by value.
    """

    DEBUG = -4
    INFO = 0
    WARN = 4
    ERROR = 8


@dataclass(frozen=True)
class Attr:
    """A key/value pair attached to a log record.

    Attributes:
        key: Attribute name. An empty key drops the attribute, except for
            group values, which are inlined into the enclosing level.
        value: A primitive, a GroupValue, an object implementing
            ``log_value()``, or any other object left to the encoder.
    """

    key: str
    value: Any


@dataclass(frozen=True)
class GroupValue:
    """An ordered group of attributes, rendered as a nested object."""

    attrs: tuple[Attr, ...] = ()


def group(key: str, *attrs: Attr) -> Attr:
    """Create an attribute whose value is a group of attributes."""
    return Attr(key, GroupValue(tuple(attrs)))


@dataclass(frozen=True)
class SourceLocation:
    """Call site of a log statement.

    Serialized as ``{"function", "file", "line"}``.
    """

    function: str
    file: str
    line: int

    def to_dict(self) -> dict[str, str | int]:
        return {"function": self.function, "file": self.file, "line": self.line}


@dataclass(frozen=True)
class ReportLocation:
    """Origin of an error in the Error Reporting schema.

    Serialized as ``{"filePath", "lineNumber", "functionName"}``.
    """

    file_path: str
    line_number: int
    function_name: str

    def to_dict(self) -> dict[str, str | int]:
        return {
            "filePath": self.file_path,
            "lineNumber": self.line_number,
            "functionName": self.function_name,
        }


@dataclass(frozen=True)
class Record:
    """A single logging call as handed from the facade to a handler.

    Attributes:
        time: Time of the call. None omits the time key.
        level: Level of the call (Level or a custom number).
        message: The log message.
        attrs: Call-site attributes, in order.
        source: Call site, if it was captured.
    """

    time: datetime | None
    level: int | float
    message: str
    attrs: tuple[Attr, ...] = field(default_factory=tuple)
    source: SourceLocation | None = None
