"""JSON lines encoder for compiled log documents."""

import dataclasses
import json
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from gcpslog.core.models import GroupValue, ReportLocation, SourceLocation
from gcpslog.core.ports import LogValuer
from gcpslog.core.values import expand


def _default(value: Any) -> Any:
    """Fallback representation for values json can't serialize natively."""
    if isinstance(value, (SourceLocation, ReportLocation)):
        return value.to_dict()
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (GroupValue, LogValuer)):
        return expand(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (set, frozenset)):
        return list(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return str(value)


def encode_record(document: dict[str, Any]) -> str:
    """Encode one document as a single JSON line.

    Args:
        document: A compiled log document.

    Returns:
        Compact JSON object terminated by a newline.
    """
    return json.dumps(document, default=_default, separators=(",", ":")) + "\n"


def encode_records(documents: Iterable[dict[str, Any]]) -> str:
    """Encode documents to newline-delimited JSON.

    Returns:
        One JSON object per line, empty string if there are no documents.
    """
    return "".join(encode_record(document) for document in documents)
