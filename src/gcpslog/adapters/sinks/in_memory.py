"""In-memory sink for compiled log documents."""

import json
import threading
from typing import Any

from gcpslog.core.encoding.jsonl import encode_record


class InMemorySink:
    """In-memory implementation of RecordSinkPort.

    Keeps every written document as the JSON the encoder produced, decoded
    back into plain dicts. Suitable for tests and for inspecting what a
    handler would have written.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._lock = threading.Lock()

    def write(self, document: dict[str, Any]) -> None:
        """Encode a document and keep the line."""
        with self._lock:
            self._lines.append(encode_record(document))

    @property
    def lines(self) -> list[str]:
        """Encoded lines, in write order."""
        with self._lock:
            return list(self._lines)

    def read(self) -> list[dict[str, Any]]:
        """Return the written documents as decoded JSON, in write order."""
        return [json.loads(line) for line in self.lines]

    def clear(self) -> None:
        """Forget all written documents."""
        with self._lock:
            self._lines.clear()
