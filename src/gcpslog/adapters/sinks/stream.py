"""Stream sink writing one JSON line per document."""

import sys
import threading
from typing import Any, TextIO

from gcpslog.core.encoding.jsonl import encode_record


class StreamSink:
    """RecordSinkPort writing JSON lines to a text stream.

    Encoding and writing happen under one lock, so records from concurrent
    threads never interleave mid-line. Cloud Run and GKE pick such lines up
    from stdout/stderr as structured log entries.

    Args:
        stream: Text stream to write to. Defaults to ``sys.stderr``,
            resolved at write time.
        flush: Flush the stream after every record.
    """

    def __init__(self, stream: TextIO | None = None, flush: bool = True) -> None:
        self._stream = stream
        self._flush = flush
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def write(self, document: dict[str, Any]) -> None:
        """Encode a document and write it as one line."""
        with self._lock:
            stream = self.stream
            stream.write(encode_record(document))
            if self._flush:
                stream.flush()
