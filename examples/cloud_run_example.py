"""Example service logging Cloud Logging documents to stderr.

Run with:
    python examples/cloud_run_example.py

On Cloud Run or GKE every line becomes a structured log entry; the failed
payment also shows up in Error Reporting with its traceback.
"""

import logging

from gcpslog import (
    CloudLoggingHandler,
    ErrorReportingHandler,
    HandlerOptions,
    Level,
    Logger,
    StreamSink,
)

handler = ErrorReportingHandler(
    StreamSink(),
    HandlerOptions(level=Level.DEBUG, add_source=True),
)
logger = Logger(handler).with_(service="checkout", version="1.4.0")

# Route the standard logging module through the same handler
logging.basicConfig(level=logging.INFO, handlers=[CloudLoggingHandler(handler)])


class PaymentError(Exception):
    pass


def charge(order_id: int) -> None:
    raise PaymentError(f"card declined for order {order_id}")


def main() -> None:
    request_logger = logger.with_group("request").with_(id="req-7", path="/pay")
    request_logger.debug("validating basket", items=3)
    request_logger.info("charging card")

    try:
        charge(42)
    except PaymentError as exc:
        # The message becomes the exception text, "error" turns this into an event
        logger.error("payment failed", error=exc, order_id=42)

    try:
        charge(43)
    except PaymentError:
        # exc_info carries the traceback, reported as the stack trace
        logging.getLogger("checkout").exception(
            "payment failed", extra={"order_id": 43}
        )


if __name__ == "__main__":
    main()
