"""
Logging setup for the HostelCare backend.

Configures the root logger once with a single stream handler. Modules obtain
their own logger with ``logging.getLogger(__name__)``.
"""
import logging
import sys
import time

from fastapi import Request

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Attach a stdout handler to the root logger (idempotent)."""
    global _configured

    root = logging.getLogger()
    root.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # uvicorn's access log duplicates the request line below
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    _configured = True


request_logger = logging.getLogger("hostelcare.http")


async def log_requests(request: Request, call_next):
    """HTTP middleware: one log line per request with status and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    request_logger.info(
        "HTTP %s %s - %s (%.2fms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response
