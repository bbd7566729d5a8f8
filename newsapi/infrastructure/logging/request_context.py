"""Per-request log context.

The request middleware binds an id for the lifetime of one request; the
filter copies it onto every log record emitted while that request runs.
"""

import logging
from contextvars import ContextVar
from uuid import uuid4

_NO_REQUEST = "-"

_request_id: ContextVar[str] = ContextVar("request_id", default=_NO_REQUEST)


def bind_request_id(request_id: str | None = None) -> str:
    """Bind *request_id* (or a fresh one) to the current task and return it."""
    value = request_id or uuid4().hex
    _request_id.set(value)
    return value


def current_request_id() -> str:
    return _request_id.get()


class RequestIdFilter(logging.Filter):
    """Adds ``record.request_id`` so formatters can reference it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()
        return True
