"""Request id shared by the server, the log records and outgoing aslan calls.

The server binds the id of the inbound call with :func:`request_id_scope`;
the log filter and :class:`aslan.client.HttpClient` read it back from
`current_request_id` and send it on under `REQUEST_ID_HEADER`.
"""

from __future__ import annotations

import contextvars
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

REQUEST_ID_HEADER = "X-Request-Id"

current_request_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "current_request_id", default=None
)


@contextmanager
def request_id_scope(request_id: Optional[str] = None) -> Iterator[str]:
    """Bind ``request_id`` (or a fresh UUID4) for the duration of the block."""
    value = request_id or str(uuid.uuid4())
    token = current_request_id.set(value)
    try:
        yield value
    finally:
        current_request_id.reset(token)
