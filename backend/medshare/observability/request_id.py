"""Request ID correlation.

Each HTTP request gets an id stored in a context variable so that every log
line emitted while handling it can be tied back to the request.
"""

import uuid
from contextvars import ContextVar, Token
from typing import Optional

NO_REQUEST_ID = "no-request-id"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def new_request_id() -> str:
    """Return a fresh UUID4 request id."""
    return uuid.uuid4().hex


def current_request_id() -> str:
    """Return the id bound to the current context, or ``NO_REQUEST_ID``."""
    return request_id_var.get() or NO_REQUEST_ID


def bind_request_id(request_id: str) -> Token:
    """Bind ``request_id`` to the current context.

    Returns:
        Token to hand back to ``unbind_request_id`` when the request ends
    """
    return request_id_var.set(request_id)


def unbind_request_id(token: Token) -> None:
    request_id_var.reset(token)
