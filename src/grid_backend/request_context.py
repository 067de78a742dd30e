"""Per-request correlation IDs for API logging."""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

REQUEST_ID_HEADER = "X-Request-Id"

_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def generate_request_id() -> str:
    """Generate a new UUIDv4 request ID."""
    return str(uuid.uuid4())


def get_request_id() -> str | None:
    return _request_id_var.get()


def set_request_id(request_id: str) -> Token:
    """Bind ``request_id`` to the current context; returns a reset token."""
    return _request_id_var.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id_var.reset(token)


__all__ = [
    "REQUEST_ID_HEADER",
    "generate_request_id",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
]
