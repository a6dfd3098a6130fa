"""
Request context helpers.

We keep a small context (request_id, username) in ContextVars.
The HTTP middleware and the auth dependency set these values so every log
line emitted while serving a request can be correlated.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_username: ContextVar[Optional[str]] = ContextVar("username", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    username: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if username is not None:
        _username.set(username)


def clear_context() -> None:
    _request_id.set(None)
    _username.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    user = _username.get()

    if rid:
        ctx["request_id"] = rid
    if user:
        ctx["username"] = user
    return ctx
