# jobly/auth/deps.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobly.auth.jwt import decode_access_token
from jobly.core import ErrorReason
from jobly.core.errors import unauthorized
from jobly.core.request_context import set_context

bearer = HTTPBearer(auto_error=False)


async def get_token_payload(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> dict | None:
    """Decoded token when one is sent, None for anonymous requests."""
    if not creds or creds.scheme.lower() != "bearer" or not creds.credentials:
        return None

    payload = decode_access_token(creds.credentials)
    set_context(username=payload.get("sub"))
    return payload


async def require_admin_token(payload: dict | None = Depends(get_token_payload)) -> dict:
    if payload is None:
        raise unauthorized("Missing Authorization: Bearer token")

    # Non-admins get 401 too, not 403
    if payload.get("is_admin") is not True:
        raise unauthorized("Admin privileges required", reason=ErrorReason.AUTH_FORBIDDEN)

    return payload
