# jobly/routers/auth.py
import logging
import secrets

from fastapi import APIRouter

from jobly.auth.jwt import create_access_token
from jobly.core import ErrorReason
from jobly.core.config import settings
from jobly.core.errors import unauthorized
from jobly.schemas.auth import TokenRequest, TokenResponse

logger = logging.getLogger("jobly.auth")

router = APIRouter(prefix="/auth", tags=["auth"])


def _check_credentials(username: str, password: str) -> bool:
    if not settings.ADMIN_PASSWORD:
        return False
    user_ok = secrets.compare_digest(username.encode(), settings.ADMIN_USERNAME.encode())
    password_ok = secrets.compare_digest(password.encode(), settings.ADMIN_PASSWORD.encode())
    return user_ok and password_ok


@router.post("/token", response_model=TokenResponse)
def login(req: TokenRequest) -> TokenResponse:
    if not _check_credentials(req.username, req.password):
        logger.warning("auth.login_failed", extra={"username": req.username})
        raise unauthorized("Invalid credentials", reason=ErrorReason.AUTH_INVALID)

    token = create_access_token(subject=settings.ADMIN_USERNAME, is_admin=True)
    return TokenResponse(
        access_token=token,
        expires_in_minutes=settings.JWT_ACCESS_TOKEN_EXPIRES_MINUTES,
    )
