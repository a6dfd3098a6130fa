from pydantic import BaseModel

from jobly.schemas.base import CamelModel


class TokenRequest(BaseModel):
    username: str
    password: str


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_in_minutes: int
