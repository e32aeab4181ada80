# talent96/auth/deps.py
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from talent96.auth.jwt import decode_access_token
from talent96.core.errors import ForbiddenError, UnauthorizedError

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    id: int
    role: str


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUser:
    """Authenticate the bearer token on protected routes."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("No token, authorization denied")
    try:
        claims = decode_access_token(credentials.credentials)
        return CurrentUser(id=int(claims["id"]), role=str(claims["role"]))
    except (JWTError, TypeError, ValueError):
        raise ForbiddenError("Invalid token")
