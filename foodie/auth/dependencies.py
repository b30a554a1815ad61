from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..errors import AuthenticationError, PermissionDeniedError
from .tokens import verify_token
from .users import UserRecord, get_user_store

_bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> UserRecord | None:
    """Return the user named by the bearer token, or ``None`` without one."""
    if credentials is None:
        return None
    user = get_user_store().get(verify_token(credentials.credentials))
    if user is None:
        raise AuthenticationError("User no longer exists")
    return user


def require_user(user: UserRecord | None = Depends(get_current_user)) -> UserRecord:
    """Raise 401 if no valid bearer token was sent."""
    if user is None:
        raise AuthenticationError("Not authorized, no token")
    return user


def require_admin(user: UserRecord = Depends(require_user)) -> UserRecord:
    """Raise 401 if not logged in, 403 if not admin."""
    if user.role != "admin":
        raise PermissionDeniedError("Admin access required")
    return user
