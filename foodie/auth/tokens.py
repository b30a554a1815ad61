from __future__ import annotations

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from ..config import DEFAULT_CONFIG, AppConfig
from ..errors import AuthenticationError

_SALT = "foodie-auth-token"


def _serializer(config: AppConfig) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(config.secret_key, salt=_SALT)


def issue_token(user_id: str, config: AppConfig = DEFAULT_CONFIG) -> str:
    """Sign a bearer token carrying ``user_id`` and its issue time."""
    return _serializer(config).dumps({"id": user_id})


def verify_token(token: str, config: AppConfig = DEFAULT_CONFIG) -> str:
    """Return the user id inside ``token``; raise if it is forged or older than the max age."""
    try:
        payload = _serializer(config).loads(token, max_age=config.token_max_age)
    except SignatureExpired:
        raise AuthenticationError("Token expired") from None
    except BadSignature:
        raise AuthenticationError("Invalid token") from None
    user_id = payload.get("id") if isinstance(payload, dict) else None
    if not user_id:
        raise AuthenticationError("Invalid token")
    return user_id
