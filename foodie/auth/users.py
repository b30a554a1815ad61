from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any

import bcrypt
from pydantic import BaseModel, Field

from ..config import DEFAULT_CONFIG, AppConfig
from ..errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class UserRecord(BaseModel):
    id: str
    name: str
    email: str
    password_hash: str
    avatar: str | None = None
    role: str = "user"
    favorites: list[str] = Field(default_factory=list)
    created_at: datetime

    def public(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email, "avatar": self.avatar}


def _hash_password(plain: str, rounds: int) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


class UserStore:
    """
    User documents keyed by id, with a unique email index.

    Every write happens under one lock, so the email check and the favorites
    membership check are atomic with the update that follows them.
    """

    def __init__(self, config: AppConfig = DEFAULT_CONFIG) -> None:
        self._config = config
        self._users: dict[str, UserRecord] = {}
        self._by_email: dict[str, str] = {}
        self._lock = threading.Lock()

    def create(self, name: str, email: str, password: str, role: str = "user") -> UserRecord:
        email = email.strip().lower()
        password_hash = _hash_password(password, self._config.bcrypt_rounds)
        with self._lock:
            if email in self._by_email:
                raise ConflictError("User already exists with this email")
            user = UserRecord(
                id=uuid.uuid4().hex[:24],
                name=name,
                email=email,
                password_hash=password_hash,
                role=role,
                created_at=datetime.now(timezone.utc),
            )
            self._users[user.id] = user
            self._by_email[email] = user.id
        return user

    def authenticate(self, email: str, password: str) -> UserRecord | None:
        """Verify credentials. Returns the user or ``None``."""
        user_id = self._by_email.get(email.strip().lower())
        record = self._users.get(user_id) if user_id else None
        if record and _verify_password(password, record.password_hash):
            return record
        return None

    def get(self, user_id: str) -> UserRecord | None:
        return self._users.get(user_id)

    def _require(self, user_id: str) -> UserRecord:
        record = self._users.get(user_id)
        if record is None:
            raise NotFoundError("User not found")
        return record

    def update_profile(self, user_id: str, changes: dict[str, Any]) -> UserRecord:
        allowed = {k: v for k, v in changes.items() if k == "avatar" or (k == "name" and v)}
        with self._lock:
            updated = self._require(user_id).model_copy(update=allowed)
            self._users[user_id] = updated
        return updated

    def push_favorite(self, user_id: str, restaurant_id: str) -> list[str]:
        with self._lock:
            record = self._require(user_id)
            if restaurant_id in record.favorites:
                raise ConflictError("Restaurant already in favorites")
            record.favorites.append(restaurant_id)
            return list(record.favorites)

    def pull_favorite(self, user_id: str, restaurant_id: str) -> list[str]:
        with self._lock:
            record = self._require(user_id)
            record.favorites = [f for f in record.favorites if f != restaurant_id]
            return list(record.favorites)

    def clear(self) -> None:
        with self._lock:
            self._users.clear()
            self._by_email.clear()


_store: UserStore | None = None


def _build_store(config: AppConfig) -> UserStore:
    store = UserStore(config)
    if config.admin_email and config.admin_password:
        store.create("Administrator", config.admin_email, config.admin_password, role="admin")
        logger.info("Bootstrapped admin account %s", config.admin_email)
    return store


def get_user_store(config: AppConfig = DEFAULT_CONFIG) -> UserStore:
    """Return the process-wide user store, building it on first call."""
    global _store
    if _store is None:
        _store = _build_store(config)
    return _store


def reset_user_store(config: AppConfig = DEFAULT_CONFIG) -> UserStore:
    global _store
    _store = _build_store(config)
    return _store
