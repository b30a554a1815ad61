from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol

from .api import ApiError, FoodieClient
from .state import StateContainer

logger = logging.getLogger(__name__)


class TokenStorage(Protocol):
    def load(self) -> str | None: ...
    def save(self, token: str) -> None: ...
    def clear(self) -> None: ...


class AuthStatus(str, Enum):
    anonymous = "anonymous"
    authenticating = "authenticating"
    authenticated = "authenticated"
    error = "error"


class AuthStore(StateContainer):
    """
    Authentication session state.

    anonymous -> authenticating -> authenticated | error on login/register;
    authenticated -> anonymous on logout or when any request gets a 401.
    """

    def __init__(self, api: FoodieClient, storage: TokenStorage) -> None:
        super().__init__()
        self._api = api
        self._storage = storage
        self.status = AuthStatus.anonymous
        self.user: dict[str, Any] | None = None
        self.token: str | None = None
        self.error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.status is AuthStatus.authenticated

    def _set_session(self, user: dict[str, Any] | None, token: str | None) -> None:
        self.user = user
        self.token = token
        self._api.token = token
        if token:
            self._storage.save(token)
        else:
            self._storage.clear()

    async def _authenticate(self, call, fallback_message: str) -> None:
        self.status = AuthStatus.authenticating
        self.error = None
        self._notify()
        try:
            data = await call
        except ApiError as exc:
            self._set_session(None, None)
            self.status = AuthStatus.error
            self.error = exc.message or fallback_message
            self._notify()
            raise
        self._set_session(data["user"], data["token"])
        self.status = AuthStatus.authenticated
        self._notify()

    async def login(self, email: str, password: str) -> None:
        await self._authenticate(self._api.login(email, password), "Login failed")

    async def register(self, name: str, email: str, password: str) -> None:
        await self._authenticate(self._api.register(name, email, password), "Registration failed")

    def logout(self) -> None:
        self._set_session(None, None)
        self.status = AuthStatus.anonymous
        self.error = None
        self._notify()

    def handle_unauthorized(self) -> None:
        """Drop the session after the server rejected our token."""
        if self.token is None and self.status is not AuthStatus.authenticated:
            return
        logger.info("Session rejected by server, signing out")
        self.logout()

    async def restore(self) -> bool:
        """
        Resume a persisted session on start-up.

        Any failure silently reverts to anonymous and discards the stored token.
        """
        token = self._storage.load()
        if not token:
            return False
        self._api.token = token
        self.token = token
        try:
            user = await self._api.get_me()
        except ApiError as exc:
            logger.info("Could not restore session: %s", exc.message)
            self.logout()
            return False
        self.user = user
        self.status = AuthStatus.authenticated
        self._notify()
        return True

    async def update_profile(self, **changes: Any) -> None:
        self.error = None
        try:
            self.user = await self._api.update_profile(**changes)
        except ApiError as exc:
            self.error = exc.message or "Profile update failed"
            self._notify()
            raise
        self._notify()

    def clear_error(self) -> None:
        self.error = None
        self._notify()
