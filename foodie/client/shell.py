from __future__ import annotations

import httpx

from .api import FoodieClient
from .auth_store import AuthStatus, AuthStore, TokenStorage
from .config import DEFAULT_CLIENT_CONFIG, ClientConfig
from .favorites_store import FavoritesStore
from .search import RestaurantSearch
from .storage import FileTokenStorage


class ClientShell:
    """
    Owns the API client and every state container, and wires them together.

    Components receive the containers they need from here rather than
    reaching for module-level singletons.
    """

    def __init__(
        self,
        config: ClientConfig = DEFAULT_CLIENT_CONFIG,
        storage: TokenStorage | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api = FoodieClient(config, transport=transport)
        self.auth = AuthStore(self.api, storage or FileTokenStorage(config.token_file))
        self.favorites = FavoritesStore(self.api, self.auth)
        self.search = RestaurantSearch(self.api, debounce=config.search_debounce)

        self.api.on_unauthorized = self.auth.handle_unauthorized
        self.auth.subscribe(self._on_auth_change)

    def _on_auth_change(self, auth: AuthStore) -> None:
        if auth.status is not AuthStatus.authenticated and self.favorite_count:
            self.favorites.clear()

    @property
    def favorite_count(self) -> int:
        return len(self.favorites.favorite_ids)

    async def start(self) -> None:
        """Resume a stored session and fetch its favorites."""
        if await self.auth.restore():
            await self.favorites.load()

    async def login(self, email: str, password: str) -> None:
        await self.auth.login(email, password)
        await self.favorites.load()

    def logout(self) -> None:
        self.auth.logout()

    async def aclose(self) -> None:
        await self.api.aclose()
