from __future__ import annotations

import logging
from typing import Any

from .api import ApiError, FoodieClient
from .auth_store import AuthStore
from .state import StateContainer

logger = logging.getLogger(__name__)


class NotAuthenticatedError(Exception):
    pass


class FavoritesStore(StateContainer):
    """
    Local mirror of the user's favorites.

    The list and the membership set only change after the server confirmed
    the mutation. ``toggle`` ignores a restaurant whose previous toggle is
    still in flight.
    """

    def __init__(self, api: FoodieClient, auth: AuthStore) -> None:
        super().__init__()
        self._api = api
        self._auth = auth
        self.favorites: list[dict[str, Any]] = []
        self.favorite_ids: set[str] = set()
        self.is_loading = False
        self.error: str | None = None
        self._pending: set[str] = set()

    def is_favorite(self, restaurant_id: str) -> bool:
        return restaurant_id in self.favorite_ids

    def is_pending(self, restaurant_id: str) -> bool:
        return restaurant_id in self._pending

    def _require_auth(self, action: str) -> None:
        if not self._auth.is_authenticated:
            raise NotAuthenticatedError(f"You must be logged in to {action} favorites")

    async def load(self) -> None:
        if not self._auth.is_authenticated:
            return
        self.is_loading = True
        self.error = None
        self._notify()
        try:
            favorites = await self._api.get_favorites()
        except ApiError as exc:
            self.error = exc.message or "Failed to load favorites"
        else:
            self.favorites = favorites
            self.favorite_ids = {r["id"] for r in favorites}
        self.is_loading = False
        self._notify()

    async def add(self, restaurant: dict[str, Any]) -> None:
        self._require_auth("add")
        self.error = None
        try:
            await self._api.add_favorite(restaurant["id"])
        except ApiError as exc:
            # 409: the server already has it, our copy was stale.
            if exc.status_code != 409:
                self.error = exc.message or "Failed to add to favorites"
                self._notify()
                raise
            logger.info("Restaurant %s was already a favorite on the server", restaurant["id"])
        if restaurant["id"] not in self.favorite_ids:
            self.favorites = [*self.favorites, restaurant]
        self.favorite_ids = self.favorite_ids | {restaurant["id"]}
        self._notify()

    async def remove(self, restaurant_id: str) -> None:
        self._require_auth("remove")
        self.error = None
        try:
            await self._api.remove_favorite(restaurant_id)
        except ApiError as exc:
            self.error = exc.message or "Failed to remove from favorites"
            self._notify()
            raise
        self.favorites = [r for r in self.favorites if r["id"] != restaurant_id]
        self.favorite_ids = self.favorite_ids - {restaurant_id}
        self._notify()

    async def toggle(self, restaurant: dict[str, Any]) -> bool:
        """Flip membership of ``restaurant``; returns whether it is a favorite afterwards."""
        restaurant_id = restaurant["id"]
        if restaurant_id in self._pending:
            logger.debug("Toggle for %s already in flight, ignoring", restaurant_id)
            return self.is_favorite(restaurant_id)

        self._pending.add(restaurant_id)
        self._notify()
        try:
            if self.is_favorite(restaurant_id):
                await self.remove(restaurant_id)
            else:
                await self.add(restaurant)
        finally:
            self._pending.discard(restaurant_id)
            self._notify()
        return self.is_favorite(restaurant_id)

    def clear(self) -> None:
        self.favorites = []
        self.favorite_ids = set()
        self.error = None
        self._notify()
