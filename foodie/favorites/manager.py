from __future__ import annotations

import logging

from ..auth.users import UserStore
from ..errors import NotFoundError
from ..restaurants.data_store import RestaurantStore
from ..restaurants.models import Restaurant

logger = logging.getLogger(__name__)


class FavoritesManager:
    """Add, remove and resolve the restaurants on a user's favorites list."""

    def __init__(self, users: UserStore, restaurants: RestaurantStore) -> None:
        self._users = users
        self._restaurants = restaurants

    def add(self, user_id: str, restaurant_id: str) -> list[str]:
        """Append ``restaurant_id``; raises ``ConflictError`` if it is already there."""
        if self._restaurants.get(restaurant_id) is None:
            raise NotFoundError("Restaurant not found")
        favorites = self._users.push_favorite(user_id, restaurant_id)
        logger.info("User %s favorited restaurant %s", user_id, restaurant_id)
        return favorites

    def remove(self, user_id: str, restaurant_id: str) -> list[str]:
        """Drop ``restaurant_id`` if present. Removing an absent id is a no-op."""
        return self._users.pull_favorite(user_id, restaurant_id)

    def list(self, user_id: str) -> list[Restaurant]:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return self._restaurants.get_many(user.favorites)
