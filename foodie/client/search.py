from __future__ import annotations

import asyncio
import logging
from typing import Any

from .api import ApiError, FoodieClient
from .config import DEFAULT_CLIENT_CONFIG
from .state import StateContainer

logger = logging.getLogger(__name__)


class RestaurantSearch(StateContainer):
    """
    Debounced restaurant search.

    Each call waits ``debounce`` seconds and gives up if a newer call arrived
    meanwhile. Responses are numbered by request, so one that comes back after
    a newer request was issued is dropped instead of overwriting newer results.
    """

    def __init__(self, api: FoodieClient, debounce: float = DEFAULT_CLIENT_CONFIG.search_debounce) -> None:
        super().__init__()
        self._api = api
        self._debounce = debounce
        self._sequence = 0
        self.params: dict[str, Any] = {}
        self.restaurants: list[dict[str, Any]] = []
        self.pagination: dict[str, int] | None = None
        self.is_loading = False
        self.error: str | None = None

    @property
    def sequence(self) -> int:
        return self._sequence

    def _is_current(self, sequence: int) -> bool:
        return sequence == self._sequence

    async def search(self, **params: Any) -> bool:
        """Run a search; returns False when it was superseded by a newer one."""
        self._sequence += 1
        sequence = self._sequence
        self.params = params

        if self._debounce > 0:
            await asyncio.sleep(self._debounce)
            if not self._is_current(sequence):
                return False

        self.is_loading = True
        self._notify()
        try:
            data = await self._api.get_restaurants(**params)
        except ApiError as exc:
            if not self._is_current(sequence):
                return False
            self.error = exc.message or "Failed to load restaurants"
            self.is_loading = False
            self._notify()
            return False

        if not self._is_current(sequence):
            logger.debug("Dropping stale search response #%d (latest #%d)", sequence, self._sequence)
            return False

        self.restaurants = data.get("restaurants", [])
        self.pagination = data.get("pagination")
        self.error = None
        self.is_loading = False
        self._notify()
        return True
