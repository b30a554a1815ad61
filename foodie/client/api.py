from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from .config import DEFAULT_CLIENT_CONFIG, ClientConfig

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request failed: either the server said ``success: false`` or the call never completed."""

    def __init__(self, status_code: int, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or []


def _query_params(params: dict[str, Any]) -> dict[str, str]:
    """Drop empty values and join lists with commas."""
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value == "" or value == []:
            continue
        if isinstance(value, (list, tuple)):
            query[key] = ",".join(str(v) for v in value)
        else:
            query[key] = str(value)
    return query


class FoodieClient:
    """
    Async client for the Foodie Finder HTTP API.

    Sends the current ``token`` as a bearer credential, unwraps the
    ``{success, message, data}`` envelope and raises ``ApiError`` on failure.
    ``on_unauthorized`` is called for every 401 response.
    """

    def __init__(
        self,
        config: ClientConfig = DEFAULT_CLIENT_CONFIG,
        transport: httpx.AsyncBaseTransport | None = None,
        on_unauthorized: Callable[[], None] | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(base_url=config.base_url, timeout=config.timeout, transport=transport)
        self.token: str | None = None
        self.on_unauthorized = on_unauthorized

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            response = await self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(0, "Network error") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code == 401 and self.on_unauthorized is not None:
            self.on_unauthorized()

        if response.is_error or not body.get("success", False):
            message = body.get("message") or f"Request failed with status {response.status_code}"
            raise ApiError(response.status_code, message, body.get("errors"))

        return body.get("data") or {}

    # ── Auth ──

    async def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        return await self._request("POST", "/auth/register", json={"name": name, "email": email, "password": password})

    async def login(self, email: str, password: str) -> dict[str, Any]:
        return await self._request("POST", "/auth/login", json={"email": email, "password": password})

    async def get_me(self) -> dict[str, Any]:
        return (await self._request("GET", "/auth/me"))["user"]

    async def update_profile(self, **changes: Any) -> dict[str, Any]:
        return (await self._request("PUT", "/auth/profile", json=changes))["user"]

    # ── Restaurants ──

    async def get_restaurants(self, **params: Any) -> dict[str, Any]:
        return await self._request("GET", "/restaurants", params=_query_params(params))

    async def get_restaurant(self, restaurant_id: str) -> dict[str, Any]:
        return (await self._request("GET", f"/restaurants/{restaurant_id}"))["restaurant"]

    async def search_nearby(self, latitude: float, longitude: float, radius: float | None = None) -> list[dict]:
        params = _query_params({"latitude": latitude, "longitude": longitude, "radius": radius})
        return (await self._request("GET", "/restaurants/nearby", params=params))["restaurants"]

    async def get_filter_options(self) -> dict[str, Any]:
        return await self._request("GET", "/restaurants/filter-options")

    # ── Favorites ──

    async def get_favorites(self) -> list[dict]:
        return (await self._request("GET", "/users/favorites"))["favorites"]

    async def add_favorite(self, restaurant_id: str) -> list[str]:
        return (await self._request("POST", f"/users/favorites/{restaurant_id}"))["favorites"]

    async def remove_favorite(self, restaurant_id: str) -> list[str]:
        return (await self._request("DELETE", f"/users/favorites/{restaurant_id}"))["favorites"]
