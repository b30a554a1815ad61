from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .auth.dependencies import require_admin, require_user
from .auth.models import LoginRequest, ProfileUpdate, RegisterRequest
from .auth.tokens import issue_token
from .auth.users import UserRecord, get_user_store
from .config import DEFAULT_CONFIG
from .errors import AuthenticationError, FoodieError, NotFoundError
from .favorites.manager import FavoritesManager
from .restaurants.data_store import get_restaurant_store
from .restaurants.geo import find_nearby
from .restaurants.models import Cuisine, PriceRange, RestaurantCreate
from .restaurants.query import RestaurantFilters, parse_features, search_restaurants

logger = logging.getLogger(__name__)

app = FastAPI(title="Foodie Finder API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[DEFAULT_CONFIG.cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api = APIRouter(prefix="/api")


def ok(data: dict[str, Any] | None = None, message: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def _error_response(status_code: int, message: str, errors: list[dict] | None = None) -> JSONResponse:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)


def _favorites() -> FavoritesManager:
    return FavoritesManager(get_user_store(), get_restaurant_store())


# ── Error handlers ───────────────────────────────────────────────────────


@app.exception_handler(FoodieError)
async def foodie_error_handler(request: Request, exc: FoodieError) -> JSONResponse:
    logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return _error_response(exc.status_code, exc.message, exc.errors)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "msg": err["msg"],
            "param": ".".join(str(part) for part in err["loc"][1:]),
            "location": str(err["loc"][0]) if err["loc"] else "",
        }
        for err in exc.errors()
    ]
    return _error_response(400, "Validation errors", errors)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(500, "Server error")


# ── Public endpoints ─────────────────────────────────────────────────────


@api.get("/health")
def health() -> dict[str, Any]:
    return ok({"status": "ok"}, "Foodie Finder API is running!")


# ── Auth endpoints ───────────────────────────────────────────────────────


@api.post("/auth/register", status_code=201)
def register(body: RegisterRequest) -> dict[str, Any]:
    user = get_user_store().create(body.name, body.email, body.password)
    logger.info("Registered user %s", user.id)
    return ok({"user": user.public(), "token": issue_token(user.id)}, "User registered successfully")


@api.post("/auth/login")
def login(body: LoginRequest) -> dict[str, Any]:
    user = get_user_store().authenticate(body.email, body.password)
    if not user:
        raise AuthenticationError("Invalid credentials")
    return ok({"user": user.public(), "token": issue_token(user.id)}, "Login successful")


@api.get("/auth/me")
def auth_me(user: UserRecord = Depends(require_user)) -> dict[str, Any]:
    favorites = _favorites().list(user.id)
    profile = {**user.public(), "favorites": [r.to_json() for r in favorites]}
    return ok({"user": profile})


@api.put("/auth/profile")
def update_profile(body: ProfileUpdate, user: UserRecord = Depends(require_user)) -> dict[str, Any]:
    updated = get_user_store().update_profile(user.id, body.model_dump(exclude_unset=True))
    return ok({"user": updated.public()}, "Profile updated successfully")


# ── Restaurant endpoints ─────────────────────────────────────────────────


@api.get("/restaurants")
def list_restaurants(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_CONFIG.default_page_size, ge=1, le=DEFAULT_CONFIG.max_page_size),
    cuisine: Cuisine | None = None,
    price_range: PriceRange | None = Query(None, alias="priceRange"),
    city: str | None = None,
    features: str | None = None,
    search: str | None = None,
    rating: float | None = Query(None, ge=0.0, le=5.0),
) -> dict[str, Any]:
    filters = RestaurantFilters(
        cuisine=cuisine,
        price_range=price_range,
        city=city,
        features=parse_features(features),
        search=search,
        rating=rating,
    )
    result = search_restaurants(get_restaurant_store(), filters, page=page, limit=limit)
    return ok(result.to_json())


@api.get("/restaurants/filter-options")
def filter_options() -> dict[str, Any]:
    return ok(get_restaurant_store().filter_options().to_json())


@api.get("/restaurants/nearby")
def nearby_restaurants(
    latitude: float | None = Query(None, ge=-90.0, le=90.0),
    longitude: float | None = Query(None, ge=-180.0, le=180.0),
    radius: float = Query(DEFAULT_CONFIG.nearby_radius_km, gt=0.0),
) -> dict[str, Any]:
    results = find_nearby(get_restaurant_store(), latitude, longitude, radius_km=radius)
    restaurants = [{**r.to_json(), "distance": round(d, 1)} for r, d in results]
    return ok({"restaurants": restaurants})


@api.get("/restaurants/{restaurant_id}")
def get_restaurant(restaurant_id: str) -> dict[str, Any]:
    restaurant = get_restaurant_store().get(restaurant_id)
    if restaurant is None:
        raise NotFoundError("Restaurant not found")
    return ok({"restaurant": restaurant.to_json()})


@api.post("/restaurants", status_code=201)
def create_restaurant(
    body: RestaurantCreate,
    user: UserRecord = Depends(require_admin),
) -> dict[str, Any]:
    restaurant = get_restaurant_store().insert(body)
    logger.info("User %s created restaurant %s (%s)", user.id, restaurant.id, restaurant.name)
    return ok({"restaurant": restaurant.to_json()}, "Restaurant created successfully")


# ── Favorites endpoints ──────────────────────────────────────────────────


@api.get("/users/favorites")
def get_favorites(user: UserRecord = Depends(require_user)) -> dict[str, Any]:
    favorites = _favorites().list(user.id)
    return ok({"favorites": [r.to_json() for r in favorites]})


@api.post("/users/favorites/{restaurant_id}")
def add_favorite(restaurant_id: str, user: UserRecord = Depends(require_user)) -> dict[str, Any]:
    favorites = _favorites().add(user.id, restaurant_id)
    return ok({"favorites": favorites}, "Restaurant added to favorites")


@api.delete("/users/favorites/{restaurant_id}")
def remove_favorite(restaurant_id: str, user: UserRecord = Depends(require_user)) -> dict[str, Any]:
    favorites = _favorites().remove(user.id, restaurant_id)
    return ok({"favorites": favorites}, "Restaurant removed from favorites")


app.include_router(api)
