from __future__ import annotations

import json
import logging
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_CONFIG, AppConfig
from .models import FilterOptions, PriceRange, Restaurant, RestaurantCreate

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "id",
    "name",
    "description",
    "cuisine",
    "price_range",
    "city",
    "latitude",
    "longitude",
    "rating",
    "review_count",
    "features",
]


def _new_id() -> str:
    return uuid.uuid4().hex[:24]


def _to_row(restaurant: Restaurant) -> dict:
    return {
        "id": restaurant.id,
        "name": restaurant.name,
        "description": restaurant.description,
        "cuisine": restaurant.cuisine.value,
        "price_range": restaurant.price_range.value,
        "city": restaurant.location.city,
        "latitude": restaurant.location.coordinates.latitude,
        "longitude": restaurant.location.coordinates.longitude,
        "rating": float(restaurant.rating),
        "review_count": int(restaurant.review_count),
        "features": [f.value for f in restaurant.features],
    }


class RestaurantStore:
    """
    In-memory restaurant collection.

    Documents are kept as ``Restaurant`` models keyed by id, in insertion
    order. Queries run against a DataFrame view of the filterable fields,
    rebuilt lazily after each write.
    """

    def __init__(self) -> None:
        self._docs: dict[str, Restaurant] = {}
        self._frame: pd.DataFrame | None = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._docs)

    def insert(self, data: RestaurantCreate) -> Restaurant:
        now = datetime.now(timezone.utc)
        restaurant = Restaurant(id=_new_id(), created_at=now, updated_at=now, **data.model_dump())
        with self._lock:
            self._docs[restaurant.id] = restaurant
            self._frame = None
        return restaurant

    def insert_many(self, items: list[RestaurantCreate]) -> list[Restaurant]:
        return [self.insert(item) for item in items]

    def add_documents(self, documents: list[Restaurant]) -> None:
        """Insert fully-formed documents, keeping their ids and timestamps."""
        with self._lock:
            for doc in documents:
                self._docs[doc.id] = doc
            self._frame = None

    def get(self, restaurant_id: str) -> Restaurant | None:
        return self._docs.get(restaurant_id)

    def get_many(self, ids: list[str]) -> list[Restaurant]:
        return [self._docs[i] for i in ids if i in self._docs]

    def all(self) -> list[Restaurant]:
        with self._lock:
            return list(self._docs.values())

    def frame(self) -> pd.DataFrame:
        """Return the query view, one row per document in insertion order."""
        with self._lock:
            if self._frame is None:
                rows = [_to_row(doc) for doc in self._docs.values()]
                self._frame = pd.DataFrame.from_records(rows, columns=FRAME_COLUMNS)
            return self._frame

    def filter_options(self) -> FilterOptions:
        df = self.frame()
        features: set[str] = set()
        for values in df["features"]:
            features.update(values)
        return FilterOptions(
            cuisines=sorted(df["cuisine"].dropna().unique().tolist()),
            cities=sorted(df["city"].dropna().unique().tolist()),
            features=sorted(features),
            price_ranges=[p.value for p in PriceRange],
        )

    def clear(self) -> None:
        with self._lock:
            self._docs.clear()
            self._frame = None

    def dump(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = [doc.to_json() for doc in self.all()]
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    def load(self, path: Path) -> int:
        """Load documents from a JSON file written by ``dump`` or the seed script."""
        raw = json.loads(path.read_text(encoding="utf-8"))
        documents: list[Restaurant] = []
        created: list[RestaurantCreate] = []
        for item in raw:
            if "id" in item:
                documents.append(Restaurant.model_validate(item))
            else:
                created.append(RestaurantCreate.model_validate(item))
        self.add_documents(documents)
        self.insert_many(created)
        return len(documents) + len(created)


_store: RestaurantStore | None = None


def _build_store(config: AppConfig) -> RestaurantStore:
    from .seed import sample_restaurants

    store = RestaurantStore()
    if config.restaurants_file is not None:
        count = store.load(config.restaurants_file)
        logger.info("Loaded %d restaurants from %s", count, config.restaurants_file)
    elif config.seed_sample_data:
        store.insert_many(sample_restaurants())
        logger.info("Seeded %d sample restaurants", len(store))
    return store


def get_restaurant_store(config: AppConfig = DEFAULT_CONFIG) -> RestaurantStore:
    """Return the process-wide restaurant store, building it on first call."""
    global _store
    if _store is None:
        _store = _build_store(config)
    return _store


def reset_restaurant_store(config: AppConfig = DEFAULT_CONFIG) -> RestaurantStore:
    global _store
    _store = _build_store(config)
    return _store
