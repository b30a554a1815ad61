"""
Restaurant search.

Turns optional filter parameters into one boolean mask over the store's
DataFrame view, then sorts by rating and review count and cuts out the
requested page.
"""
from __future__ import annotations

import math

import pandas as pd
from pydantic import BaseModel, Field

from .data_store import RestaurantStore
from .models import Cuisine, Pagination, PriceRange, RestaurantPage

SORT_COLUMNS = ["rating", "review_count"]


class RestaurantFilters(BaseModel):
    cuisine: Cuisine | None = None
    price_range: PriceRange | None = None
    city: str | None = None
    features: list[str] = Field(default_factory=list)
    search: str | None = None
    rating: float | None = None


def parse_features(raw: str | None) -> list[str]:
    """Split a comma-separated feature list, dropping blanks."""
    if not raw:
        return []
    return [f.strip() for f in raw.split(",") if f.strip()]


def _contains(series: pd.Series, text: str) -> pd.Series:
    return series.str.contains(text, case=False, regex=False, na=False)


def build_mask(df: pd.DataFrame, filters: RestaurantFilters) -> pd.Series:
    """AND together every filter that is present; absent ones match everything."""
    mask = pd.Series(True, index=df.index)

    if filters.cuisine:
        mask = mask & (df["cuisine"] == filters.cuisine.value)

    if filters.price_range:
        mask = mask & (df["price_range"] == filters.price_range.value)

    if filters.city:
        mask = mask & _contains(df["city"], filters.city.strip())

    if filters.features:
        wanted = set(filters.features)
        mask = mask & df["features"].apply(lambda fs: bool(wanted & set(fs))).astype(bool)

    if filters.search:
        term = filters.search.strip()
        mask = mask & (
            _contains(df["name"], term)
            | _contains(df["description"], term)
            | _contains(df["cuisine"], term)
        )

    if filters.rating is not None:
        mask = mask & (df["rating"] >= filters.rating)

    return mask


def search_restaurants(
    store: RestaurantStore,
    filters: RestaurantFilters,
    page: int = 1,
    limit: int = 12,
) -> RestaurantPage:
    df = store.frame()
    if df.empty:
        matches = df
    else:
        matches = df.loc[build_mask(df, filters)]
    total = len(matches)

    ordered = matches.sort_values(SORT_COLUMNS, ascending=False, kind="mergesort")
    skip = max((page - 1) * limit, 0)
    window = ordered.iloc[skip:skip + limit] if limit > 0 else ordered.iloc[0:0]

    return RestaurantPage(
        restaurants=store.get_many(window["id"].tolist()),
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if limit > 0 else 0,
        ),
    )
