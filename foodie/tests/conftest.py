from __future__ import annotations

import os

os.environ["FOODIE_BCRYPT_ROUNDS"] = "4"
os.environ["FOODIE_SEED_SAMPLE_DATA"] = "true"
os.environ.pop("FOODIE_RESTAURANTS_FILE", None)
os.environ.pop("FOODIE_ADMIN_EMAIL", None)
os.environ.pop("FOODIE_ADMIN_PASSWORD", None)

import pytest  # noqa: E402

from foodie.auth.users import reset_user_store  # noqa: E402
from foodie.restaurants.data_store import reset_restaurant_store  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_stores():
    """Every test starts with the six sample restaurants and no users."""
    reset_restaurant_store()
    reset_user_store()
    yield
