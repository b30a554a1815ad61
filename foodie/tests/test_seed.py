import json
import threading
from dataclasses import replace
from pathlib import Path

import pandas as pd

from foodie.config import DEFAULT_CONFIG
from foodie.restaurants.data_store import FRAME_COLUMNS, RestaurantStore, reset_restaurant_store
from foodie.restaurants.seed import SAMPLE_RESTAURANTS, run_seed, sample_restaurants


def test_run_seed_writes_sample_file(tmp_path: Path):
    """
    The seed script writes every sample restaurant as a full document.

    Uses a temporary output path so we don't pollute the real data directory.
    """
    output_path = run_seed(tmp_path / "data" / "restaurants.json")

    assert output_path.is_file(), "Seed file should be created"
    documents = json.loads(output_path.read_text(encoding="utf-8"))
    assert len(documents) == len(SAMPLE_RESTAURANTS)
    assert {"id", "createdAt", "priceRange", "reviewCount"} <= set(documents[0])


def test_loading_a_dump_keeps_ids(tmp_path: Path):
    path = run_seed(tmp_path / "restaurants.json")
    ids = [doc["id"] for doc in json.loads(path.read_text(encoding="utf-8"))]

    store = RestaurantStore()
    assert store.load(path) == 6
    assert [r.id for r in store.all()] == ids


def test_store_serves_restaurants_file(tmp_path: Path):
    path = run_seed(tmp_path / "restaurants.json")
    config = replace(DEFAULT_CONFIG, restaurants_file=path)

    store = reset_restaurant_store(config)
    assert len(store) == 6
    expected = {doc["id"] for doc in json.loads(path.read_text(encoding="utf-8"))}
    assert {r.id for r in store.all()} == expected


def test_seeding_can_be_disabled():
    store = reset_restaurant_store(replace(DEFAULT_CONFIG, seed_sample_data=False))
    assert len(store) == 0
    assert store.frame().empty


def test_plain_create_payloads_get_new_ids(tmp_path: Path):
    path = tmp_path / "restaurants.json"
    path.write_text(json.dumps(SAMPLE_RESTAURANTS[:2]), encoding="utf-8")

    store = RestaurantStore()
    assert store.load(path) == 2
    names = [r.name for r in store.all()]
    assert names == [SAMPLE_RESTAURANTS[0]["name"], SAMPLE_RESTAURANTS[1]["name"]]
    assert all(r.id for r in store.all())


def test_frame_view_has_query_columns():
    store = reset_restaurant_store()
    df = store.frame()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == FRAME_COLUMNS
    assert len(df) == 6
    assert df.loc[df["name"] == "Sakura Sushi", "city"].item() == "Tokyo"


def test_dump_while_inserting(tmp_path: Path):
    store = reset_restaurant_store()
    template = sample_restaurants()[0]
    extra = [
        template.model_copy(update={"name": f"Pop-up {i}"})
        for i in range(300)
    ]
    errors: list[Exception] = []

    def writer():
        try:
            for item in extra:
                store.insert(item)
        except Exception as exc:
            errors.append(exc)

    thread = threading.Thread(target=writer)
    thread.start()
    paths = [store.dump(tmp_path / f"snapshot-{i}.json") for i in range(20)]
    thread.join()

    assert errors == []
    for path in paths:
        documents = json.loads(path.read_text(encoding="utf-8"))
        assert 6 <= len(documents) <= 306
    assert len(store) == 306
