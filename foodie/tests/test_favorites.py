from __future__ import annotations

import pytest

from foodie.auth.users import get_user_store
from foodie.errors import ConflictError, NotFoundError
from foodie.favorites.manager import FavoritesManager
from foodie.restaurants.data_store import get_restaurant_store


def _setup():
    users = get_user_store()
    user = users.create("Fav Tester", "fav@example.com", "secret123")
    restaurants = get_restaurant_store()
    ids = [r.id for r in restaurants.all()]
    return FavoritesManager(users, restaurants), user.id, ids


def test_add_appends_and_returns_ids():
    manager, user_id, ids = _setup()
    assert manager.add(user_id, ids[0]) == [ids[0]]
    assert manager.add(user_id, ids[1]) == [ids[0], ids[1]]


def test_adding_twice_conflicts_and_leaves_list_unchanged():
    manager, user_id, ids = _setup()
    manager.add(user_id, ids[0])
    with pytest.raises(ConflictError):
        manager.add(user_id, ids[0])
    assert get_user_store().get(user_id).favorites == [ids[0]]


def test_remove_is_idempotent():
    manager, user_id, ids = _setup()
    manager.add(user_id, ids[0])
    assert manager.remove(user_id, ids[0]) == []
    assert manager.remove(user_id, ids[0]) == []
    assert manager.remove(user_id, "never-added") == []


def test_list_resolves_full_records_in_order():
    manager, user_id, ids = _setup()
    manager.add(user_id, ids[2])
    manager.add(user_id, ids[0])
    favorites = manager.list(user_id)
    assert [r.id for r in favorites] == [ids[2], ids[0]]
    assert favorites[0].name == get_restaurant_store().get(ids[2]).name


def test_unknown_restaurant_is_not_found():
    manager, user_id, _ = _setup()
    with pytest.raises(NotFoundError):
        manager.add(user_id, "does-not-exist")


def test_unknown_user_is_not_found():
    manager, _, ids = _setup()
    with pytest.raises(NotFoundError):
        manager.add("ghost", ids[0])
    with pytest.raises(NotFoundError):
        manager.list("ghost")


def test_no_duplicates_after_mixed_operations():
    manager, user_id, ids = _setup()
    operations = [
        ("add", 0), ("add", 1), ("add", 0), ("remove", 1), ("add", 1),
        ("add", 1), ("remove", 2), ("add", 2), ("remove", 0), ("add", 0),
    ]
    for op, index in operations:
        try:
            getattr(manager, op)(user_id, ids[index])
        except ConflictError:
            pass
        favorites = get_user_store().get(user_id).favorites
        assert len(favorites) == len(set(favorites))

    assert get_user_store().get(user_id).favorites == [ids[1], ids[2], ids[0]]
