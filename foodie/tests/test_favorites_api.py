from __future__ import annotations

from fastapi.testclient import TestClient

from foodie.app import app

client = TestClient(app)


def _login() -> dict[str, str]:
    resp = client.post(
        "/api/auth/register",
        json={"name": "Grace Hopper", "email": "grace@example.com", "password": "cobol1959"},
    )
    return {"Authorization": f"Bearer {resp.json()['data']['token']}"}


def _restaurant_ids() -> list[str]:
    return [r["id"] for r in client.get("/api/restaurants").json()["data"]["restaurants"]]


def test_favorites_require_token():
    rid = _restaurant_ids()[0]
    assert client.get("/api/users/favorites").status_code == 401
    assert client.post(f"/api/users/favorites/{rid}").status_code == 401
    assert client.delete(f"/api/users/favorites/{rid}").status_code == 401


def test_add_list_remove():
    headers = _login()
    first, second = _restaurant_ids()[:2]

    resp = client.post(f"/api/users/favorites/{first}", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "message": "Restaurant added to favorites",
        "data": {"favorites": [first]},
    }
    client.post(f"/api/users/favorites/{second}", headers=headers)

    listed = client.get("/api/users/favorites", headers=headers).json()["data"]["favorites"]
    assert [r["id"] for r in listed] == [first, second]
    assert listed[0]["name"] == "Chez Laurent"

    resp = client.delete(f"/api/users/favorites/{first}", headers=headers)
    assert resp.json()["message"] == "Restaurant removed from favorites"
    assert resp.json()["data"]["favorites"] == [second]


def test_adding_twice_conflicts():
    headers = _login()
    rid = _restaurant_ids()[0]
    client.post(f"/api/users/favorites/{rid}", headers=headers)

    resp = client.post(f"/api/users/favorites/{rid}", headers=headers)
    assert resp.status_code == 409
    assert resp.json() == {"success": False, "message": "Restaurant already in favorites"}

    listed = client.get("/api/users/favorites", headers=headers).json()["data"]["favorites"]
    assert [r["id"] for r in listed] == [rid]


def test_removing_twice_is_harmless():
    headers = _login()
    rid = _restaurant_ids()[0]
    client.post(f"/api/users/favorites/{rid}", headers=headers)

    assert client.delete(f"/api/users/favorites/{rid}", headers=headers).json()["data"]["favorites"] == []
    resp = client.delete(f"/api/users/favorites/{rid}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["favorites"] == []


def test_adding_unknown_restaurant_is_not_found():
    headers = _login()
    resp = client.post("/api/users/favorites/nope", headers=headers)
    assert resp.status_code == 404
    assert client.get("/api/users/favorites", headers=headers).json()["data"]["favorites"] == []
