from taghunter import __version__
from taghunter.db import close_store


def test_health_and_version(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json().get("status") == "ok"

    v = client.get("/version")
    assert v.status_code == 200
    assert v.json().get("app") == "taghunter-api"
    assert v.json().get("version") == __version__


def test_game_types_endpoint(client):
    r = client.get("/api/game-types")
    assert r.status_code == 200
    body = r.json()
    assert [g["name"] for g in body] == ["Airsoft", "Laser Tag"]


def test_scenarios_endpoint(client):
    r = client.get("/api/scenarios")
    assert r.status_code == 200
    assert len(r.json()) == 9

    r = client.get("/api/scenarios", params={"game_type_id": "2"})
    assert r.status_code == 200
    body = r.json()
    assert len(body) == 4
    assert {s["game_type_id"] for s in body} == {"2"}
    assert set(body[0]) == {
        "id", "game_type_id", "title", "description",
        "difficulty", "duration_minutes", "created_at", "image_url",
    }


def test_scenarios_unknown_game_type(client):
    r = client.get("/api/scenarios", params={"game_type_id": "42"})
    assert r.status_code == 200
    assert r.json() == []


def test_storage_failure_is_500_with_message(client):
    close_store()
    r = client.get("/api/game-types")
    assert r.status_code == 500
    assert r.json()["detail"] == "store is not initialized"
