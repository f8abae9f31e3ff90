from fastapi.testclient import TestClient

from winway.main import app

client = TestClient(app)


def test_dress_codes():
    r = client.get("/catalog/dress-codes")
    assert r.status_code == 200
    assert [d["key"] for d in r.json()] == ["elegant", "smart", "neon"]

    r = client.get("/catalog/dress-codes/neon")
    assert r.json()["title"] == "Neon Party Night"
    assert r.json()["not_allowed"]

    assert client.get("/catalog/dress-codes/pyjamas").status_code == 404


def test_dress_code_for_day():
    sunday = client.get("/catalog/dress-codes/today", params={"day": "2026-10-18"}).json()
    assert sunday["day"]["id"] == "sun"
    assert sunday["dress_code"]["key"] == "elegant"

    monday = client.get("/catalog/dress-codes/today", params={"day": "2026-10-19"}).json()
    assert monday["dress_code"]["key"] == "smart"

    saturday = client.get("/catalog/dress-codes/today", params={"day": "2026-10-24"}).json()
    assert saturday["dress_code"]["key"] == "neon"

    assert client.get("/catalog/dress-codes/today").status_code == 200


def test_schedule_starts_on_sunday():
    week = client.get("/catalog/schedule").json()
    assert [d["id"] for d in week] == ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]


def test_entertainment_type_filter():
    assert len(client.get("/catalog/entertainments").json()) == 7
    assert len(client.get("/catalog/entertainments", params={"type": "all"}).json()) == 7
    slots = client.get("/catalog/entertainments", params={"type": "slot"}).json()
    assert len(slots) == 5
    assert all(e["type"] == "slot" for e in slots)
    live = client.get("/catalog/entertainments", params={"type": "live"}).json()
    assert [e["id"] for e in live] == ["live_show_a"]


def test_entertainment_details():
    r = client.get("/catalog/entertainments/tournament_blackjack")
    assert r.status_code == 200
    assert r.json()["min_bet"] == "Buy-in at desk"
    assert client.get("/catalog/entertainments/roulette_royale").status_code == 404


def test_staff_directory_filters():
    assert len(client.get("/catalog/staff").json()) == 6
    security = client.get("/catalog/staff", params={"role": "SECURITY"}).json()
    assert [s["name"] for s in security] == ["Marcus Rodriguez"]

    found = client.get("/catalog/staff", params={"q": "AR"}).json()
    assert [s["name"] for s in found] == ["Grace Carter", "Marcus Rodriguez"]
    found = client.get("/catalog/staff", params={"q": "ar", "role": "DEALER"}).json()
    assert [s["name"] for s in found] == ["Grace Carter"]


def test_form_options():
    service = client.get("/catalog/service-options").json()
    assert [s["key"] for s in service["staff_types"]] == ["waiter", "technician", "cleaner", "security", "host"]
    assert "Other" in service["reasons"]
    assert len(service["tables"]) == 29
    assert service["tables"][-1] == "Terrace"

    desk = client.get("/catalog/desk-options").json()
    assert [t["key"] for t in desk["types"]] == ["complaint", "suggestion", "compliment"]
    assert "Food & Drinks" in desk["categories"]
