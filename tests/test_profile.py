from fastapi.testclient import TestClient

from winway.core.config import USER_PROFILE_KEY
from winway.main import app

client = TestClient(app)


def test_empty_profile():
    r = client.get("/profile/")
    assert r.status_code == 200
    assert r.json() == {"imageUri": None, "userName": None}


def test_update_profile_then_get():
    r = client.put("/profile/", json={"userName": "Alex"})
    assert r.status_code == 200
    assert r.headers["X-Persisted"] == "true"
    assert r.json() == {"imageUri": None, "userName": "Alex"}

    assert client.get("/profile/").json()["userName"] == "Alex"


def test_last_write_wins_and_name_defaults_to_empty(store):
    client.put("/profile/", json={"userName": "Alex"})
    r = client.put("/profile/", json={"imageUri": "file:///photos/me.jpg"})
    assert r.json() == {"imageUri": "file:///photos/me.jpg", "userName": ""}
    assert store.read(USER_PROFILE_KEY) == {"imageUri": "file:///photos/me.jpg", "userName": ""}


def test_corrupt_profile_reads_as_empty(store):
    store.write(USER_PROFILE_KEY, "just a string")
    assert client.get("/profile/").json() == {"imageUri": None, "userName": None}
