from datetime import date

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from database.repositories import RoundRepository
from database.store import FileStore, MemoryStore
from services import RoundEntryService
from utils.config import Settings

TODAY = date(2026, 2, 7)

FORM = {"date": "2026-02-07", "score": "90", "course_rating": "72", "slope": "113"}


def _client(tmp_path, store=None):
    store = store if store is not None else FileStore(tmp_path)
    service = RoundEntryService(RoundRepository(store), today=lambda: TODAY)
    return TestClient(create_app(service=service, settings=Settings(store_dir=tmp_path)))


@pytest.fixture
def client(tmp_path):
    with _client(tmp_path) as c:
        yield c


def test_submit_round(client):
    resp = client.post("/api/rounds", json=FORM)
    assert resp.status_code == 201
    body = resp.json()
    assert body["differential"] == 18.0
    assert body["round"]["date_label"] == "07.02.2026"
    assert body["handicap"]["handicap"] == 16.0
    assert body["handicap"]["hint"] == "Best 1 of the last 1 rounds, adjusted -2.0"


def test_submit_round_validation_error(client):
    resp = client.post("/api/rounds", json={**FORM, "slope": "40"})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Slope rating must be between 55 and 155."
    assert client.get("/api/rounds").json() == []


def test_submit_round_huge_number(client):
    resp = client.post("/api/rounds", json={**FORM, "score": 10 ** 400})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Gross score must be a number."


def test_submit_round_store_full(tmp_path):
    with _client(tmp_path, store=MemoryStore(quota_bytes=10)) as c:
        resp = c.post("/api/rounds", json=FORM)
    assert resp.status_code == 507


def test_list_rounds_newest_first(client):
    client.post("/api/rounds", json={**FORM, "date": "2026-01-01"})
    client.post("/api/rounds", json={**FORM, "date": "2026-02-01", "score": "85"})
    rounds = client.get("/api/rounds").json()
    assert [r["date"] for r in rounds] == ["2026-02-01", "2026-01-01"]
    assert rounds[0]["details"] == "Score 85 · CR 72 · Slope 113"


def test_get_and_delete_round(client):
    round_id = client.post("/api/rounds", json=FORM).json()["round"]["id"]

    resp = client.get(f"/api/rounds/{round_id}")
    assert resp.status_code == 200
    assert resp.json()["course_rating"] == 72.0

    assert client.delete(f"/api/rounds/{round_id}").status_code == 204
    assert client.delete(f"/api/rounds/{round_id}").status_code == 404
    assert client.get(f"/api/rounds/{round_id}").status_code == 404


def test_delete_all_requires_confirmation(client):
    client.post("/api/rounds", json=FORM)
    assert client.delete("/api/rounds").status_code == 400
    assert len(client.get("/api/rounds").json()) == 1

    resp = client.delete("/api/rounds", params={"confirm": "true"})
    assert resp.status_code == 200
    assert resp.json() == {"deleted": 1}
    assert client.get("/api/rounds").json() == []


def test_handicap_without_rounds(client):
    body = client.get("/api/stats/handicap").json()
    assert body["handicap"] is None
    assert body["hint"] == "Best 8 of the last 20 rounds"


def test_dashboard(client):
    for score in ("90", "95", "100"):
        client.post("/api/rounds", json={**FORM, "score": score})
    body = client.get("/api/stats/dashboard").json()
    assert body["total_rounds"] == 3
    assert body["handicap"] == 16.0
    assert body["best_differential"] == 18.0
    assert body["average_differential"] == 23.0
    assert len(body["recent_rounds"]) == 3


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok", "rounds": 0}


def test_rounds_persist_across_apps(tmp_path):
    with _client(tmp_path) as c:
        c.post("/api/rounds", json=FORM)
    with _client(tmp_path) as c:
        assert len(c.get("/api/rounds").json()) == 1
