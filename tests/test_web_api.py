"""Tests for the web API."""

import pytest

# Only run if fastapi/httpx are installed
try:
    from fastapi.testclient import TestClient
    from batchload.web import create_app
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")

DOCUMENT = {
    "objects": {
        "A": {},
        "B": {"inherits": ["A"]},
        "C": {"inherits": ["A", "B"]},
    }
}


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_resolve(client):
    res = client.post("/api/resolve", json={"document": DOCUMENT})
    assert res.status_code == 200
    data = res.json()
    assert data["ok"] is True
    assert data["batches"] == [["A"], ["B"], ["C"]]
    assert data["reverse_graph"]["A"] == ["B"]


def test_resolve_reports_cycle(client):
    doc = {"objects": {"A": {"inherits": ["B"]}, "B": {"inherits": ["A"]}, "C": {}}}
    res = client.post("/api/resolve", json={"document": doc})
    assert res.status_code == 200
    data = res.json()
    assert data["ok"] is False
    assert data["batches"] == [["C"]]
    assert {e["name"] for e in data["errors"]} == {"A", "B"}
    assert all(e["unresolved"] == [] for e in data["errors"])


def test_resolve_missing_table(client):
    res = client.post("/api/resolve", json={"document": DOCUMENT, "table": "items"})
    assert res.status_code == 400


def test_graph_reduced(client):
    res = client.post("/api/graph", json={"document": DOCUMENT})
    assert res.status_code == 200
    assert res.json()["graph"] == {"A": ["B"], "B": ["C"], "C": []}


def test_graph_raw(client):
    res = client.post("/api/graph", json={"document": DOCUMENT, "raw": True})
    assert res.status_code == 200
    assert res.json()["graph"]["A"] == ["B", "C"]
