from fastapi.testclient import TestClient

from gastrax.engine import analyze, parse
from gastrax.server import create_app
from gastrax.service import SummaryStore
from gastrax.utils import GasConfig


def make_client(store):
    app = create_app(GasConfig(), store)
    return TestClient(app)


def test_health(clean_registry):
    client = make_client(SummaryStore())
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_summary_unavailable(clean_registry):
    store = SummaryStore()
    store.set_error("Error: RPC HTTP 500")
    client = make_client(store)
    resp = client.get("/summary")
    assert resp.status_code == 503
    assert resp.json()["detail"] == "Error: RPC HTTP 500"
    assert client.get("/badge").json() == {"text": "...", "color": "#71717a"}


def test_summary_and_badge(clean_registry, rising_history):
    store = SummaryStore()
    store.update(analyze(parse(rising_history)), now=1_700_000_000.0)
    client = make_client(store)
    data = client.get("/summary").json()
    assert data["currentBaseFee"] == 20.0
    assert data["congestion"] == "CONGESTED"
    assert data["rows"]["next"]["maxFee"] == 45.0
    assert data["updatedAt"] == 1_700_000_000.0
    assert client.get("/badge").json() == {"text": "20.0", "color": "#f59e0b"}


def test_metrics_exposed(clean_registry):
    client = make_client(SummaryStore())
    client.get("/health")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "http_request" in resp.text
