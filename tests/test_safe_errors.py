from fastapi.testclient import TestClient

from sizer.api.main import app
from sizer.core.observability.metrics import reset_metrics, snapshot_named


def test_unknown_path_has_no_traceback(client):
    r = client.get("/api/v1/does/not/exist")
    assert r.status_code == 404
    assert "Traceback" not in r.text


def test_unhandled_error_is_shaped(monkeypatch):
    from sizer.api.endpoints import volume

    def boom(*_a, **_kw):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(volume, "estimate_volume", boom)
    reset_metrics()
    c = TestClient(app, raise_server_exceptions=False)
    r = c.post("/api/v1/volume/estimate", json={"rows": 1, "row_size_kb": 1}, headers={"X-Request-Id": "rid-500"})
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal Server Error", "request_id": "rid-500"}
    assert r.headers["X-Request-Id"] == "rid-500"
    assert "kaboom" not in r.text
    assert snapshot_named()["unhandled_errors"] == 1


def test_sizing_error_counted(client):
    r = client.post("/api/v1/volume/report", json={"tables": [
        {"name": "A", "rows": 1, "row_size_kb": 1},
        {"name": "A", "rows": 1, "row_size_kb": 1},
    ]})
    assert r.status_code == 422
    assert client.get("/api/v1/metrics/snapshot").json()["sizing_errors"] == 1
