"""
Metrics snapshot and Prometheus scrape endpoint.
"""


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_metrics_snapshot(client):
    client.get("/api/v1/health/live")
    r = client.get("/api/v1/metrics/snapshot")
    assert r.status_code == 200
    body = r.json()
    assert isinstance(body["requests"], dict)
    assert body["health_live"] == 1
    assert body["requests_total"] >= 1


def test_prometheus_endpoint(client):
    client.post("/api/v1/volume/estimate", json={"rows": 1024 ** 3, "row_size_kb": 1})
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "sizer_http_requests_total" in r.text
    assert "sizer_estimated_tb_total" in r.text


def test_unmatched_paths_share_one_label(client):
    client.get("/api/v1/nope/1")
    client.get("/api/v1/nope/2")
    body = client.get("/api/v1/metrics/snapshot").json()
    assert body["requests"]["path_/:unmatched|404"] == 2
    assert not any(k.startswith("path_/api/v1/nope") for k in body["requests"])
