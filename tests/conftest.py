import pytest
from fastapi.testclient import TestClient

from sizer.api.main import app
from sizer.core.observability.metrics import reset_metrics


@pytest.fixture(autouse=True)
def _no_pricing_overrides(monkeypatch, tmp_path):
    # Never pick up a developer's pricing_overrides.yaml
    monkeypatch.setenv("SIZER_PRICING_FILE", str(tmp_path / "no_overrides.yaml"))


@pytest.fixture()
def client():
    reset_metrics()
    return TestClient(app)


@pytest.fixture()
def scenario_yaml(tmp_path):
    p = tmp_path / "scenarios.yaml"
    p.write_text(
        "tables:\n"
        "  - name: SALES_FACT\n"
        "    rows: 4200000000\n"
        "    row_size_kb: 0.8\n"
        "  - name: CUSTOMER_DIM\n"
        "    rows: 18000000\n"
        "    row_size_kb: 1.5\n",
        encoding="utf-8",
    )
    return p
