import pytest

from sizer.core.cost import StorageCostInputs, estimate_storage_cost
from sizer.core.cost.pricing_tables import DEFAULT_TB_MONTH
from sizer.core.errors import InvalidSizingInput


def test_cost_formula():
    est = estimate_storage_cost(StorageCostInputs(volume_tb=10, provider="aws", tier="standard", months=12), overrides={})
    price = DEFAULT_TB_MONTH[("aws", "standard")]
    assert est.price_per_tb_month_usd == price
    assert est.monthly_cost_usd == pytest.approx(round(10 * price, 2))
    assert est.total_cost_usd == pytest.approx(round(10 * price * 12, 2))
    assert est.assumptions["price_overridden"] is False


def test_replication_multiplies_cost():
    one = estimate_storage_cost(StorageCostInputs(volume_tb=5, replication=1), overrides={})
    three = estimate_storage_cost(StorageCostInputs(volume_tb=5, replication=3), overrides={})
    assert three.monthly_cost_usd == pytest.approx(one.monthly_cost_usd * 3, abs=0.02)


def test_override_used():
    est = estimate_storage_cost(
        StorageCostInputs(volume_tb=2, provider="databricks", months=1),
        overrides={("databricks", "standard"): 10.0},
    )
    assert est.monthly_cost_usd == 20.0
    assert est.total_cost_usd == 20.0
    assert est.assumptions["price_overridden"] is True


def test_overrides_loaded_from_env_when_not_given(tmp_path, monkeypatch):
    f = tmp_path / "p.yaml"
    f.write_text("gcp/standard: 5\n", encoding="utf-8")
    monkeypatch.setenv("SIZER_PRICING_FILE", str(f))
    est = estimate_storage_cost(StorageCostInputs(volume_tb=1, provider="gcp", months=1))
    assert est.price_per_tb_month_usd == 5.0


def test_to_dict_keys():
    body = estimate_storage_cost(StorageCostInputs(volume_tb=1), overrides={}).to_dict()
    assert set(body) == {
        "volume_tb",
        "price_per_tb_month_usd",
        "monthly_cost_usd",
        "total_cost_usd",
        "months",
        "assumptions",
    }


@pytest.mark.parametrize("kwargs", [
    {"volume_tb": 0},
    {"volume_tb": -1},
    {"volume_tb": float("nan")},
    {"volume_tb": 1, "months": 0},
    {"volume_tb": 1, "months": 1.5},
    {"volume_tb": 1, "replication": 0.5},
])
def test_invalid_inputs(kwargs):
    with pytest.raises(InvalidSizingInput):
        estimate_storage_cost(StorageCostInputs(**kwargs), overrides={})
