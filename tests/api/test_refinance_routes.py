import pytest
from fastapi.testclient import TestClient

from refi_calc.api.app import app

client = TestClient(app)


class TestHealth:
    def test_health(self):
        assert client.get("/health").json() == {"status": "ok"}


class TestRefinanceEndpoint:
    def test_defaults(self):
        data = client.get("/api/v1/refinance/defaults").json()
        assert data["original_loan_size"] == 500000
        assert data["rate"] == pytest.approx(0.065)

    def test_canonical_scenario(self):
        resp = client.post("/api/v1/refinance", json={})
        assert resp.status_code == 200
        data = resp.json()
        assert data["original_monthly_payment"] == pytest.approx(3160.34, abs=0.01)
        assert data["new_monthly_payment"] == pytest.approx(2684.11, abs=0.01)
        assert data["months_to_breakeven"] == pytest.approx(10.5, abs=0.01)
        assert data["has_savings"] is True
        assert data["loan_to_value"] == pytest.approx(500000 / 600000)
        assert data["formatted"]["original_monthly_payment"] == "$3,160.34"
        assert data["formatted"]["refi_cost"] == "$5,000.00"

    def test_no_savings_hides_breakeven(self):
        data = client.post("/api/v1/refinance", json={"new_rate": 0.08}).json()
        assert data["has_savings"] is False
        assert data["months_to_breakeven"] is None
        assert data["monthly_savings"] < 0

    def test_paid_off_loan_rejected(self):
        resp = client.post("/api/v1/refinance", json={"original_loan_term": 30, "months_paid": 360})
        assert resp.status_code == 400

    def test_huge_new_term(self):
        resp = client.post("/api/v1/refinance", json={"new_term": 100000})
        assert resp.status_code == 200
        data = resp.json()
        assert data["new_monthly_payment"] == pytest.approx(500000 * 0.05 / 12, abs=0.01)
        assert data["has_savings"] is True

    def test_non_finite_fields_are_null(self):
        resp = client.post("/api/v1/refinance", json={"rate": -12})
        assert resp.status_code == 200
        data = resp.json()
        assert data["current_mortgage_balance"] is None
        assert data["new_monthly_payment"] is None
        assert data["has_savings"] is False
        assert data["formatted"]["current_mortgage_balance"] == "N/A"
        assert "Months paid" in resp.json()["detail"]

    def test_zero_term_fails_validation(self):
        resp = client.post("/api/v1/refinance", json={"new_term": 0})
        assert resp.status_code == 422


class TestFormEndpoint:
    def test_display_strings(self):
        resp = client.post("/api/v1/refinance/form", json={
            "original_loan_size": "500,000",
            "original_loan_term": "30",
            "rate": "6.5%",
            "months_paid": "0",
            "down_payment": "100,000",
            "new_rate": "5",
            "new_term": "30",
            "refi_cost_rate": "1%",
        })
        assert resp.status_code == 200
        assert resp.json()["monthly_savings"] == pytest.approx(476.23, abs=0.01)

    def test_blank_fields_use_defaults(self):
        data = client.post("/api/v1/refinance/form", json={"new_rate": "5"}).json()
        assert data["original_monthly_payment"] == pytest.approx(3160.34, abs=0.01)

    def test_malformed_text_parses_to_zero(self):
        data = client.post("/api/v1/refinance/form", json={"new_rate": "abc"}).json()
        # 0% over 360 months
        assert data["new_monthly_payment"] == pytest.approx(500000 / 360, abs=0.01)

    def test_zero_term_rejected(self):
        resp = client.post("/api/v1/refinance/form", json={"new_term": "0"})
        assert resp.status_code == 400


class TestChartEndpoint:
    def test_series(self):
        data = client.post("/api/v1/refinance/chart", json={}).json()
        assert len(data["current"]) == 31
        assert len(data["refinance"]) == 31
        assert data["is_savings"] is True
        assert data["current"][0]["label"] == "$0"
        assert data["refinance"][0]["label"] == "$5k"

    def test_custom_step(self):
        data = client.post("/api/v1/refinance/chart", json={"step_months": 60}).json()
        assert [p["month"] for p in data["current"]] == [0, 60, 120, 180, 240, 300, 360]

    def test_non_finite_points_are_null(self):
        resp = client.post("/api/v1/refinance/chart", json={"rate": -12})
        assert resp.status_code == 200
        data = resp.json()
        assert data["refinance"][1]["cumulative_amount"] is None
        assert data["refinance"][1]["label"] == "N/A"
