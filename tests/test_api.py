"""
Tests for the calculator API endpoints.
"""

import pytest

# Test client fixture is provided by conftest.py


class TestHealth:
    """Test service endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestTimeValueAPI:
    """Test time value of money endpoints."""

    def test_future_value_with_path(self, client):
        response = client.post(
            "/api/tvm/future-value",
            json={"present_value": 1000, "rate_pct": 8, "periods": 10},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["future_value"] == pytest.approx(2158.92, abs=0.01)
        assert len(data["path"]) == 11
        assert data["path"][0]["value"] == pytest.approx(1000)

    def test_future_value_fractional_periods_has_no_path(self, client):
        response = client.post(
            "/api/tvm/future-value",
            json={"present_value": 100, "rate_pct": 21, "periods": 0.5},
        )
        assert response.status_code == 200
        assert response.json()["path"] is None

    def test_present_value_rejects_total_loss(self, client):
        response = client.post(
            "/api/tvm/present-value",
            json={"future_value": 1000, "rate_pct": -100, "periods": 5},
        )
        assert response.status_code == 400

    def test_implied_rate_and_periods(self, client):
        response = client.post(
            "/api/tvm/implied-rate",
            json={"present_value": 100, "future_value": 200, "periods": 10},
        )
        assert response.status_code == 200
        assert response.json()["rate_pct"] == pytest.approx(7.177, abs=0.001)

        response = client.post(
            "/api/tvm/implied-periods",
            json={"present_value": 100, "future_value": 200, "rate_pct": 7},
        )
        assert response.status_code == 200
        assert response.json()["periods"] == pytest.approx(10.2448, abs=0.0001)

    def test_annuity(self, client):
        response = client.post(
            "/api/tvm/annuity",
            json={"payment": 100, "rate_pct": 0, "periods": 5},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["present_value"] == pytest.approx(500)
        assert data["future_value"] == pytest.approx(500)
        assert len(data["schedule"]) == 5

    def test_perpetuity_zero_rate(self, client):
        response = client.post(
            "/api/tvm/perpetuity", json={"payment": 100, "rate_pct": 0}
        )
        assert response.status_code == 400
        assert "positive" in response.json()["detail"]

    def test_effective_annual_rate(self, client):
        response = client.post(
            "/api/tvm/effective-annual-rate",
            json={"apr_pct": 12, "compounding_periods_per_year": 12},
        )
        assert response.status_code == 200
        assert response.json()["ear_pct"] == pytest.approx(12.6825, abs=0.0001)

    def test_effective_annual_rate_breakdown(self, client):
        response = client.post(
            "/api/tvm/effective-annual-rate",
            json={"apr_pct": 12, "compounding_periods_per_year": 12, "principal": 1000},
        )
        data = response.json()
        assert len(data["breakdown"]) == 12
        assert data["breakdown"][0]["interest"] == pytest.approx(10)
        assert data["final_balance"] == pytest.approx(1126.825, abs=0.001)
        assert data["breakdown"][-1]["ending_balance"] == pytest.approx(data["final_balance"])

    def test_effective_annual_rate_overflow(self, client):
        response = client.post(
            "/api/tvm/effective-annual-rate",
            json={"apr_pct": 1e202, "compounding_periods_per_year": 2},
        )
        assert response.status_code == 400


class TestBondsAPI:
    """Test bond endpoints."""

    def test_fixed_coupon(self, client):
        response = client.post(
            "/api/bonds/fixed-coupon",
            json={"face_value": 1000, "coupon_rate_pct": 5, "market_rate_pct": 6, "periods": 3},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["price"] == pytest.approx(973.27, abs=0.01)
        assert data["coupon"] == pytest.approx(50)
        assert data["status"] == "discount"

    def test_fixed_coupon_invalid_periods(self, client):
        response = client.post(
            "/api/bonds/fixed-coupon",
            json={"coupon_rate_pct": 5, "market_rate_pct": 6, "periods": 0},
        )
        assert response.status_code == 400

    def test_fixed_coupon_long_dated(self, client):
        response = client.post(
            "/api/bonds/fixed-coupon",
            json={"coupon_rate_pct": 5, "market_rate_pct": 10, "periods": 10000},
        )
        assert response.status_code == 200
        assert response.json()["price"] == pytest.approx(500)

    def test_zero_coupon(self, client):
        response = client.post(
            "/api/bonds/zero-coupon",
            json={"face_value": 1000, "market_rate_pct": 7, "periods": 10},
        )
        assert response.status_code == 200
        assert response.json()["price"] == pytest.approx(508.35, abs=0.01)

    def test_perpetual_and_yield(self, client):
        response = client.post(
            "/api/bonds/perpetual", json={"coupon": 80, "market_rate_pct": 5}
        )
        assert response.json()["price"] == pytest.approx(1600)

        response = client.post(
            "/api/bonds/perpetual-yield", json={"coupon": 80, "price": 1600}
        )
        assert response.json()["yield_pct"] == pytest.approx(5)

    def test_price_yield_curve_defaults(self, client):
        response = client.post(
            "/api/bonds/price-yield-curve",
            json={"coupon_rate_pct": 5, "periods": 10},
        )
        assert response.status_code == 200
        points = response.json()
        assert len(points) == 31
        assert points[0]["yield_pct"] == 0
        assert points[0]["price"] == pytest.approx(1500)

    def test_price_yield_curve_step_too_small(self, client):
        response = client.post(
            "/api/bonds/price-yield-curve",
            json={"coupon_rate_pct": 5, "periods": 10, "step_pct": 1e-9},
        )
        assert response.status_code == 400

    def test_fisher(self, client):
        response = client.post(
            "/api/bonds/fisher", json={"real_rate_pct": 2, "inflation_pct": 3}
        )
        assert response.json()["nominal_rate_pct"] == pytest.approx(5.06)


class TestStocksAPI:
    """Test stock valuation endpoints."""

    def test_zero_growth(self, client):
        response = client.post(
            "/api/stocks/zero-growth", json={"dividend": 2, "required_return_pct": 10}
        )
        assert response.json()["price"] == pytest.approx(20)

    def test_constant_growth(self, client):
        response = client.post(
            "/api/stocks/constant-growth",
            json={"current_dividend": 2, "required_return_pct": 12, "growth_rate_pct": 5},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["next_dividend"] == pytest.approx(2.10)
        assert data["price"] == pytest.approx(30)
        assert len(data["projection"]) == 21

    def test_constant_growth_undefined(self, client):
        response = client.post(
            "/api/stocks/constant-growth",
            json={"current_dividend": 2, "required_return_pct": 5, "growth_rate_pct": 5},
        )
        assert response.status_code == 400
        assert "exceed" in response.json()["detail"]

    def test_multi_stage_from_growth(self, client):
        response = client.post(
            "/api/stocks/multi-stage",
            json={
                "current_dividend": 2,
                "high_growth_rate_pct": 20,
                "high_growth_years": 3,
                "terminal_growth_rate_pct": 5,
                "required_return_pct": 15,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert [d["period"] for d in data["dividends"]] == [1, 2, 3]
        assert data["horizon_value"] == pytest.approx(36.288)
        assert data["price"] == pytest.approx(30.397, abs=0.001)

    def test_multi_stage_explicit_dividends(self, client):
        response = client.post(
            "/api/stocks/multi-stage",
            json={
                "dividends": [2.4, 2.88, 3.456],
                "terminal_growth_rate_pct": 5,
                "required_return_pct": 15,
            },
        )
        assert response.status_code == 200
        assert response.json()["price"] == pytest.approx(30.397, abs=0.001)

    def test_multi_stage_missing_forecast(self, client):
        response = client.post(
            "/api/stocks/multi-stage",
            json={"terminal_growth_rate_pct": 5, "required_return_pct": 15},
        )
        assert response.status_code == 422


class TestCapitalAPI:
    """Test cost of capital and NPV endpoints."""

    def test_cost_of_equity(self, client):
        response = client.post(
            "/api/capital/cost-of-equity",
            json={"current_dividend": 2, "price": 40, "growth_rate_pct": 5},
        )
        assert response.json()["cost_of_equity_pct"] == pytest.approx(10.25)

    def test_growth_rate(self, client):
        response = client.post(
            "/api/capital/growth-rate",
            json={"dividends": [1.10, 1.20, 1.35, 1.40, 1.55]},
        )
        data = response.json()
        assert len(data["growth_rates_pct"]) == 4
        assert data["average_growth_pct"] == pytest.approx(9.002, abs=0.001)

    def test_growth_rate_insufficient_data(self, client):
        response = client.post("/api/capital/growth-rate", json={"dividends": [1.10]})
        assert response.status_code == 400

    def test_wacc(self, client):
        response = client.post(
            "/api/capital/wacc",
            json={
                "equity_value": 500,
                "debt_value": 300,
                "preferred_value": 100,
                "cost_of_equity_pct": 12,
                "pre_tax_cost_of_debt_pct": 6,
                "cost_of_preferred_pct": 9,
                "tax_rate_pct": 21,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["after_tax_cost_of_debt_pct"] == pytest.approx(4.74)
        assert data["wacc_pct"] == pytest.approx(9.247, abs=0.001)

    def test_wacc_no_capital(self, client):
        response = client.post(
            "/api/capital/wacc",
            json={
                "equity_value": 0,
                "debt_value": 0,
                "cost_of_equity_pct": 12,
                "pre_tax_cost_of_debt_pct": 6,
                "tax_rate_pct": 21,
            },
        )
        assert response.status_code == 400

    def test_npv(self, client):
        response = client.post(
            "/api/capital/npv",
            json={"initial_outlay": 10000, "cash_flows": [3000] * 5, "rate_pct": 10},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["npv"] == pytest.approx(1372.36, abs=0.01)
        assert data["accept"] is True
        assert data["discounted_cash_flows"][0]["present_value"] == pytest.approx(2727.27, abs=0.01)
