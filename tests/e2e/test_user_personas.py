"""
E2E tests for user personas, driven entirely through the HTTP API.

Every persona is recorded with POST calls, then assessed with the
analytics endpoints. The reference date is pinned to 2024-06-15.

User personas:
- new_user: No records at all, neutral medium-risk score
- steady_saver: One salary, flat rent, no debt, low risk expected
- overextended: Spends more than earns and carries large debt, high risk expected
- diversified: Several income streams, no diversification advice
"""

import pytest
from fastapi.testclient import TestClient


def record(client: TestClient, amount: float, txn_type: str, category: str, day: str) -> None:
    response = client.post(
        "/v1/transactions",
        json={"amount": amount, "type": txn_type, "category": category, "date": day, "description": category},
    )
    assert response.status_code == 201


def record_months(client: TestClient, amount: float, txn_type: str, category: str, day_of_month: int = 1) -> None:
    """Same entry in each month from January to June 2024"""
    for month in range(1, 7):
        record(client, amount, txn_type, category, f"2024-{month:02d}-{day_of_month:02d}")


@pytest.mark.e2e
def test_new_user_has_neutral_assessment(client: TestClient):
    """
    new_user: No data
    Expected: Zero totals, empty series values, score 45 (medium)
    """
    overview = client.get("/v1/analytics/overview").json()

    assert overview["summary"]["total_income"] == 0
    assert overview["spending_patterns"] == []
    assert overview["predictive_insights"] == []
    assert all(point["balance"] == 0 for point in overview["cash_flow"])
    assert overview["financial_health"]["score"] == 45
    assert overview["financial_health"]["risk_level"] == "medium"


@pytest.mark.e2e
def test_steady_saver_low_risk(client: TestClient):
    """
    steady_saver: 4000 salary, 2000 rent every month
    Expected: Low risk, savings projection, only diversification advice
    """
    record_months(client, 4000, "income", "Salary")
    record_months(client, 2000, "expense", "Rent", day_of_month=3)

    health = client.get("/v1/analytics/health").json()
    assert health["score"] == 72
    assert health["risk_level"] == "low"
    assert len(health["recommendations"]) == 1

    insights = client.get("/v1/analytics/insights").json()
    assert insights[0]["type"] == "savings_projection"
    assert "$24,000" in insights[0]["message"]


@pytest.mark.e2e
def test_overextended_borrower_high_risk(client: TestClient):
    """
    overextended: 2000 income, 2500 spending, 20000 debt
    Expected: High risk, no savings-based insights, debt advice
    """
    record_months(client, 2000, "income", "Salary")
    record_months(client, 2500, "expense", "Living", day_of_month=5)
    client.post(
        "/v1/debts",
        json={"lender_name": "Card Co", "amount": 20000, "due_date": "2024-12-31", "description": "Credit cards"},
    )

    health = client.get("/v1/analytics/health").json()
    assert health["score"] < 40
    assert health["risk_level"] == "high"
    assert any("debt-to-income" in r for r in health["recommendations"])

    summary = client.get("/v1/analytics/summary").json()
    assert summary["savings_rate"] < 0
    assert summary["net_worth"] == -3000 - 20000

    insight_types = [i["type"] for i in client.get("/v1/analytics/insights").json()]
    assert "savings_projection" not in insight_types
    assert "debt_payoff" not in insight_types


@pytest.mark.e2e
def test_diversified_earner(client: TestClient):
    """
    diversified: Salary, freelance, dividends, and rental income
    Expected: Full diversification factor and no diversification advice
    """
    for category in ("Salary", "Freelance", "Dividends", "Rental"):
        record_months(client, 1000, "income", category)
    record_months(client, 1500, "expense", "Rent", day_of_month=3)

    health = client.get("/v1/analytics/health").json()
    assert health["factors"]["diversification"] == 100
    assert not any("diversifying" in r for r in health["recommendations"])
