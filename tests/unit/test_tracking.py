"""Unit tests for budget, goal, and recent-activity views"""

import pytest
from datetime import date
from wealthwatch.domain.models import Budget, Goal, Transaction
from wealthwatch.domain.tracking import budget_spending, budget_status, goal_progress, recent_transactions

TODAY = date(2024, 6, 15)


def expense(txn_id, amount, category, day):
    return Transaction(id=txn_id, amount=amount, type="expense", category=category, date=day)


@pytest.fixture
def grocery_spending() -> list[Transaction]:
    return [
        expense("1", 200, "Groceries", date(2024, 6, 2)),
        expense("2", 250, "Groceries", date(2024, 6, 14)),
        expense("3", 300, "Groceries", date(2024, 5, 20)),
        expense("4", 80, "Dining", date(2024, 6, 5)),
        Transaction(id="5", amount=500, type="income", category="Groceries", date=date(2024, 6, 1)),
    ]


def test_monthly_budget_counts_current_month_only(grocery_spending):
    budget = Budget(id="b1", category="Groceries", limit=500, period="monthly")
    assert budget_spending(budget, grocery_spending, TODAY) == 450


def test_yearly_budget_counts_calendar_year(grocery_spending):
    budget = Budget(id="b1", category="Groceries", limit=5000, period="yearly")
    assert budget_spending(budget, grocery_spending, TODAY) == 750


def test_budget_status_near_limit(grocery_spending):
    budget = Budget(id="b1", category="Groceries", limit=500, period="monthly")
    status = budget_status([budget], grocery_spending, TODAY)[0]

    assert status.spent == 450
    assert status.usage == pytest.approx(0.9)
    assert status.is_near_limit is True  # default threshold 80%
    assert status.is_over_budget is False
    assert status.remaining == 50


def test_budget_status_custom_threshold_and_overspend(grocery_spending):
    budgets = [
        Budget(id="b1", category="Groceries", limit=400, period="monthly", alert_threshold=95),
        Budget(id="b2", category="Dining", limit=100, period="monthly", alert_threshold=90),
    ]
    groceries, dining = budget_status(budgets, grocery_spending, TODAY)

    assert groceries.is_over_budget is True
    assert groceries.is_near_limit is True
    assert groceries.remaining == 0

    assert dining.usage == pytest.approx(0.8)
    assert dining.is_near_limit is False


def test_budget_status_zero_limit():
    budget = Budget(id="b1", category="Misc", limit=0, period="monthly")
    status = budget_status([budget], [expense("1", 10, "Misc", TODAY)], TODAY)[0]

    assert status.usage == 0
    assert status.remaining == 0


def test_goal_progress_orders_by_priority_then_deadline():
    goals = [
        Goal(id="g1", name="Vacation", target_amount=3000, current_amount=1500,
             target_date=date(2024, 12, 1), category="travel", priority="medium"),
        Goal(id="g2", name="Emergency", target_amount=10000, current_amount=2500,
             target_date=date(2025, 6, 1), category="emergency", priority="high"),
        Goal(id="g3", name="Laptop", target_amount=2000, current_amount=0,
             target_date=date(2024, 8, 1), category="purchase", priority="medium"),
        Goal(id="g4", name="Car", target_amount=20000, current_amount=20000,
             target_date=date(2024, 1, 1), category="purchase", priority="high", status="completed"),
    ]
    progress = goal_progress(goals, TODAY)

    assert [p.goal.name for p in progress] == ["Emergency", "Laptop", "Vacation"]
    assert progress[0].progress == pytest.approx(0.25)
    assert progress[1].days_remaining == (date(2024, 8, 1) - TODAY).days


def test_recent_transactions_newest_first_and_limited():
    transactions = [expense(str(day), 10, "Food", date(2024, 6, day)) for day in range(1, 15)]
    transactions.append(expense("old", 10, "Food", date(2024, 4, 1)))

    recent = recent_transactions(transactions, TODAY, days=30, limit=5)

    assert [t.id for t in recent] == ["14", "13", "12", "11", "10"]
    assert all(t.id != "old" for t in recent_transactions(transactions, TODAY, days=30, limit=50))
