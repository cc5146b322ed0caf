"""Budget, goal, and recent-activity views derived from the record snapshot"""

from datetime import date, timedelta
from typing import Iterable, List, Sequence

from wealthwatch.domain.models import Budget, BudgetStatus, Goal, GoalProgress, Transaction
from wealthwatch.utils.date_utils import in_range, month_window

DEFAULT_ALERT_THRESHOLD = 80
PRIORITY_ORDER = {"high": 3, "medium": 2, "low": 1}


def budget_spending(budget: Budget, transactions: Iterable[Transaction], today: date) -> float:
    """Expenses in the budget's category for the current month, or the current year for yearly budgets"""
    if budget.period == "yearly":
        start, end = date(today.year, 1, 1), date(today.year, 12, 31)
    else:
        window = month_window(1, today=today)
        start, end = window.start, window.end

    return sum(
        (
            t.amount
            for t in transactions
            if t.type == "expense" and t.category == budget.category and in_range(t.date, start, end)
        ),
        0.0,
    )


def budget_status(budgets: Sequence[Budget], transactions: Sequence[Transaction], today: date) -> List[BudgetStatus]:
    statuses = []
    for budget in budgets:
        spent = budget_spending(budget, transactions, today)
        usage = spent / budget.limit if budget.limit > 0 else 0.0
        threshold = budget.alert_threshold if budget.alert_threshold is not None else DEFAULT_ALERT_THRESHOLD

        statuses.append(
            BudgetStatus(
                budget=budget,
                spent=spent,
                usage=usage,
                is_over_budget=usage > 1,
                is_near_limit=usage >= threshold / 100,
                remaining=max(0.0, budget.limit - spent),
            )
        )
    return statuses


def goal_progress(goals: Sequence[Goal], today: date) -> List[GoalProgress]:
    """Active goals, highest priority first, then soonest deadline"""
    active = [
        GoalProgress(
            goal=goal,
            progress=goal.current_amount / goal.target_amount if goal.target_amount > 0 else 0.0,
            days_remaining=(goal.target_date - today).days,
        )
        for goal in goals
        if goal.status == "active"
    ]
    return sorted(active, key=lambda g: (-PRIORITY_ORDER.get(g.goal.priority, 0), g.days_remaining))


def recent_transactions(
    transactions: Sequence[Transaction],
    today: date,
    days: int = 30,
    limit: int = 10,
) -> List[Transaction]:
    """Newest transactions dated within the last `days` days"""
    cutoff = today - timedelta(days=days)
    recent = [t for t in transactions if t.date >= cutoff]
    return sorted(recent, key=lambda t: t.date, reverse=True)[:limit]
