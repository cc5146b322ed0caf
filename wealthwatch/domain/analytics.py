"""Analytics engine - aggregates a transaction/debt snapshot into reporting metrics"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from wealthwatch.domain.exceptions import InvalidWindowError
from wealthwatch.domain.health import assess_financial_health
from wealthwatch.domain.insights import generate_predictive_insights
from wealthwatch.domain.models import (
    Budget,
    CashFlowData,
    CategoryInsight,
    DateWindow,
    Debt,
    FinancialHealth,
    FinancialSummary,
    PredictiveInsight,
    SpendingPattern,
    SubcategoryShare,
    Transaction,
    normalize_debt,
)
from wealthwatch.domain.trends import classify_trend, percent_change
from wealthwatch.utils.date_utils import in_range, month_label, month_window

logger = logging.getLogger(__name__)

DEFAULT_SUBCATEGORY = "Other"
TOP_SUBCATEGORIES = 3
STABILITY_MONTHS = 6
BUDGET_PERIOD_MONTHS = {"monthly": 1, "yearly": 12}


def group_by_category(transactions: Iterable[Transaction]) -> Dict[str, float]:
    """Sum amounts per category, in first-seen order"""
    totals: Dict[str, float] = defaultdict(float)
    for txn in transactions:
        totals[txn.category] += txn.amount
    return dict(totals)


class FinancialAnalytics:
    """
    Read-only analytics over one snapshot of transactions and debts.

    The snapshot is copied at construction; build a new instance whenever
    the underlying records change. `today` anchors every reporting window
    and defaults to the current date.
    """

    def __init__(self, transactions: Iterable[Transaction], debts: Iterable[Debt], today: Optional[date] = None):
        self.transactions = tuple(transactions)
        self.debts = tuple(normalize_debt(d) for d in debts)
        self.today = today or date.today()
        logger.debug(
            "Analytics snapshot loaded",
            extra={"transactions": len(self.transactions), "debts": len(self.debts)},
        )

    # Core totals

    def total_income(self, months: int = 12) -> float:
        return self._sum("income", self._window(months))

    def total_expenses(self, months: int = 12) -> float:
        return self._sum("expense", self._window(months))

    def current_balance(self) -> float:
        """Lifetime balance over every transaction, not windowed"""
        return sum((t.amount if t.type == "income" else -t.amount for t in self.transactions), 0.0)

    def total_debt(self) -> float:
        return sum((d.current_balance for d in self._active_debts()), 0.0)

    def net_worth(self) -> float:
        return self.current_balance() - self.total_debt()

    def savings_rate(self, months: int = 12) -> float:
        income = self.total_income(months)
        if income == 0:
            return 0.0
        return (income - self.total_expenses(months)) / income

    def monthly_average_savings(self, months: int = 12) -> float:
        return (self.total_income(months) - self.total_expenses(months)) / months

    def summary(self, months: int = 12) -> FinancialSummary:
        return FinancialSummary(
            total_income=self.total_income(months),
            total_expenses=self.total_expenses(months),
            current_balance=self.current_balance(),
            total_debt=self.total_debt(),
            net_worth=self.net_worth(),
            savings_rate=self.savings_rate(months),
            monthly_average_savings=self.monthly_average_savings(months),
        )

    # Spending analysis

    def spending_patterns(self, months: int = 6) -> List[SpendingPattern]:
        """
        Category breakdown of windowed expenses, compared against the
        immediately preceding window of the same length.
        """
        current = group_by_category(self._expenses(self._window(months)))
        previous = group_by_category(self._expenses(self._window(months, offset_months=months)))
        window_total = sum(current.values())

        patterns = [
            SpendingPattern(
                category=category,
                amount=amount,
                percentage=amount / window_total if window_total > 0 else 0.0,
                trend=classify_trend(percent_change(amount, previous.get(category, 0.0))),
                monthly_average=amount / months,
            )
            for category, amount in current.items()
        ]
        return sorted(patterns, key=lambda p: p.amount, reverse=True)

    def category_insights(self, months: int = 6, budgets: Optional[Sequence[Budget]] = None) -> List[CategoryInsight]:
        """
        Per-category deep dive: counts, averages, top sub-categories, and raw
        percent change versus the prior window. When budgets are given, each
        insight also carries its category budget's usage: spending over the
        window against the budget limit scaled to the window length.
        """
        groups: Dict[str, List[Transaction]] = defaultdict(list)
        for txn in self._expenses(self._window(months)):
            groups[txn.category].append(txn)

        previous = group_by_category(self._expenses(self._window(months, offset_months=months)))
        # Budget allowance over the whole window, keyed by category
        allowances = {
            b.category: b.limit * months / BUDGET_PERIOD_MONTHS.get(b.period, 1)
            for b in reversed(budgets or [])
            if b.limit > 0
        }

        insights = []
        for category, txns in groups.items():
            total_spent = sum(t.amount for t in txns)

            by_subcategory: Dict[str, float] = defaultdict(float)
            for txn in txns:
                by_subcategory[txn.subcategory or DEFAULT_SUBCATEGORY] += txn.amount
            top = sorted(by_subcategory.items(), key=lambda item: item[1], reverse=True)[:TOP_SUBCATEGORIES]

            insights.append(
                CategoryInsight(
                    category=category,
                    total_spent=total_spent,
                    transaction_count=len(txns),
                    average_transaction=total_spent / len(txns),
                    trend=percent_change(total_spent, previous.get(category, 0.0)),
                    top_subcategories=[
                        SubcategoryShare(
                            name=name,
                            amount=amount,
                            percentage=amount / total_spent if total_spent > 0 else 0.0,
                        )
                        for name, amount in top
                    ],
                    budget_usage=total_spent / allowances[category] if category in allowances else None,
                )
            )

        return sorted(insights, key=lambda i: i.total_spent, reverse=True)

    # Cash flow

    def cash_flow_data(self, months: int = 12) -> List[CashFlowData]:
        """
        Month-by-month income and expenses, oldest first.

        `balance` accumulates net flow from zero at the start of the series,
        so it shows growth over the window rather than the account balance.
        """
        if months < 1:
            raise InvalidWindowError(f"months must be at least 1, got {months}")

        series = []
        running_balance = 0.0

        for offset in range(months - 1, -1, -1):
            window = self._window(1, offset_months=offset)
            income = self._sum("income", window)
            expenses = self._sum("expense", window)
            net_flow = income - expenses
            running_balance += net_flow

            series.append(
                CashFlowData(
                    date=month_label(window.start),
                    income=income,
                    expenses=expenses,
                    net_flow=net_flow,
                    balance=running_balance,
                )
            )

        return series

    # Scoring and narrative

    def monthly_expense_history(self, months: int = STABILITY_MONTHS) -> List[float]:
        """Single-month expense totals, most recent month first"""
        return [self._sum("expense", self._window(1, offset_months=offset)) for offset in range(months)]

    def income_categories(self) -> List[str]:
        """Distinct income categories across all history"""
        return list(group_by_category(t for t in self.transactions if t.type == "income"))

    def calculate_financial_health(self) -> FinancialHealth:
        return assess_financial_health(
            savings_rate=self.savings_rate(),
            total_income=self.total_income(),
            total_debt=self.total_debt(),
            current_balance=self.current_balance(),
            monthly_expenses=self.monthly_expense_history(),
            average_monthly_expenses=self.total_expenses(3) / 3,
            income_category_count=len(self.income_categories()),
        )

    def predictive_insights(self) -> List[PredictiveInsight]:
        return generate_predictive_insights(
            monthly_income=self.total_income(3) / 3,
            savings_rate=self.savings_rate(3),
            patterns=self.spending_patterns(6),
            has_active_debts=bool(self._active_debts()),
            total_debt=self.total_debt(),
        )

    # Helpers

    def _window(self, months: int, offset_months: int = 0) -> DateWindow:
        return month_window(months, offset_months, today=self.today)

    def _expenses(self, window: DateWindow) -> List[Transaction]:
        return [t for t in self.transactions if t.type == "expense" and in_range(t.date, window.start, window.end)]

    def _sum(self, txn_type: str, window: DateWindow) -> float:
        return sum(
            (t.amount for t in self.transactions if t.type == txn_type and in_range(t.date, window.start, window.end)),
            0.0,
        )

    def _active_debts(self) -> List[Debt]:
        return [d for d in self.debts if d.status == "active"]
