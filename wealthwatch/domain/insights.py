"""Rule-based predictive insight messages"""

import math
from typing import List, Sequence

from wealthwatch.domain.models import PredictiveInsight, SpendingPattern
from wealthwatch.utils.formatting import format_currency

# Minimum share of windowed spending for a rising category to be called out
RISING_CATEGORY_MIN_SHARE = 0.10
MAX_RISING_CATEGORIES = 2


def savings_projection(monthly_income: float, savings_rate: float) -> PredictiveInsight:
    yearly_projection = monthly_income * savings_rate * 12
    return PredictiveInsight(
        type="savings_projection",
        title="Savings Projection",
        message=(
            f"At your current savings rate of {savings_rate * 100:.1f}%, "
            f"you'll save approximately {format_currency(yearly_projection)} this year."
        ),
        impact="positive",
    )


def rising_categories(patterns: Sequence[SpendingPattern]) -> List[SpendingPattern]:
    """Increasing categories with a meaningful share, in pattern order"""
    rising = [p for p in patterns if p.trend == "increasing" and p.percentage > RISING_CATEGORY_MIN_SHARE]
    return rising[:MAX_RISING_CATEGORIES]


def spending_alert(categories: Sequence[SpendingPattern]) -> PredictiveInsight:
    names = " and ".join(p.category for p in categories)
    return PredictiveInsight(
        type="spending_alert",
        title="Rising Expenses",
        message=f"Your spending on {names} has increased recently. Consider reviewing these categories.",
        impact="warning",
    )


def debt_payoff(total_debt: float, monthly_savings: float) -> PredictiveInsight:
    months_to_payoff = math.ceil(total_debt / monthly_savings)
    return PredictiveInsight(
        type="debt_payoff",
        title="Debt Freedom Timeline",
        message=(
            "If you allocate your monthly savings to debt repayment, "
            f"you could be debt-free in approximately {months_to_payoff} months."
        ),
        impact="positive",
    )


def generate_predictive_insights(
    monthly_income: float,
    savings_rate: float,
    patterns: Sequence[SpendingPattern],
    has_active_debts: bool,
    total_debt: float,
) -> List[PredictiveInsight]:
    """
    Build the insight list in fixed order: savings projection, rising
    expenses, debt payoff. Each is omitted when its trigger does not hold.

    A positive savings rate implies positive income, so the payoff
    division always has a positive denominator.
    """
    insights = []

    if savings_rate > 0:
        insights.append(savings_projection(monthly_income, savings_rate))

    rising = rising_categories(patterns)
    if rising:
        insights.append(spending_alert(rising))

    if has_active_debts and savings_rate > 0:
        insights.append(debt_payoff(total_debt, monthly_income * savings_rate))

    return insights
