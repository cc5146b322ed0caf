"""Financial health scoring - weighted multi-factor model with threshold-driven advice"""

import math
from typing import List, Sequence

from wealthwatch.domain.models import FinancialHealth, HealthFactors

# Factor weights, summing to 1.0
WEIGHTS = {
    "savings_rate": 0.25,
    "debt_to_income": 0.25,
    "expense_stability": 0.20,
    "emergency_fund": 0.20,
    "diversification": 0.10,
}

# (factor, threshold, advice) in factor declaration order
RECOMMENDATION_RULES = [
    ("savings_rate", 50, "Consider increasing your savings rate to at least 20% of your income."),
    ("debt_to_income", 60, "Work on reducing your debt-to-income ratio by paying down high-interest debts first."),
    ("emergency_fund", 50, "Build an emergency fund covering 3-6 months of expenses for financial security."),
    ("expense_stability", 60, "Try to stabilize your monthly expenses by creating and sticking to a budget."),
    ("diversification", 50, "Consider diversifying your income sources to reduce financial risk."),
]


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def savings_rate_factor(savings_rate: float) -> float:
    return _clamp(savings_rate * 100)


def debt_to_income_factor(total_debt: float, total_income: float) -> float:
    """100 with no debt, falling one point per percent of income owed"""
    return _clamp(100 - (total_debt / max(total_income, 1) * 100))


def expense_stability_factor(monthly_expenses: Sequence[float]) -> float:
    """
    Score month-to-month expense consistency.

    Uses the coefficient of variation (population stddev / mean) of the
    monthly totals: a CV of 0 scores 100, a CV of 1 or more scores 0.
    Fewer than two months of data is neutral (50).
    """
    if len(monthly_expenses) < 2:
        return 50.0

    mean = sum(monthly_expenses) / len(monthly_expenses)
    variance = sum((value - mean) ** 2 for value in monthly_expenses) / len(monthly_expenses)
    coefficient_of_variation = math.sqrt(variance) / mean if mean > 0 else 0.0

    return _clamp(100 - coefficient_of_variation * 100)


def emergency_fund_factor(current_balance: float, monthly_expenses: float) -> float:
    """
    10 points per month of expenses the balance covers, capped at 100.

    Without any recent expenses a positive balance is full coverage.
    """
    if monthly_expenses <= 0:
        return 100.0 if current_balance > 0 else 0.0
    return _clamp(current_balance / monthly_expenses * 10)


def diversification_factor(income_category_count: int) -> float:
    """25 points per distinct income source, saturating at four"""
    return float(min(100, income_category_count * 25))


def calculate_health_score(factors: HealthFactors) -> int:
    """Weighted sum of factors, rounded half-up"""
    score = sum(getattr(factors, name) * weight for name, weight in WEIGHTS.items())
    return int(math.floor(score + 0.5))


def determine_risk_level(score: float) -> str:
    """
    Map health score to risk tier.

    - 70+:   low
    - 40-69: medium
    - <40:   high
    """
    if score >= 70:
        return "low"
    elif score >= 40:
        return "medium"
    else:
        return "high"


def generate_recommendations(factors: HealthFactors) -> List[str]:
    return [advice for name, threshold, advice in RECOMMENDATION_RULES if getattr(factors, name) < threshold]


def assess_financial_health(
    savings_rate: float,
    total_income: float,
    total_debt: float,
    current_balance: float,
    monthly_expenses: Sequence[float],
    average_monthly_expenses: float,
    income_category_count: int,
) -> FinancialHealth:
    """
    Main entry point: score the five factors and build the assessment.

    Args:
        savings_rate: 12-month savings rate (fraction of income)
        total_income: 12-month income
        total_debt: Outstanding balance of active debts
        current_balance: Lifetime balance
        monthly_expenses: Single-month expense totals, most recent first
        average_monthly_expenses: Mean monthly expenses over the last 3 months
        income_category_count: Distinct income categories
    """
    factors = HealthFactors(
        savings_rate=savings_rate_factor(savings_rate),
        debt_to_income=debt_to_income_factor(total_debt, total_income),
        expense_stability=expense_stability_factor(monthly_expenses),
        emergency_fund=emergency_fund_factor(current_balance, average_monthly_expenses),
        diversification=diversification_factor(income_category_count),
    )
    score = calculate_health_score(factors)

    return FinancialHealth(
        score=score,
        factors=factors,
        recommendations=generate_recommendations(factors),
        risk_level=determine_risk_level(score),
    )
