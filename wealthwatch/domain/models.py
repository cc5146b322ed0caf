"""Domain models - pure Python dataclasses representing finance records and derived aggregates"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Transaction:
    """Income or expense entry; direction is carried by type, never by sign"""

    id: str
    amount: float
    type: str  # "income" or "expense"
    category: str
    date: date
    description: str = ""
    subcategory: Optional[str] = None
    recurring: bool = False
    recurring_interval: Optional[str] = None  # daily | weekly | monthly | yearly
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Debt:
    """Money owed to a lender"""

    id: str
    lender_name: str
    amount: float
    due_date: date
    description: str = ""
    status: str = "active"  # active | paid | overdue
    current_balance: Optional[float] = None
    interest_rate: Optional[float] = None
    minimum_payment: Optional[float] = None


def normalize_debt(debt: Debt) -> Debt:
    """Fill in current_balance from the original principal when it was never recorded"""
    if debt.current_balance is None:
        return replace(debt, current_balance=debt.amount)
    return debt


@dataclass
class Budget:
    """Spending limit for a category over a period"""

    id: str
    category: str
    limit: float
    period: str  # monthly | yearly
    spent: float = 0.0
    alert_threshold: Optional[float] = None  # percentage, 0-100
    color: Optional[str] = None


@dataclass
class Goal:
    """Savings target"""

    id: str
    name: str
    target_amount: float
    target_date: date
    category: str  # emergency | investment | purchase | travel | other
    priority: str  # low | medium | high
    current_amount: float = 0.0
    status: str = "active"  # active | completed | paused
    description: Optional[str] = None


@dataclass
class DateWindow:
    """Inclusive calendar interval"""

    start: date
    end: date


@dataclass
class FinancialSummary:
    """Headline totals for a reporting horizon"""

    total_income: float
    total_expenses: float
    current_balance: float
    total_debt: float
    net_worth: float
    savings_rate: float
    monthly_average_savings: float


@dataclass
class SpendingPattern:
    """Category share of windowed expenses and its direction versus the prior window"""

    category: str
    amount: float
    percentage: float
    trend: str  # increasing | decreasing | stable
    monthly_average: float


@dataclass
class SubcategoryShare:
    name: str
    amount: float
    percentage: float


@dataclass
class CategoryInsight:
    """Per-category deep dive"""

    category: str
    total_spent: float
    transaction_count: int
    average_transaction: float
    trend: float  # raw percent change versus the prior window
    top_subcategories: List[SubcategoryShare] = field(default_factory=list)
    budget_usage: Optional[float] = None


@dataclass
class CashFlowData:
    """One month of the cash-flow series"""

    date: str  # "Jan 2024"
    income: float
    expenses: float
    net_flow: float
    balance: float  # running total from the start of the series


@dataclass
class HealthFactors:
    """Normalized 0-100 inputs to the health score"""

    savings_rate: float
    debt_to_income: float
    expense_stability: float
    emergency_fund: float
    diversification: float


@dataclass
class FinancialHealth:
    """Output of the health assessment"""

    score: int
    factors: HealthFactors
    recommendations: List[str]
    risk_level: str  # low | medium | high


@dataclass
class PredictiveInsight:
    type: str
    title: str
    message: str
    impact: str  # positive | warning


@dataclass
class BudgetStatus:
    """Budget with spending synced from transactions"""

    budget: Budget
    spent: float
    usage: float
    is_over_budget: bool
    is_near_limit: bool
    remaining: float


@dataclass
class GoalProgress:
    goal: Goal
    progress: float
    days_remaining: int
