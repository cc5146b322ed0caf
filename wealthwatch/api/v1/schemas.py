"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
import datetime
from typing import List, Literal, Optional

TransactionType = Literal["income", "expense"]
RecurringInterval = Literal["daily", "weekly", "monthly", "yearly"]
DebtStatus = Literal["active", "paid", "overdue"]
BudgetPeriod = Literal["monthly", "yearly"]
GoalCategory = Literal["emergency", "investment", "purchase", "travel", "other"]
Priority = Literal["low", "medium", "high"]
GoalStatus = Literal["active", "completed", "paused"]


class DomainModel(BaseModel):
    """Response schema populated from domain dataclasses"""

    model_config = ConfigDict(from_attributes=True)


# Transactions


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions"""

    amount: float = Field(..., ge=0.01, description="Amount must be greater than 0")
    type: TransactionType
    category: str = Field(..., min_length=1)
    subcategory: Optional[str] = None
    date: datetime.date
    description: str = Field(..., min_length=1)
    tags: Optional[List[str]] = None
    recurring: bool = False
    recurring_interval: Optional[RecurringInterval] = None


class TransactionUpdate(BaseModel):
    """Request body for PATCH /v1/transactions/{id}"""

    amount: Optional[float] = Field(None, ge=0.01)
    type: Optional[TransactionType] = None
    category: Optional[str] = Field(None, min_length=1)
    subcategory: Optional[str] = None
    date: Optional[datetime.date] = None
    description: Optional[str] = Field(None, min_length=1)
    tags: Optional[List[str]] = None
    recurring: Optional[bool] = None
    recurring_interval: Optional[RecurringInterval] = None


class TransactionResponse(DomainModel):
    id: str
    amount: float
    type: TransactionType
    category: str
    subcategory: Optional[str] = None
    date: datetime.date
    description: str
    tags: List[str] = []
    recurring: bool
    recurring_interval: Optional[RecurringInterval] = None


# Debts


class DebtCreate(BaseModel):
    """Request body for POST /v1/debts"""

    lender_name: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0.01)
    due_date: datetime.date
    interest_rate: Optional[float] = Field(None, ge=0, le=100)
    description: str = Field(..., min_length=1)
    minimum_payment: Optional[float] = Field(None, ge=0)
    current_balance: Optional[float] = Field(None, ge=0)


class DebtUpdate(BaseModel):
    """Request body for PATCH /v1/debts/{id}"""

    lender_name: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0.01)
    due_date: Optional[datetime.date] = None
    interest_rate: Optional[float] = Field(None, ge=0, le=100)
    description: Optional[str] = Field(None, min_length=1)
    minimum_payment: Optional[float] = Field(None, ge=0)
    current_balance: Optional[float] = Field(None, ge=0)
    status: Optional[DebtStatus] = None


class DebtResponse(DomainModel):
    id: str
    lender_name: str
    amount: float
    current_balance: Optional[float] = None
    due_date: datetime.date
    interest_rate: Optional[float] = None
    minimum_payment: Optional[float] = None
    description: str
    status: DebtStatus


# Budgets


class BudgetCreate(BaseModel):
    """Request body for POST /v1/budgets"""

    category: str = Field(..., min_length=1)
    limit: float = Field(..., ge=0.01, description="Budget limit must be greater than 0")
    period: BudgetPeriod
    alert_threshold: Optional[float] = Field(None, ge=0, le=100)
    color: Optional[str] = None


class BudgetUpdate(BaseModel):
    """Request body for PATCH /v1/budgets/{id}"""

    category: Optional[str] = Field(None, min_length=1)
    limit: Optional[float] = Field(None, ge=0.01)
    period: Optional[BudgetPeriod] = None
    alert_threshold: Optional[float] = Field(None, ge=0, le=100)
    color: Optional[str] = None


class BudgetResponse(DomainModel):
    id: str
    category: str
    limit: float
    spent: float
    period: BudgetPeriod
    alert_threshold: Optional[float] = None
    color: Optional[str] = None


class BudgetStatusResponse(DomainModel):
    budget: BudgetResponse
    spent: float
    usage: float
    is_over_budget: bool
    is_near_limit: bool
    remaining: float


# Goals


class GoalCreate(BaseModel):
    """Request body for POST /v1/goals"""

    name: str = Field(..., min_length=1)
    target_amount: float = Field(..., ge=0.01)
    current_amount: float = Field(0.0, ge=0)
    target_date: datetime.date
    category: GoalCategory
    description: Optional[str] = None
    priority: Priority


class GoalUpdate(BaseModel):
    """Request body for PATCH /v1/goals/{id}"""

    name: Optional[str] = Field(None, min_length=1)
    target_amount: Optional[float] = Field(None, ge=0.01)
    current_amount: Optional[float] = Field(None, ge=0)
    target_date: Optional[datetime.date] = None
    category: Optional[GoalCategory] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[GoalStatus] = None


class GoalResponse(DomainModel):
    id: str
    name: str
    target_amount: float
    current_amount: float
    target_date: datetime.date
    category: GoalCategory
    description: Optional[str] = None
    priority: Priority
    status: GoalStatus


class GoalProgressResponse(DomainModel):
    goal: GoalResponse
    progress: float
    days_remaining: int


# Analytics


class FinancialSummaryResponse(DomainModel):
    total_income: float
    total_expenses: float
    current_balance: float
    total_debt: float
    net_worth: float
    savings_rate: float
    monthly_average_savings: float


class SpendingPatternResponse(DomainModel):
    category: str
    amount: float
    percentage: float
    trend: Literal["increasing", "decreasing", "stable"]
    monthly_average: float


class SubcategoryShareResponse(DomainModel):
    name: str
    amount: float
    percentage: float


class CategoryInsightResponse(DomainModel):
    category: str
    total_spent: float
    transaction_count: int
    average_transaction: float
    trend: float
    top_subcategories: List[SubcategoryShareResponse]
    budget_usage: Optional[float] = None


class CashFlowResponse(DomainModel):
    date: str
    income: float
    expenses: float
    net_flow: float
    balance: float


class HealthFactorsResponse(DomainModel):
    savings_rate: float
    debt_to_income: float
    expense_stability: float
    emergency_fund: float
    diversification: float


class FinancialHealthResponse(DomainModel):
    score: int
    factors: HealthFactorsResponse
    recommendations: List[str]
    risk_level: Literal["low", "medium", "high"]


class PredictiveInsightResponse(DomainModel):
    type: str
    title: str
    message: str
    impact: Literal["positive", "warning"]


class OverviewResponse(BaseModel):
    """Response for GET /v1/analytics/overview"""

    summary: FinancialSummaryResponse
    spending_patterns: List[SpendingPatternResponse]
    category_insights: List[CategoryInsightResponse]
    cash_flow: List[CashFlowResponse]
    financial_health: FinancialHealthResponse
    predictive_insights: List[PredictiveInsightResponse]


# Settings


class SettingsPayload(BaseModel):
    """Request/response body for /v1/settings"""

    currency: str = "USD"
    theme: Literal["light", "dark"] = "light"
    notifications: bool = True
    auto_backup: bool = False
