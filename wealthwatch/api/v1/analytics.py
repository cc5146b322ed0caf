"""GET /v1/analytics/* - derived metrics over the current record snapshot"""

import time
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from wealthwatch.api.v1.schemas import (
    CashFlowResponse,
    CategoryInsightResponse,
    FinancialHealthResponse,
    FinancialSummaryResponse,
    OverviewResponse,
    PredictiveInsightResponse,
    SpendingPatternResponse,
)
from wealthwatch.api.dependencies import get_analytics, get_request_id
from wealthwatch.config import settings
from wealthwatch.domain.analytics import FinancialAnalytics
from wealthwatch.infrastructure.database.session import get_db
from wealthwatch.infrastructure.database.repositories import BudgetRepository
from wealthwatch.infrastructure.observability.metrics import analytics_query_counter, record_health_assessment
from wealthwatch.infrastructure.observability.logging import log_health_assessment
from wealthwatch.utils.formatting import to_csv

router = APIRouter()


@router.get("/analytics/summary", response_model=FinancialSummaryResponse)
def get_summary(
    months: int = Query(settings.summary_months, ge=1, description="Reporting horizon in months"),
    analytics: FinancialAnalytics = Depends(get_analytics),
):
    """Income, expenses, savings for the horizon; balance, debt, net worth over all history"""
    analytics_query_counter.labels(view="summary").inc()
    return FinancialSummaryResponse.model_validate(analytics.summary(months))


@router.get("/analytics/spending-patterns", response_model=List[SpendingPatternResponse])
def get_spending_patterns(
    months: int = Query(settings.pattern_months, ge=1),
    analytics: FinancialAnalytics = Depends(get_analytics),
):
    analytics_query_counter.labels(view="spending_patterns").inc()
    return [SpendingPatternResponse.model_validate(p) for p in analytics.spending_patterns(months)]


@router.get("/analytics/category-insights", response_model=List[CategoryInsightResponse])
def get_category_insights(
    months: int = Query(settings.pattern_months, ge=1),
    analytics: FinancialAnalytics = Depends(get_analytics),
    db: Session = Depends(get_db),
):
    """Per-category breakdown, with budget usage where a category has a budget"""
    analytics_query_counter.labels(view="category_insights").inc()
    insights = analytics.category_insights(months, budgets=BudgetRepository(db).get_all())
    return [CategoryInsightResponse.model_validate(i) for i in insights]


@router.get("/analytics/cash-flow", response_model=List[CashFlowResponse])
def get_cash_flow(
    months: int = Query(settings.cash_flow_months, ge=1),
    analytics: FinancialAnalytics = Depends(get_analytics),
):
    analytics_query_counter.labels(view="cash_flow").inc()
    return [CashFlowResponse.model_validate(point) for point in analytics.cash_flow_data(months)]


@router.get("/analytics/cash-flow/export", response_class=Response)
def export_cash_flow(
    months: int = Query(settings.cash_flow_months, ge=1),
    analytics: FinancialAnalytics = Depends(get_analytics),
):
    """Cash-flow series as a CSV download, one row per month"""
    analytics_query_counter.labels(view="cash_flow_export").inc()
    return Response(
        content=to_csv(analytics.cash_flow_data(months)),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="cash-flow-{months}m.csv"'},
    )


@router.get("/analytics/health", response_model=FinancialHealthResponse)
def get_financial_health(request: Request, analytics: FinancialAnalytics = Depends(get_analytics)):
    """
    Weighted financial health score.

    Factors (0-100): savings rate, debt-to-income, expense stability,
    emergency fund coverage, income diversification.
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        health = analytics.calculate_financial_health()
    except Exception as e:
        logging.error(f"Health assessment failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.perf_counter() - start_time) * 1000
    analytics_query_counter.labels(view="health").inc()
    record_health_assessment(health.score, health.risk_level)
    log_health_assessment(request_id, health.score, health.risk_level, len(health.recommendations), duration_ms)

    return FinancialHealthResponse.model_validate(health)


@router.get("/analytics/insights", response_model=List[PredictiveInsightResponse])
def get_predictive_insights(analytics: FinancialAnalytics = Depends(get_analytics)):
    analytics_query_counter.labels(view="insights").inc()
    return [PredictiveInsightResponse.model_validate(i) for i in analytics.predictive_insights()]


@router.get("/analytics/overview", response_model=OverviewResponse)
def get_overview(
    request: Request,
    analytics: FinancialAnalytics = Depends(get_analytics),
    db: Session = Depends(get_db),
):
    """Summary plus every advanced metric at the configured default horizons"""
    analytics_query_counter.labels(view="overview").inc()
    health = analytics.calculate_financial_health()
    record_health_assessment(health.score, health.risk_level)

    return OverviewResponse(
        summary=FinancialSummaryResponse.model_validate(analytics.summary(settings.summary_months)),
        spending_patterns=[
            SpendingPatternResponse.model_validate(p) for p in analytics.spending_patterns(settings.pattern_months)
        ],
        category_insights=[
            CategoryInsightResponse.model_validate(i)
            for i in analytics.category_insights(settings.pattern_months, budgets=BudgetRepository(db).get_all())
        ],
        cash_flow=[CashFlowResponse.model_validate(p) for p in analytics.cash_flow_data(settings.cash_flow_months)],
        financial_health=FinancialHealthResponse.model_validate(health),
        predictive_insights=[PredictiveInsightResponse.model_validate(i) for i in analytics.predictive_insights()],
    )
