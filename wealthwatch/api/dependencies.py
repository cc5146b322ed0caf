"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from wealthwatch.domain.analytics import FinancialAnalytics
from wealthwatch.infrastructure.database.session import get_db
from wealthwatch.infrastructure.database.repositories import DebtRepository, TransactionRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Reference date that anchors reporting windows"""
    return date.today()


def get_analytics(db: Session = Depends(get_db), today: date = Depends(get_today)) -> FinancialAnalytics:
    """Build a fresh analytics engine from the current record snapshot"""
    return FinancialAnalytics(
        TransactionRepository(db).get_all(),
        DebtRepository(db).get_all(),
        today=today,
    )
