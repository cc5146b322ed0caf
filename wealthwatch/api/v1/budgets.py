"""/v1/budgets - category spending limits"""

from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from wealthwatch.api.v1.schemas import BudgetCreate, BudgetResponse, BudgetStatusResponse, BudgetUpdate
from wealthwatch.api.dependencies import get_request_id, get_today
from wealthwatch.domain.tracking import budget_status
from wealthwatch.infrastructure.database.session import get_db
from wealthwatch.infrastructure.database.repositories import BudgetRepository, TransactionRepository
from wealthwatch.infrastructure.observability.metrics import record_mutation
from wealthwatch.infrastructure.observability.logging import log_record_change

router = APIRouter()


@router.get("/budgets", response_model=List[BudgetResponse])
def list_budgets(db: Session = Depends(get_db)):
    return [BudgetResponse.model_validate(b) for b in BudgetRepository(db).get_all()]


@router.get("/budgets/status", response_model=List[BudgetStatusResponse])
def get_budget_status(db: Session = Depends(get_db), today: date = Depends(get_today)):
    """
    Recompute spending for every budget from current transactions.

    Changed `spent` values are written back so plain budget listings stay in step.
    """
    budget_repo = BudgetRepository(db)
    statuses = budget_status(budget_repo.get_all(), TransactionRepository(db).get_all(), today)

    if budget_repo.sync_spent(statuses):
        db.commit()

    return [BudgetStatusResponse.model_validate(s) for s in statuses]


@router.post("/budgets", response_model=BudgetResponse, status_code=201)
def create_budget(body: BudgetCreate, request: Request, db: Session = Depends(get_db)):
    budget = BudgetRepository(db).add(**body.model_dump())
    db.commit()

    record_mutation("budget", "created")
    log_record_change(get_request_id(request), "budget", "created", budget.id)
    return BudgetResponse.model_validate(budget)


@router.patch("/budgets/{budget_id}", response_model=BudgetResponse)
def update_budget(budget_id: str, body: BudgetUpdate, request: Request, db: Session = Depends(get_db)):
    budget = BudgetRepository(db).update(budget_id, **body.model_dump(exclude_unset=True, exclude_none=True))
    if budget is None:
        raise HTTPException(status_code=404, detail="Budget not found")
    db.commit()

    record_mutation("budget", "updated")
    log_record_change(get_request_id(request), "budget", "updated", budget_id)
    return BudgetResponse.model_validate(budget)


@router.delete("/budgets/{budget_id}", status_code=204)
def delete_budget(budget_id: str, request: Request, db: Session = Depends(get_db)):
    if not BudgetRepository(db).delete(budget_id):
        raise HTTPException(status_code=404, detail="Budget not found")
    db.commit()

    record_mutation("budget", "deleted")
    log_record_change(get_request_id(request), "budget", "deleted", budget_id)
    return Response(status_code=204)
