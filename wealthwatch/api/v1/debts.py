"""/v1/debts - money owed to lenders"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from wealthwatch.api.v1.schemas import DebtCreate, DebtResponse, DebtUpdate
from wealthwatch.api.dependencies import get_request_id
from wealthwatch.infrastructure.database.session import get_db
from wealthwatch.infrastructure.database.repositories import DebtRepository
from wealthwatch.infrastructure.observability.metrics import record_mutation
from wealthwatch.infrastructure.observability.logging import log_record_change

router = APIRouter()


@router.get("/debts", response_model=List[DebtResponse])
def list_debts(db: Session = Depends(get_db)):
    return [DebtResponse.model_validate(d) for d in DebtRepository(db).get_all()]


@router.post("/debts", response_model=DebtResponse, status_code=201)
def create_debt(body: DebtCreate, request: Request, db: Session = Depends(get_db)):
    """
    Record a new debt.

    New debts are always active; current_balance defaults to the principal.
    """
    debt = DebtRepository(db).add(**body.model_dump())
    db.commit()

    record_mutation("debt", "created")
    log_record_change(get_request_id(request), "debt", "created", debt.id)
    return DebtResponse.model_validate(debt)


@router.patch("/debts/{debt_id}", response_model=DebtResponse)
def update_debt(debt_id: str, body: DebtUpdate, request: Request, db: Session = Depends(get_db)):
    debt = DebtRepository(db).update(debt_id, **body.model_dump(exclude_unset=True, exclude_none=True))
    if debt is None:
        raise HTTPException(status_code=404, detail="Debt not found")
    db.commit()

    record_mutation("debt", "updated")
    log_record_change(get_request_id(request), "debt", "updated", debt_id)
    return DebtResponse.model_validate(debt)


@router.delete("/debts/{debt_id}", status_code=204)
def delete_debt(debt_id: str, request: Request, db: Session = Depends(get_db)):
    if not DebtRepository(db).delete(debt_id):
        raise HTTPException(status_code=404, detail="Debt not found")
    db.commit()

    record_mutation("debt", "deleted")
    log_record_change(get_request_id(request), "debt", "deleted", debt_id)
    return Response(status_code=204)
