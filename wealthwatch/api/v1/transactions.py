"""/v1/transactions - income and expense records"""

from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from wealthwatch.api.v1.schemas import TransactionCreate, TransactionResponse, TransactionUpdate
from wealthwatch.api.dependencies import get_request_id, get_today
from wealthwatch.config import settings
from wealthwatch.domain.tracking import recent_transactions
from wealthwatch.infrastructure.database.session import get_db
from wealthwatch.infrastructure.database.repositories import TransactionRepository
from wealthwatch.infrastructure.observability.metrics import record_mutation
from wealthwatch.infrastructure.observability.logging import log_record_change

router = APIRouter()


@router.get("/transactions", response_model=List[TransactionResponse])
def list_transactions(db: Session = Depends(get_db)):
    return [TransactionResponse.model_validate(t) for t in TransactionRepository(db).get_all()]


@router.get("/transactions/recent", response_model=List[TransactionResponse])
def list_recent_transactions(
    days: int = Query(settings.recent_transactions_days, ge=1),
    limit: int = Query(settings.recent_transactions_limit, ge=1),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Newest transactions from the last `days` days"""
    recent = recent_transactions(TransactionRepository(db).get_all(), today, days=days, limit=limit)
    return [TransactionResponse.model_validate(t) for t in recent]


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
def create_transaction(body: TransactionCreate, request: Request, db: Session = Depends(get_db)):
    transaction = TransactionRepository(db).add(**body.model_dump())
    db.commit()

    record_mutation("transaction", "created")
    log_record_change(get_request_id(request), "transaction", "created", transaction.id)
    return TransactionResponse.model_validate(transaction)


@router.patch("/transactions/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    body: TransactionUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    transaction = TransactionRepository(db).update(transaction_id, **body.model_dump(exclude_unset=True, exclude_none=True))
    if transaction is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    db.commit()

    record_mutation("transaction", "updated")
    log_record_change(get_request_id(request), "transaction", "updated", transaction_id)
    return TransactionResponse.model_validate(transaction)


@router.delete("/transactions/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: str, request: Request, db: Session = Depends(get_db)):
    if not TransactionRepository(db).delete(transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
    db.commit()

    record_mutation("transaction", "deleted")
    log_record_change(get_request_id(request), "transaction", "deleted", transaction_id)
    return Response(status_code=204)
