"""/v1/settings, /v1/export, /v1/data - preferences and whole-store operations"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from wealthwatch.api.v1.schemas import SettingsPayload
from wealthwatch.api.dependencies import get_request_id
from wealthwatch.infrastructure.database.session import get_db
from wealthwatch.infrastructure.database.repositories import SettingsRepository, clear_all_data, export_all_data
from wealthwatch.infrastructure.observability.metrics import record_mutation

router = APIRouter()


@router.get("/settings", response_model=SettingsPayload)
def get_settings(db: Session = Depends(get_db)):
    return SettingsPayload(**SettingsRepository(db).get())


@router.put("/settings", response_model=SettingsPayload)
def save_settings(body: SettingsPayload, db: Session = Depends(get_db)):
    saved = SettingsRepository(db).save(body.model_dump())
    db.commit()

    record_mutation("settings", "updated")
    return SettingsPayload(**saved)


@router.get("/export")
def export_data(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Full backup of every record and the current settings.

    Returns:
        transactions, debts, budgets, goals, settings, export_date
    """
    return export_all_data(db)


@router.delete("/data", status_code=204)
def clear_data(request: Request, db: Session = Depends(get_db)):
    """Delete every record and stored setting"""
    clear_all_data(db)
    db.commit()

    record_mutation("all", "cleared")
    logging.warning("All data cleared", extra={"request_id": get_request_id(request)})
    return Response(status_code=204)
