"""/v1/goals - savings targets"""

from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from wealthwatch.api.v1.schemas import GoalCreate, GoalProgressResponse, GoalResponse, GoalUpdate
from wealthwatch.api.dependencies import get_request_id, get_today
from wealthwatch.domain.tracking import goal_progress
from wealthwatch.infrastructure.database.session import get_db
from wealthwatch.infrastructure.database.repositories import GoalRepository
from wealthwatch.infrastructure.observability.metrics import record_mutation
from wealthwatch.infrastructure.observability.logging import log_record_change

router = APIRouter()


@router.get("/goals", response_model=List[GoalResponse])
def list_goals(db: Session = Depends(get_db)):
    return [GoalResponse.model_validate(g) for g in GoalRepository(db).get_all()]


@router.get("/goals/active", response_model=List[GoalProgressResponse])
def list_active_goals(db: Session = Depends(get_db), today: date = Depends(get_today)):
    """Active goals with progress, highest priority and nearest deadline first"""
    return [GoalProgressResponse.model_validate(g) for g in goal_progress(GoalRepository(db).get_all(), today)]


@router.post("/goals", response_model=GoalResponse, status_code=201)
def create_goal(body: GoalCreate, request: Request, db: Session = Depends(get_db)):
    goal = GoalRepository(db).add(**body.model_dump())
    db.commit()

    record_mutation("goal", "created")
    log_record_change(get_request_id(request), "goal", "created", goal.id)
    return GoalResponse.model_validate(goal)


@router.patch("/goals/{goal_id}", response_model=GoalResponse)
def update_goal(goal_id: str, body: GoalUpdate, request: Request, db: Session = Depends(get_db)):
    goal = GoalRepository(db).update(goal_id, **body.model_dump(exclude_unset=True, exclude_none=True))
    if goal is None:
        raise HTTPException(status_code=404, detail="Goal not found")
    db.commit()

    record_mutation("goal", "updated")
    log_record_change(get_request_id(request), "goal", "updated", goal_id)
    return GoalResponse.model_validate(goal)


@router.delete("/goals/{goal_id}", status_code=204)
def delete_goal(goal_id: str, request: Request, db: Session = Depends(get_db)):
    if not GoalRepository(db).delete(goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    db.commit()

    record_mutation("goal", "deleted")
    log_record_change(get_request_id(request), "goal", "deleted", goal_id)
    return Response(status_code=204)
