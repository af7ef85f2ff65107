"""Meals API router.

Create, fetch, update and delete meals. Creation reads the session cookie
when present; fetch is gated on it. Update and delete match on the meal id
alone and answer with plain-text confirmations.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from core.repository import MealRepository
from core.session import optional_session_id, require_session_id
from database import models
from schemas import MealCreateRequest, MealLookupResponse, MealRecord, MealUpdateRequest

logger = get_logger("api.meals")
router = APIRouter(tags=["meals"])

UPDATED_MESSAGE = "successfully update meal"
DELETED_MESSAGE = "successfully deleted meal"


@router.post("/meal", status_code=201, response_class=Response)
def create_meal(
    payload: MealCreateRequest,
    session_id: Optional[str] = Depends(optional_session_id),
    db: Session = Depends(get_db_write),
):
    """Log a meal for the caller's session.

    No session is required: without a cookie the meal is stored with a null
    ``session_id`` and is not reachable through any listing.
    """
    meal = MealRepository(db).create(
        models.Meal(session_id=session_id, **payload.to_columns())
    )
    logger.info("Meal %s created for session %s", meal.id, session_id)
    return Response(status_code=201)


@router.get("/meal/{meal_id}", response_model=MealLookupResponse)
def get_meal(
    meal_id: UUID,
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db_read),
):
    """Fetch one of the caller's meals.

    Returns:
        `MealLookupResponse` whose ``Meal`` is null when no meal of this
        session has the given id.
    """
    meal = MealRepository(db).get_for_session(session_id, str(meal_id))
    return MealLookupResponse(Meal=MealRecord.model_validate(meal) if meal else None)


@router.put("/meal/update/{meal_id}", response_class=PlainTextResponse)
def update_meal(
    meal_id: UUID,
    payload: MealUpdateRequest,
    db: Session = Depends(get_db_write),
):
    """Replace a meal's name, description, date, hour and diet flag."""
    affected = MealRepository(db).update_by_id(str(meal_id), payload.to_columns())
    logger.info("Meal %s update affected %s row(s)", meal_id, affected)
    return PlainTextResponse(UPDATED_MESSAGE)


@router.delete("/meal/delete/{meal_id}", response_class=PlainTextResponse)
def delete_meal(meal_id: UUID, db: Session = Depends(get_db_write)):
    affected = MealRepository(db).delete_by_id(str(meal_id))
    logger.info("Meal %s delete affected %s row(s)", meal_id, affected)
    return PlainTextResponse(DELETED_MESSAGE)
