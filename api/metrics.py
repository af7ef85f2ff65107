"""Metrics API router: meal counts for the caller's session."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_read
from core.repository import MealRepository
from core.session import require_session_id
from schemas import MetricsResponse

router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_model=MetricsResponse)
def get_metrics(
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db_read),
):
    """Count the session's meals, in total and split by diet flag."""
    counts = MealRepository(db).diet_counts(session_id)
    return MetricsResponse(
        Totalnumberofregisteredmeals=sum(counts.values()),
        Totalamountofmealswithinthediet=counts.get("yes", 0),
        Totalnumberofmealsoutsidethediet=counts.get("no", 0),
    )
