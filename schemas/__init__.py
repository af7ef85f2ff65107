"""Pydantic schema package for request and response models."""

from .user_schema import UserCreateRequest, UserRecord, SessionListingResponse
from .meal_schema import MealCreateRequest, MealUpdateRequest, MealRecord, MealLookupResponse
from .metrics_schema import MetricsResponse

__all__ = [
    "UserCreateRequest",
    "UserRecord",
    "SessionListingResponse",
    "MealCreateRequest",
    "MealUpdateRequest",
    "MealRecord",
    "MealLookupResponse",
    "MetricsResponse",
]
