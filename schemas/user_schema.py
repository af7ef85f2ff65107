"""Schemas for user registration and session listings."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List

from .meal_schema import MealRecord


class UserCreateRequest(BaseModel):
    """Request payload for registering an anonymous user."""

    name: str = Field(..., min_length=1, examples=["Ana"], description="Display name")


class UserRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    session_id: str


class SessionListingResponse(BaseModel):
    """Every user and meal sharing the caller's session."""

    User: List[UserRecord]
    Meals: List[MealRecord]
