"""Schemas for meal requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional


class MealCreateRequest(BaseModel):
    """Payload for logging a meal."""

    name: str = Field(..., examples=["Lunch"])
    description: str = Field(..., examples=["Rice and beans"])
    date: str = Field(..., examples=["2024-01-01"])
    hour: str = Field(..., examples=["12:00"])
    type: Literal["yes", "no"] = Field(..., examples=["yes"], description="Whether the meal is within the diet")

    def to_columns(self) -> dict:
        """Map the payload onto `meal` table columns."""
        return {
            "name": self.name,
            "description": self.description,
            "date": self.date,
            "hour": self.hour,
            "itsontheDiet": self.type,
        }


class MealUpdateRequest(MealCreateRequest):
    """Full replacement of a meal's mutable fields; same shape as creation."""


class MealRecord(BaseModel):
    """Representation of a stored meal in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    date: str
    hour: str
    itsontheDiet: str
    session_id: Optional[str] = None


class MealLookupResponse(BaseModel):
    """Single meal lookup; ``Meal`` is null when nothing matched."""

    Meal: Optional[MealRecord] = None
