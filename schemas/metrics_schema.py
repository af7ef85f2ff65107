"""Schemas for the per-session metrics endpoint."""

from pydantic import BaseModel


class MetricsResponse(BaseModel):
    """Meal counts for one session."""

    Totalnumberofregisteredmeals: int
    Totalamountofmealswithinthediet: int
    Totalnumberofmealsoutsidethediet: int
