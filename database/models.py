"""SQLAlchemy ORM models for the meal tracker service.

Two tables back the API: ``user`` holds anonymous registrations and ``meal``
holds logged meals. Both are linked loosely by the ``session_id`` string
issued in the ``sessionId`` cookie; there is no foreign key between them.
"""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _new_id() -> str:
    return str(uuid4())


class User(Base):
    """ORM model representing an anonymous user registration."""

    __tablename__ = "user"
    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    session_id = Column(Text, nullable=False, index=True)


class Meal(Base):
    """ORM model representing a logged meal.

    ``itsontheDiet`` keeps the wire name of the compliance flag so rows
    serialize directly into responses.
    """

    __tablename__ = "meal"
    __table_args__ = (
        CheckConstraint("\"itsontheDiet\" IN ('yes', 'no')", name="ck_meal_diet_flag"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Text, nullable=False)
    hour = Column(Text, nullable=False)
    itsontheDiet = Column(Text, nullable=False)
    # nullable: meals may be logged before any session cookie exists
    session_id = Column(Text, nullable=True, index=True)
