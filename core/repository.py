"""Repository helpers for session-scoped database operations.

Every read goes through the ``session_id`` string carried by the
``sessionId`` cookie. Meal updates and deletes match on the row id alone.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from database.models import Base, Meal, User

T = TypeVar('T', bound=Base)


class SessionScopedRepository(Generic[T]):
    """Generic repository over a model carrying a ``session_id`` column.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object.

        Args:
            obj: Model instance to persist.

        Returns:
            The persisted object with refreshed attributes.
        """
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def list_for_session(self, session_id: str) -> List[T]:
        """Return every row owned by ``session_id``, possibly none."""
        return (
            self.session.query(self.model)
            .filter(self.model.session_id == session_id)
            .all()
        )


class UserRepository(SessionScopedRepository[User]):
    model = User


class MealRepository(SessionScopedRepository[Meal]):
    model = Meal

    def get_for_session(self, session_id: str, meal_id: str) -> Optional[Meal]:
        """Return the meal matching both session and id, or None."""
        return (
            self.session.query(Meal)
            .filter(Meal.session_id == session_id, Meal.id == meal_id)
            .first()
        )

    def update_by_id(self, meal_id: str, values: Dict[str, Any]) -> int:
        """Replace the mutable fields of a meal.

        The match is on ``id`` only, so any caller holding a meal id may
        rewrite it regardless of session.

        Returns:
            Number of rows affected; 0 when the id is unknown.
        """
        affected = (
            self.session.query(Meal)
            .filter(Meal.id == meal_id)
            .update(values, synchronize_session=False)
        )
        self.session.commit()
        return affected

    def delete_by_id(self, meal_id: str) -> int:
        """Delete a meal by id only. Returns rows affected."""
        affected = (
            self.session.query(Meal)
            .filter(Meal.id == meal_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return affected

    def diet_counts(self, session_id: str) -> Dict[str, int]:
        """Count a session's meals grouped by diet flag in one query.

        Returns:
            Mapping of flag (``yes``/``no``) to count; flags with no meals
            are absent.
        """
        rows = (
            self.session.query(Meal.itsontheDiet, func.count(Meal.id))
            .filter(Meal.session_id == session_id)
            .group_by(Meal.itsontheDiet)
            .all()
        )
        return {flag: count for flag, count in rows}
