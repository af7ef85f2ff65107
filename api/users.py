"""User API router.

Provides anonymous registration on ``POST /`` and the session listing, which
is served by one handler mounted on both ``GET /`` and ``GET /meal``.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from core.repository import MealRepository, UserRepository
from core.session import SessionContext, attach_session_cookie, require_session_id, resolve_session
from database import models
from schemas import MealRecord, SessionListingResponse, UserCreateRequest, UserRecord

logger = get_logger("api.users")
router = APIRouter(tags=["users"])

LISTING_PATHS = ("/", "/meal")


@router.post("/", status_code=201, response_class=Response)
def create_user(
    payload: UserCreateRequest,
    session: SessionContext = Depends(resolve_session),
    db: Session = Depends(get_db_write),
):
    """Register a user under the caller's session.

    When the request carries no ``sessionId`` cookie a new session id is
    minted and returned in ``Set-Cookie``; otherwise the existing id is
    reused, so several users may share one session.

    Args:
        payload: `UserCreateRequest` with a non-empty name.
        session: Resolved or freshly issued session.
        db: SQLAlchemy session (write) injected by dependency.

    Returns:
        Empty 201 response, carrying the cookie for new sessions.
    """
    user = UserRepository(db).create(
        models.User(name=payload.name, session_id=session.session_id)
    )
    logger.info("User %s registered (new_session=%s)", user.id, session.issued)
    return attach_session_cookie(Response(status_code=201), session)


def list_session(
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db_read),
) -> SessionListingResponse:
    """Return every user and meal recorded under the caller's session."""
    users = UserRepository(db).list_for_session(session_id)
    meals = MealRepository(db).list_for_session(session_id)
    return SessionListingResponse(
        User=[UserRecord.model_validate(u) for u in users],
        Meals=[MealRecord.model_validate(m) for m in meals],
    )


for _path in LISTING_PATHS:
    router.add_api_route(
        _path,
        list_session,
        methods=["GET"],
        response_model=SessionListingResponse,
        name=f"list_session{_path.replace('/', '_')}",
    )
