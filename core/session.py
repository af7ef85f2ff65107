"""Session cookie resolution and the session gate.

Sessions are opaque UUID strings carried in the ``sessionId`` cookie. They
are never checked against the ``user`` table: holding the cookie value is
the only proof of ownership.
"""

import os
from typing import NamedTuple, Optional
from uuid import uuid4

from fastapi import Cookie, Response

from core.exceptions import UnauthorizedError

SESSION_COOKIE_NAME = "sessionId"
SESSION_COOKIE_PATH = "/"
SESSION_COOKIE_MAX_AGE = int(os.getenv("SESSION_COOKIE_MAX_AGE", str(60 * 60 * 24 * 7)))


class SessionContext(NamedTuple):
    session_id: str
    issued: bool


def resolve_session(
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
) -> SessionContext:
    """Use the caller's session id, or mint a new one when the cookie is absent.

    A freshly minted id is flagged ``issued`` so the handler can attach it to
    the response it builds with `attach_session_cookie`.
    """
    if session_id:
        return SessionContext(session_id, False)
    return SessionContext(str(uuid4()), True)


def attach_session_cookie(response: Response, context: SessionContext) -> Response:
    """Set the ``sessionId`` cookie on ``response`` if the session is new."""
    if context.issued:
        response.set_cookie(
            SESSION_COOKIE_NAME,
            context.session_id,
            max_age=SESSION_COOKIE_MAX_AGE,
            path=SESSION_COOKIE_PATH,
        )
    return response


def optional_session_id(
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
) -> Optional[str]:
    return session_id or None


def require_session_id(
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
) -> str:
    """Session gate for read endpoints.

    Raises:
        UnauthorizedError: If the request carries no ``sessionId`` cookie.
    """
    if not session_id:
        raise UnauthorizedError()
    return session_id
