"""Session value resolved from a Supabase access token."""
from dataclasses import dataclass
from typing import Optional

import httpx
from supabase import AuthError

from milkdirect.errors import Unauthenticated
from milkdirect.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


@dataclass(frozen=True)
class Session:
    """Authenticated identity passed explicitly into cart/order operations."""
    user_id: str
    access_token: str
    email: Optional[str] = None


def require_session(session: Optional[Session], message: Optional[str] = None) -> Session:
    """Return the session or raise Unauthenticated before any write happens."""
    if session is None:
        raise Unauthenticated(message)
    return session


def parse_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer" and parts[1]:
        return parts[1]
    return None


async def resolve_session(db, authorization: Optional[str]) -> Optional[Session]:
    """
    Look up the current user for a bearer token.

    Returns None when the header is missing, malformed, or the token is
    rejected by Supabase auth.
    """
    token = parse_bearer_token(authorization)
    if token is None:
        return None

    try:
        user = await db.get_auth_user(token)
    except (AuthError, httpx.HTTPError) as e:
        logger.warning("Session lookup failed: %s", type(e).__name__)
        return None

    if user is None:
        return None

    logger.debug("Resolved session for user %s", sanitize_id_for_logging(user.id))
    return Session(user_id=str(user.id), access_token=token, email=getattr(user, "email", None))
