"""FastAPI dependencies for the request session."""
from typing import Optional

from fastapi import Header

from milkdirect.services.database import get_database

from .session import Session, resolve_session


async def get_optional_session(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> Optional[Session]:
    """
    Resolve the caller's session, or None for anonymous requests.

    Operations decide for themselves whether a session is required, so the
    error message can name what the buyer was trying to do.
    """
    return await resolve_session(get_database(), authorization)
