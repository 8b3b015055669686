"""Authentication package."""
from .dependencies import get_optional_session
from .session import Session, parse_bearer_token, require_session, resolve_session

__all__ = [
    "Session",
    "get_optional_session",
    "parse_bearer_token",
    "require_session",
    "resolve_session",
]
