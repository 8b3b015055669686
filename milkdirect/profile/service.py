"""Profile service: the caller's own profile row and sign-out."""
from typing import Optional

import httpx
from supabase import AuthError

from milkdirect.auth.session import Session, require_session
from milkdirect.errors import RemoteWriteFailed
from milkdirect.logging import get_logger, sanitize_id_for_logging
from milkdirect.services.database import Database
from milkdirect.services.models import Profile
from milkdirect.services.repositories import ProfileRepository

logger = get_logger(__name__)


class ProfileService:
    def __init__(self, repo: ProfileRepository, db: Database):
        self.repo = repo
        self.db = db

    async def get_profile(self, session: Optional[Session]) -> Profile:
        """Profile for the session; an empty one if the row does not exist yet."""
        session = require_session(session)
        profile = await self.repo.get(session.user_id)
        return profile or Profile(user_id=session.user_id)

    async def update_profile(
        self,
        session: Optional[Session],
        name: str,
        phone: str,
        address: str,
    ) -> Profile:
        session = require_session(session)
        profile = await self.repo.upsert(
            session.user_id, name.strip(), phone.strip(), address.strip()
        )
        logger.info("Updated profile for user %s", sanitize_id_for_logging(session.user_id))
        return profile

    async def sign_out(self, session: Optional[Session]) -> None:
        """Revoke the session's token with Supabase auth."""
        session = require_session(session)
        try:
            await self.db.sign_out(session.access_token)
        except (AuthError, httpx.HTTPError) as e:
            logger.error("Sign out failed: %s", type(e).__name__)
            raise RemoteWriteFailed("Failed to sign out") from e
        logger.info("Signed out user %s", sanitize_id_for_logging(session.user_id))
