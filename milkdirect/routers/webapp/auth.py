"""WebApp Auth Router."""
from typing import Optional

from fastapi import APIRouter, Depends

from milkdirect.auth import Session, get_optional_session
from milkdirect.errors import MarketplaceError
from milkdirect.profile import ProfileService

from ..deps import get_profile_service, to_http_exception

router = APIRouter(prefix="/auth", tags=["webapp-auth"])


@router.get("/me")
async def get_me(session: Optional[Session] = Depends(get_optional_session)):
    """Current identity, or `authenticated: false`."""
    if session is None:
        return {"authenticated": False}
    return {"authenticated": True, "user_id": session.user_id, "email": session.email}


@router.post("/logout")
async def logout(
    session: Optional[Session] = Depends(get_optional_session),
    profile_service: ProfileService = Depends(get_profile_service),
):
    try:
        await profile_service.sign_out(session)
    except MarketplaceError as e:
        raise to_http_exception(e)
    return {"success": True, "message": "Logged out successfully"}
