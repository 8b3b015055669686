"""
Profile Endpoints

The caller's own profile: name, phone, delivery address.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from milkdirect.auth import Session, get_optional_session
from milkdirect.errors import ERROR_UPDATE_PROFILE, MarketplaceError
from milkdirect.profile import ProfileService

from ..deps import get_profile_service, to_http_exception
from .models import UpdateProfileRequest

router = APIRouter(tags=["webapp-profile"])


@router.get("/profile")
async def get_profile(
    session: Optional[Session] = Depends(get_optional_session),
    profile_service: ProfileService = Depends(get_profile_service),
):
    try:
        profile = await profile_service.get_profile(session)
    except MarketplaceError as e:
        raise to_http_exception(e)
    return {**profile.model_dump(), "email": session.email}


@router.put("/profile")
async def update_profile(
    request: UpdateProfileRequest,
    session: Optional[Session] = Depends(get_optional_session),
    profile_service: ProfileService = Depends(get_profile_service),
):
    try:
        profile = await profile_service.update_profile(
            session, request.name, request.phone, request.address
        )
    except MarketplaceError as e:
        raise to_http_exception(e, ERROR_UPDATE_PROFILE)
    return {**profile.model_dump(), "message": "Profile updated successfully!"}
