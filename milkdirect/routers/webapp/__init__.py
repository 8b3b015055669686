"""WebApp API Router.

Endpoints for the storefront frontend, combined under /api/webapp.
"""

from fastapi import APIRouter

from .ai_chat import router as ai_chat_router
from .auth import router as auth_router
from .cart import router as cart_router
from .orders import router as orders_router
from .profile import router as profile_router

router = APIRouter(prefix="/api/webapp", tags=["webapp"])

router.include_router(auth_router)
router.include_router(profile_router)
router.include_router(cart_router)
router.include_router(orders_router)
router.include_router(ai_chat_router)

__all__ = ["router"]
