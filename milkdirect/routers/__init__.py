"""HTTP routers."""
from .public import router as public_router
from .webapp import router as webapp_router

__all__ = ["public_router", "webapp_router"]
