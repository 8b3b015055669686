"""
MilkDirect Marketplace - Main FastAPI Application

Single entry point for all API routes (deployed as one serverless function).
"""
import sys
from pathlib import Path
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Add project root to path for serverless deployments
_base_path = Path(__file__).parent.parent
if str(_base_path) not in sys.path:
    sys.path.insert(0, str(_base_path))

from milkdirect import __version__
from milkdirect.config import get_cors_origins
from milkdirect.logging import get_logger
from milkdirect.routers import public_router, webapp_router
from milkdirect.routers.deps import shutdown_services
from milkdirect.services.database import close_database, init_database

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    await init_database()
    yield
    # Shutdown
    await shutdown_services()
    await close_database()


app = FastAPI(
    title="MilkDirect Marketplace",
    description="Direct-to-consumer milk marketplace API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(public_router)
app.include_router(webapp_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "milkdirect"}
