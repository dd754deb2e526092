"""
Storefront - Main FastAPI Application

Single entry point for the storefront API. The browser client renders the
catalog and cart from these endpoints.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import get_cors_origins
from storefront.logging import get_logger
from storefront.routers import router as storefront_router
from storefront.session import get_session, reset_session

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup: load the catalog before the first request
    get_session()
    yield
    # Shutdown
    reset_session()
    logger.info("Storefront session closed")


app = FastAPI(
    title="Storefront",
    description="Catalog, cart and checkout API",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(storefront_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront"}
