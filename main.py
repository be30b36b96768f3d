from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from shortlink_app.config import settings
from shortlink_app.api.v1 import links, redirect
from shortlink_app.database.connection import EdgeDatabase
from shortlink_app.dependencies import get_edge_database


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Release pooled database connections on shutdown"""
    yield
    # Only if a request ever created the handle
    if get_edge_database.cache_info().currsize:
        get_edge_database().dispose()
        print("✅ Edge database connections released")


# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title=settings.app_name,
    version=settings.app_version,
    description="Edge data access for short links, domains and workspaces",
    debug=settings.debug
)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check(db: EdgeDatabase = Depends(get_edge_database)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "database_configured": db.enabled,
    }


######## Include routers
app.include_router(links.router, prefix="/api/v1")
app.include_router(redirect.router)
