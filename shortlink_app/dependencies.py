"""
FastAPI dependencies for dependency injection.

The database handle is created once per process from settings and injected
into the service, so tests can override `get_edge_database` with a handle
bound to a test engine (or a disabled one).
"""

from functools import lru_cache

from fastapi import Depends

from shortlink_app.config import settings
from shortlink_app.database.connection import EdgeDatabase
from shortlink_app.services.edge_service import EdgeService


@lru_cache()
def get_edge_database() -> EdgeDatabase:
    """
    Get the database handle (singleton).

    The engine itself is created lazily on the first query.
    """
    db = EdgeDatabase.from_settings(settings)
    if not db.enabled:
        print("⚠️  No database URL configured, edge queries are disabled")
    return db


def get_edge_service(db: EdgeDatabase = Depends(get_edge_database)) -> EdgeService:
    return EdgeService(db=db)
