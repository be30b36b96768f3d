from typing import Optional

from shortlink_app.schemas.base import EdgeRecord


class ApiKeyUser(EdgeRecord):
    """User resolved from a hashed API key"""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
