from pydantic import Field, computed_field
from typing import Optional

from shortlink_app.config import settings
from shortlink_app.schemas.base import EdgeRecord


class WorkspaceProps(EdgeRecord):
    """Row of the Project table"""
    id: str
    name: Optional[str] = None
    slug: Optional[str] = None
    plan: Optional[str] = None
    ai_usage: int = Field(0, alias="aiUsage")
    ai_limit: Optional[int] = Field(None, alias="aiLimit")

    @computed_field
    @property
    def workspace_id(self) -> str:
        """Externally visible id (raw id with the workspace prefix)"""
        return f"{settings.workspace_id_prefix}{self.id}"


class AffiliateProps(EdgeRecord):
    id: str
    username: str
    email: str
    project_id: str = Field(..., alias="projectId")
    user_id: Optional[str] = Field(None, alias="userId")
