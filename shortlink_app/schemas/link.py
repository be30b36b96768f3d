import json
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from shortlink_app.config import settings
from shortlink_app.schemas.base import EdgeRecord


class DomainProps(EdgeRecord):
    """Row of the Domain table"""
    id: Optional[str] = None
    slug: str
    target: Optional[str] = None
    project_id: Optional[str] = Field(None, alias="projectId")


class LinkProps(EdgeRecord):
    """
    Row of the Link table.

    MySQL hands booleans back as 0/1 and JSON columns may arrive as text,
    both are coerced here.
    """
    id: str
    domain: str
    key: str
    url: str

    proxy: bool = False
    rewrite: bool = False
    public_stats: bool = Field(False, alias="publicStats")

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    password: Optional[str] = None
    expires_at: Optional[datetime] = Field(None, alias="expiresAt")

    ios: Optional[str] = None
    android: Optional[str] = None
    geo: Optional[Dict[str, Any]] = None

    project_id: Optional[str] = Field(None, alias="projectId")

    @field_validator("geo", mode="before")
    @classmethod
    def decode_geo(cls, value):
        if isinstance(value, (str, bytes)):
            return json.loads(value) if value else None
        return value


class RootDomainLink(DomainProps):
    """
    A bare domain resolved as if it were a link.

    Carries every Domain column plus `key` (always the root sentinel) and
    `url` (the domain's target).
    """
    key: str = settings.root_key
    url: Optional[str] = None
