"""
Typed records returned by the edge queries.
"""

from .base import EdgeRecord, parse_row
from .link import DomainProps, LinkProps, RootDomainLink
from .user import ApiKeyUser
from .workspace import AffiliateProps, WorkspaceProps

__all__ = [
    "EdgeRecord",
    "parse_row",
    "DomainProps",
    "LinkProps",
    "RootDomainLink",
    "ApiKeyUser",
    "AffiliateProps",
    "WorkspaceProps",
]
