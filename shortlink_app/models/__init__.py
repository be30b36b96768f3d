"""
Database models mirroring the tables edge queries read and write.

The schema itself is owned by the main application (migrations, foreign keys,
cascades). These models document the columns the raw SQL in
shortlink_app.services relies on and let tests build the same tables.
"""

from .user import User, Token
from .project import Project, Affiliate
from .link import Domain, Link

__all__ = ["User", "Token", "Project", "Affiliate", "Domain", "Link"]
