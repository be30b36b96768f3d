from sqlalchemy import (
    Column, String, Text, DateTime, Boolean, JSON, ForeignKey, UniqueConstraint
)
from shortlink_app.database.connection import Base


class Domain(Base):
    __tablename__ = "Domain"

    id = Column(String(191), primary_key=True)
    slug = Column(String(191), unique=True, nullable=False)
    target = Column(Text, nullable=True)  # Destination for the bare domain ("_root")
    project_id = Column("projectId", String(191), ForeignKey("Project.id"), nullable=True)


class Link(Base):
    """
    Short link.

    `key` is stored URI-decoded and punycode-encoded; (domain, key) is unique.
    """
    __tablename__ = "Link"
    id = Column(String(191), primary_key=True)
    domain = Column(String(191), nullable=False, index=True)
    # "key" clashes with Column.key, so the attribute gets another name
    link_key = Column("key", String(190), nullable=False)
    url = Column(Text, nullable=False)

    # Behaviour flags
    proxy = Column(Boolean, default=False, nullable=False)
    rewrite = Column(Boolean, default=False, nullable=False)
    public_stats = Column("publicStats", Boolean, default=False, nullable=False)

    # Preview metadata
    title = Column(String(191), nullable=True)
    description = Column(String(280), nullable=True)
    image = Column(Text, nullable=True)

    password = Column(String(191), nullable=True)
    expires_at = Column("expiresAt", DateTime, nullable=True)

    # Device / geo targeting
    ios = Column(Text, nullable=True)
    android = Column(Text, nullable=True)
    geo = Column(JSON, nullable=True)

    project_id = Column("projectId", String(191), ForeignKey("Project.id"), nullable=True)

    __table_args__ = (UniqueConstraint(domain, link_key),)
