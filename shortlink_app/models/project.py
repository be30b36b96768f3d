from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from shortlink_app.database.connection import Base


class Project(Base):
    """
    Workspace record.

    The primary key is the raw id; callers outside the database see it with
    a `ws_` prefix (see shortlink_app.utils.keys.strip_workspace_prefix).
    """
    __tablename__ = "Project"

    id = Column(String(191), primary_key=True)
    name = Column(String(191), nullable=True)
    slug = Column(String(191), unique=True, nullable=True)
    plan = Column(String(191), default="free")
    ai_usage = Column("aiUsage", Integer, default=0, nullable=False)
    ai_limit = Column("aiLimit", Integer, default=10, nullable=True)


class Affiliate(Base):
    __tablename__ = "Affiliate"

    id = Column(String(191), primary_key=True)
    username = Column(String(191), nullable=False)
    email = Column(String(191), nullable=False)
    project_id = Column("projectId", String(191), ForeignKey("Project.id"), nullable=False)
    user_id = Column("userId", String(191), ForeignKey("User.id"), nullable=True)

    __table_args__ = (UniqueConstraint(project_id, username),)
