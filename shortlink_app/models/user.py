from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from shortlink_app.database.connection import Base


class User(Base):
    __tablename__ = "User"

    id = Column(String(191), primary_key=True)
    name = Column(String(191), nullable=True)
    email = Column(String(191), unique=True, nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), server_default=func.now())


class Token(Base):
    """
    API token. Only the hash of the key is stored; lookups go through
    `hashedKey` and `lastUsed` is bumped on every authenticated request.
    """
    __tablename__ = "Token"

    id = Column(String(191), primary_key=True)
    name = Column(String(191), nullable=True)
    hashed_key = Column("hashedKey", String(191), unique=True, nullable=False)
    partial_key = Column("partialKey", String(191), nullable=True)
    last_used = Column("lastUsed", DateTime, nullable=True)
    user_id = Column("userId", String(191), ForeignKey("User.id"), nullable=False, index=True)
