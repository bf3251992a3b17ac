import enum

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Index, Enum as SQLEnum
from taskboard.database import Base


class ThreadStatus(str, enum.Enum):
    active = "active"
    archived = "archived"


class Thread(Base):
    """AI conversation thread."""
    __tablename__ = "threads"
    __table_args__ = (Index("ix_threads_user_status", "user_id", "status"),)

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=True)
    status = Column(SQLEnum(ThreadStatus, native_enum=False), nullable=False, default=ThreadStatus.active)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
