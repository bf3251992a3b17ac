import enum

from sqlalchemy import Column, Integer, ForeignKey, DateTime, JSON, Index, Enum as SQLEnum
from taskboard.database import Base


class ActivityAction(str, enum.Enum):
    created = "created"
    updated = "updated"
    completed = "completed"
    deleted = "deleted"
    status_changed = "status_changed"
    priority_changed = "priority_changed"


class TaskActivity(Base):
    __tablename__ = "task_activity"
    __table_args__ = (Index("ix_task_activity_user_created", "user_id", "created_at"),)

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # No FK: history outlives the task it describes
    task_id = Column(Integer, nullable=False, index=True)
    action = Column(SQLEnum(ActivityAction, native_enum=False), nullable=False)
    old_value = Column(JSON, nullable=True)
    new_value = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False)
