import enum

from sqlalchemy import Column, Integer, String, ForeignKey, Text, DateTime, Float, Index, Enum as SQLEnum
from taskboard.database import Base
from taskboard.utils.formatting import due_date_status


class TaskStatus(str, enum.Enum):
    todo = "todo"
    in_progress = "in_progress"
    completed = "completed"


class TaskPriority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_user_status_order", "user_id", "status", "order"),
        Index("ix_tasks_user_due_date", "user_id", "due_date"),
        # activity rows keep task ids after deletion, so ids are never reused
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(SQLEnum(TaskStatus, native_enum=False), nullable=False, default=TaskStatus.todo)
    priority = Column(SQLEnum(TaskPriority, native_enum=False), nullable=False, default=TaskPriority.medium)
    due_date = Column(DateTime, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    # Opaque sort key within (user_id, status); ties fall back to insertion order
    order = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    @property
    def due_status(self):
        if self.status == TaskStatus.completed:
            return None
        return due_date_status(self.due_date)

    def __repr__(self):
        return f"<Task {self.id}: {self.title[:50]}>"
