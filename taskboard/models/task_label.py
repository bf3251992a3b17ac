from sqlalchemy import Column, Integer, ForeignKey, DateTime
from taskboard.database import Base


class TaskLabel(Base):
    """Association row between a task and a label."""
    __tablename__ = "task_labels"

    id = Column(Integer, primary_key=True)
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=False, index=True)
    label_id = Column(Integer, ForeignKey("labels.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False)
