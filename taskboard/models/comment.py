import enum

from sqlalchemy import Column, Integer, ForeignKey, Text, DateTime, Enum as SQLEnum
from taskboard.database import Base


class CommentType(str, enum.Enum):
    user_note = "user_note"
    ai_suggestion = "ai_suggestion"
    ai_insight = "ai_insight"


class TaskComment(Base):
    __tablename__ = "task_comments"

    id = Column(Integer, primary_key=True)
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    type = Column(SQLEnum(CommentType, native_enum=False), nullable=False, default=CommentType.user_note)
    created_at = Column(DateTime, nullable=False)
