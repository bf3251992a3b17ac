import enum

from sqlalchemy import Column, Integer, ForeignKey, Text, DateTime, Enum as SQLEnum
from taskboard.database import Base


class MessageRole(str, enum.Enum):
    user = "user"
    assistant = "assistant"


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True)
    thread_id = Column(Integer, ForeignKey("threads.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(SQLEnum(MessageRole, native_enum=False), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False)
