from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Index
from taskboard.database import Base


class Label(Base):
    __tablename__ = "labels"
    __table_args__ = (Index("ix_labels_user_name", "user_id", "name"),)

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    color = Column(String(7), nullable=False)
    created_at = Column(DateTime, nullable=False)
