from sqlalchemy import Column, Integer, String, DateTime
from taskboard.database import Base
from taskboard.utils.formatting import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
