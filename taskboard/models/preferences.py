import enum

from sqlalchemy import Column, Integer, Boolean, ForeignKey, DateTime, Enum as SQLEnum
from taskboard.database import Base


class Theme(str, enum.Enum):
    light = "light"
    dark = "dark"
    system = "system"


class DefaultView(str, enum.Enum):
    list = "list"
    board = "board"


class SortBy(str, enum.Enum):
    created = "created"
    updated = "updated"
    priority = "priority"
    dueDate = "dueDate"
    custom = "custom"


class SortOrder(str, enum.Enum):
    asc = "asc"
    desc = "desc"


class UserPreferences(Base):
    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    theme = Column(SQLEnum(Theme, native_enum=False), nullable=False)
    default_view = Column(SQLEnum(DefaultView, native_enum=False), nullable=False)
    sort_by = Column(SQLEnum(SortBy, native_enum=False), nullable=False)
    sort_order = Column(SQLEnum(SortOrder, native_enum=False), nullable=False)
    show_completed = Column(Boolean, nullable=False)
    enable_ai = Column(Boolean, nullable=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
