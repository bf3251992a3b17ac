from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from taskboard.models.task import TaskStatus, TaskPriority
from taskboard.utils.constants import MAX_TASK_TITLE_LENGTH, MAX_TASK_DESCRIPTION_LENGTH
from taskboard.utils.formatting import as_naive_utc
from taskboard.utils.validation import (
    sanitize_string,
    is_valid_task_title,
    is_valid_task_description,
    is_valid_due_date,
)


def _clean_title(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = sanitize_string(v)
    if not is_valid_task_title(v):
        raise ValueError(f"Invalid task title (must be 1-{MAX_TASK_TITLE_LENGTH} characters)")
    return v


def _check_description(v: Optional[str]) -> Optional[str]:
    if not is_valid_task_description(v):
        raise ValueError(f"Invalid description (max {MAX_TASK_DESCRIPTION_LENGTH} characters)")
    return v


def _check_due_date(v: Optional[datetime]) -> Optional[datetime]:
    v = as_naive_utc(v)
    if not is_valid_due_date(v):
        raise ValueError("Invalid due date (must be in the future)")
    return v


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None
    priority: TaskPriority
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def title_valid(cls, v):
        return _clean_title(v)

    @field_validator("description")
    @classmethod
    def description_valid(cls, v):
        return _check_description(v)

    @field_validator("due_date")
    @classmethod
    def due_date_in_future(cls, v):
        return _check_due_date(v)


class TaskUpdate(BaseModel):
    """Every field is optional; only the fields present in the request are applied.

    An explicit null clears ``description`` and ``due_date``.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def title_valid(cls, v):
        return _clean_title(v)

    @field_validator("description")
    @classmethod
    def description_valid(cls, v):
        return _check_description(v)

    @field_validator("due_date")
    @classmethod
    def due_date_in_future(cls, v):
        return _check_due_date(v)


class TaskReorder(BaseModel):
    new_order: float = Field(allow_inf_nan=False)


class TaskOut(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    order: float
    created_at: datetime
    updated_at: datetime
    due_status: Optional[str] = None

    class Config:
        from_attributes = True


class TaskPage(BaseModel):
    items: List[TaskOut]
    page: int
    limit: int
    total: int
    pages: int


class TaskCounts(BaseModel):
    todo: int
    in_progress: int
    completed: int
    total: int
