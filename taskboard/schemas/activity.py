from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel

from taskboard.models.activity import ActivityAction
from taskboard.models.task import TaskStatus, TaskPriority


class CreatedSummary(BaseModel):
    title: str
    priority: TaskPriority


class DeletedSummary(BaseModel):
    title: str


# status_changed and priority_changed carry bare enum values,
# created/deleted carry a summary of the task
ActivityValue = Union[TaskStatus, TaskPriority, CreatedSummary, DeletedSummary]


class TaskActivityOut(BaseModel):
    id: int
    user_id: int
    task_id: int
    action: ActivityAction
    old_value: Optional[ActivityValue] = None
    new_value: Optional[ActivityValue] = None
    created_at: datetime

    class Config:
        from_attributes = True
