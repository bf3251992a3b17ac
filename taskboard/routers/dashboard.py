"""Read-only aggregates for the dashboard view."""
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from taskboard.crud import activity as activity_crud
from taskboard.crud import comments as comments_crud
from taskboard.crud import labels as labels_crud
from taskboard.crud import messages as messages_crud
from taskboard.crud import preferences as preferences_crud
from taskboard.crud import task_labels as task_labels_crud
from taskboard.crud import tasks as tasks_crud
from taskboard.crud import threads as threads_crud
from taskboard.database import get_db
from taskboard.dependencies import get_current_user
from taskboard.models.task import TaskStatus
from taskboard.models.user import User
from taskboard.schemas.activity import TaskActivityOut
from taskboard.schemas.dashboard import DashboardSummary, TaskTotals, RecordSummary
from taskboard.schemas.task import TaskOut
from taskboard.utils.constants import DEFAULT_RECENT_ACTIVITIES, MAX_RECENT_ACTIVITIES, RECENT_TASKS_LIMIT

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

# table name -> indexed per-user count
RECORD_COUNTERS = {
    "tasks": tasks_crud.count_tasks_by_user,
    "taskComments": comments_crud.count_comments_by_user,
    "taskActivity": activity_crud.count_activity_by_user,
    "userPreferences": preferences_crud.count_preferences_by_user,
    "labels": labels_crud.count_labels_by_user,
    "taskLabels": task_labels_crud.count_task_labels_by_user,
    "threads": threads_crud.count_threads_by_user,
    "messages": messages_crud.count_messages_by_user,
}


@router.get("/summary", response_model=DashboardSummary)
def summary(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    todo = tasks_crud.count_tasks_by_status(db, user.id, TaskStatus.todo)
    in_progress = tasks_crud.count_tasks_by_status(db, user.id, TaskStatus.in_progress)
    completed = tasks_crud.count_tasks_by_status(db, user.id, TaskStatus.completed)
    return DashboardSummary(
        tasks=TaskTotals(todo=todo, in_progress=in_progress, completed=completed,
                         total=todo + in_progress + completed),
        labels=labels_crud.count_labels_by_user(db, user.id),
    )


@router.get("/recent", response_model=List[TaskOut])
def recent(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """The most recently updated tasks."""
    tasks = tasks_crud.get_tasks_by_user(db, user.id)
    tasks.sort(key=lambda t: (t.updated_at, t.id), reverse=True)
    return tasks[:RECENT_TASKS_LIMIT]


@router.get("/activity", response_model=List[TaskActivityOut])
def recent_activity(
    limit: int = Query(DEFAULT_RECENT_ACTIVITIES, ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return activity_crud.get_recent_activity_by_user(db, user.id, min(limit, MAX_RECENT_ACTIVITIES))


@router.get("/records", response_model=RecordSummary)
def records(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Per-table record counts for the caller."""
    per_table = {table: count(db, user.id) for table, count in RECORD_COUNTERS.items()}
    return RecordSummary(per_table=per_table, total_records=sum(per_table.values()))
