from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from taskboard.crud import activity as activity_crud
from taskboard.crud import tasks as tasks_crud
from taskboard.database import get_db
from taskboard.dependencies import get_current_user, ensure_owned
from taskboard.errors import NotFound, Forbidden
from taskboard.models.user import User
from taskboard.schemas.activity import TaskActivityOut
from taskboard.utils.constants import DEFAULT_RECENT_ACTIVITIES, MAX_RECENT_ACTIVITIES

router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("/", response_model=List[TaskActivityOut])
def get_all(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return activity_crud.get_activity_by_user(db, user.id)


@router.get("/recent", response_model=List[TaskActivityOut])
def get_recent(
    limit: int = Query(DEFAULT_RECENT_ACTIVITIES, ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return activity_crud.get_recent_activity_by_user(db, user.id, min(limit, MAX_RECENT_ACTIVITIES))


@router.get("/task/{task_id}", response_model=List[TaskActivityOut])
def get_by_task(task_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """History of one task, newest first.

    History outlives its task, so for a deleted task ownership is checked
    against the activity rows themselves.
    """
    task = tasks_crud.get_task_by_id(db, task_id)
    if task is not None:
        ensure_owned(task, user, "task")
        return activity_crud.get_activity_by_task(db, task_id, user.id)

    history = activity_crud.get_activity_by_task(db, task_id, user.id)
    if history:
        return history
    if activity_crud.get_activity_by_task(db, task_id):
        raise Forbidden("Not authorized to access this task")
    raise NotFound("Task not found")
