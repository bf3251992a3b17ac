"""Data access for the task activity log.

Rows are append-only and are never removed when their task is deleted. Values
are written only through the ``log_*`` helpers, one per action kind:

* created: new_value = {"title", "priority"}
* deleted: old_value = {"title"}
* status_changed / priority_changed: old/new enum values
* updated: no values
"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.models.activity import TaskActivity, ActivityAction
from taskboard.models.task import Task, TaskStatus, TaskPriority
from taskboard.utils.constants import DEFAULT_RECENT_ACTIVITIES
from taskboard.utils.formatting import utcnow


def _create_task_activity(db: Session, task: Task, action: ActivityAction,
                          old_value=None, new_value=None) -> TaskActivity:
    activity = TaskActivity(
        user_id=task.user_id,
        task_id=task.id,
        action=action,
        old_value=old_value,
        new_value=new_value,
        created_at=utcnow(),
    )
    db.add(activity)
    db.commit()
    db.refresh(activity)
    return activity


def log_task_created(db: Session, task: Task) -> TaskActivity:
    return _create_task_activity(
        db, task, ActivityAction.created,
        new_value={"title": task.title, "priority": TaskPriority(task.priority).value},
    )


def log_task_deleted(db: Session, task: Task) -> TaskActivity:
    return _create_task_activity(db, task, ActivityAction.deleted, old_value={"title": task.title})


def log_status_change(db: Session, task: Task, old: TaskStatus, new: TaskStatus) -> TaskActivity:
    return _create_task_activity(
        db, task, ActivityAction.status_changed,
        old_value=TaskStatus(old).value, new_value=TaskStatus(new).value,
    )


def log_priority_change(db: Session, task: Task, old: TaskPriority, new: TaskPriority) -> TaskActivity:
    return _create_task_activity(
        db, task, ActivityAction.priority_changed,
        old_value=TaskPriority(old).value, new_value=TaskPriority(new).value,
    )


def log_task_updated(db: Session, task: Task) -> TaskActivity:
    return _create_task_activity(db, task, ActivityAction.updated)


def _newest_first(query):
    return query.order_by(TaskActivity.created_at.desc(), TaskActivity.id.desc())


def get_activity_by_task(db: Session, task_id: int, user_id: Optional[int] = None) -> List[TaskActivity]:
    query = db.query(TaskActivity).filter(TaskActivity.task_id == task_id)
    if user_id is not None:
        query = query.filter(TaskActivity.user_id == user_id)
    return _newest_first(query).all()


def get_activity_by_user(db: Session, user_id: int) -> List[TaskActivity]:
    return _newest_first(db.query(TaskActivity).filter(TaskActivity.user_id == user_id)).all()


def get_recent_activity_by_user(db: Session, user_id: int,
                                limit: Optional[int] = DEFAULT_RECENT_ACTIVITIES) -> List[TaskActivity]:
    query = _newest_first(db.query(TaskActivity).filter(TaskActivity.user_id == user_id))
    return query.limit(limit or DEFAULT_RECENT_ACTIVITIES).all()


def count_activity_by_user(db: Session, user_id: int) -> int:
    return db.query(func.count(TaskActivity.id)).filter(TaskActivity.user_id == user_id).scalar()
