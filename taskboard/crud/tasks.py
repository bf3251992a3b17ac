"""Data access for the tasks table. No authorization happens here."""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.models.task import Task, TaskStatus, TaskPriority
from taskboard.utils.formatting import utcnow


def create_task(
    db: Session,
    *,
    user_id: int,
    title: str,
    priority: TaskPriority,
    order: float,
    status: TaskStatus = TaskStatus.todo,
    description: Optional[str] = None,
    due_date=None,
) -> Task:
    now = utcnow()
    task = Task(
        user_id=user_id,
        title=title,
        description=description,
        status=status,
        priority=priority,
        due_date=due_date,
        order=order,
        created_at=now,
        updated_at=now,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def get_task_by_id(db: Session, task_id: int) -> Optional[Task]:
    return db.get(Task, task_id)


def get_tasks_by_ids(db: Session, task_ids: List[int]) -> List[Task]:
    if not task_ids:
        return []
    return db.query(Task).filter(Task.id.in_(task_ids)).order_by(Task.id).all()


def _user_tasks(db: Session, user_id: int, search: Optional[str] = None):
    query = db.query(Task).filter(Task.user_id == user_id)
    if search:
        query = query.filter(Task.title.ilike(f"%{search}%"))
    return query


def get_tasks_by_user(
    db: Session,
    user_id: int,
    search: Optional[str] = None,
    limit: Optional[int] = None,
    offset: int = 0,
) -> List[Task]:
    """Newest first."""
    query = _user_tasks(db, user_id, search).order_by(Task.created_at.desc(), Task.id.desc())
    if limit is not None:
        query = query.limit(limit).offset(offset)
    return query.all()


def count_tasks_by_user(db: Session, user_id: int, search: Optional[str] = None) -> int:
    return _user_tasks(db, user_id, search).count()


def get_tasks_by_user_and_status(db: Session, user_id: int, status: TaskStatus) -> List[Task]:
    return db.query(Task).filter(Task.user_id == user_id, Task.status == status).all()


def get_tasks_by_user_status_ordered(db: Session, user_id: int, status: TaskStatus) -> List[Task]:
    # equal order values keep insertion order
    return (
        db.query(Task)
        .filter(Task.user_id == user_id, Task.status == status)
        .order_by(Task.order.asc(), Task.id.asc())
        .all()
    )


def update_task(db: Session, task: Task, changes: dict) -> Task:
    """Patch only the supplied fields and refresh updated_at."""
    for field, value in changes.items():
        setattr(task, field, value)
    task.updated_at = utcnow()
    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, task: Task) -> None:
    db.delete(task)
    db.commit()


def get_max_order_for_status(db: Session, user_id: int, status: TaskStatus) -> float:
    max_order = (
        db.query(func.max(Task.order))
        .filter(Task.user_id == user_id, Task.status == status)
        .scalar()
    )
    return max_order if max_order is not None else 0


def count_tasks_by_status(db: Session, user_id: int, status: TaskStatus) -> int:
    return (
        db.query(func.count(Task.id))
        .filter(Task.user_id == user_id, Task.status == status)
        .scalar()
    )
