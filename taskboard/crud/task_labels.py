"""Data access for task/label associations."""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.models.task_label import TaskLabel
from taskboard.utils.formatting import utcnow


def create_task_label(db: Session, *, task_id: int, label_id: int, user_id: int) -> TaskLabel:
    task_label = TaskLabel(task_id=task_id, label_id=label_id, user_id=user_id, created_at=utcnow())
    db.add(task_label)
    db.commit()
    db.refresh(task_label)
    return task_label


def get_labels_for_task(db: Session, task_id: int) -> List[TaskLabel]:
    return db.query(TaskLabel).filter(TaskLabel.task_id == task_id).order_by(TaskLabel.id).all()


def get_tasks_for_label(db: Session, label_id: int) -> List[TaskLabel]:
    return db.query(TaskLabel).filter(TaskLabel.label_id == label_id).order_by(TaskLabel.id).all()


def get_task_label(db: Session, task_id: int, label_id: int) -> Optional[TaskLabel]:
    return (
        db.query(TaskLabel)
        .filter(TaskLabel.task_id == task_id, TaskLabel.label_id == label_id)
        .first()
    )


def task_label_exists(db: Session, task_id: int, label_id: int) -> bool:
    return get_task_label(db, task_id, label_id) is not None


def count_task_labels_by_user(db: Session, user_id: int) -> int:
    return db.query(func.count(TaskLabel.id)).filter(TaskLabel.user_id == user_id).scalar()


def delete_task_label(db: Session, task_id: int, label_id: int) -> bool:
    """Remove one association. Returns False when it did not exist."""
    task_label = get_task_label(db, task_id, label_id)
    if task_label is None:
        return False
    db.delete(task_label)
    db.commit()
    return True


def delete_all_labels_from_task(db: Session, task_id: int) -> int:
    deleted = (
        db.query(TaskLabel)
        .filter(TaskLabel.task_id == task_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted


def delete_all_tasks_from_label(db: Session, label_id: int) -> int:
    deleted = (
        db.query(TaskLabel)
        .filter(TaskLabel.label_id == label_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
