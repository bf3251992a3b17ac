"""Data access for AI conversation threads."""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.models.thread import Thread, ThreadStatus
from taskboard.utils.formatting import utcnow


def create_thread(db: Session, *, user_id: int, title: Optional[str] = None,
                  status: ThreadStatus = ThreadStatus.active) -> Thread:
    now = utcnow()
    thread = Thread(user_id=user_id, title=title, status=status, created_at=now, updated_at=now)
    db.add(thread)
    db.commit()
    db.refresh(thread)
    return thread


def get_thread_by_id(db: Session, thread_id: int) -> Optional[Thread]:
    return db.get(Thread, thread_id)


def get_threads_by_user(db: Session, user_id: int, status: Optional[ThreadStatus] = None) -> List[Thread]:
    query = db.query(Thread).filter(Thread.user_id == user_id)
    if status is not None:
        query = query.filter(Thread.status == status)
    return query.order_by(Thread.created_at.desc(), Thread.id.desc()).all()


def count_threads_by_user(db: Session, user_id: int) -> int:
    return db.query(func.count(Thread.id)).filter(Thread.user_id == user_id).scalar()


def update_thread(db: Session, thread: Thread, changes: dict) -> Thread:
    for field, value in changes.items():
        setattr(thread, field, value)
    thread.updated_at = utcnow()
    db.commit()
    db.refresh(thread)
    return thread


def delete_thread(db: Session, thread: Thread) -> None:
    db.delete(thread)
    db.commit()
