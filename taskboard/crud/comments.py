"""Data access for task comments."""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.models.comment import TaskComment, CommentType
from taskboard.utils.formatting import utcnow


def create_task_comment(db: Session, *, task_id: int, user_id: int, content: str,
                        type: CommentType = CommentType.user_note) -> TaskComment:
    comment = TaskComment(task_id=task_id, user_id=user_id, content=content, type=type, created_at=utcnow())
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


def get_comment_by_id(db: Session, comment_id: int) -> Optional[TaskComment]:
    return db.get(TaskComment, comment_id)


def get_comments_by_task(db: Session, task_id: int) -> List[TaskComment]:
    return (
        db.query(TaskComment)
        .filter(TaskComment.task_id == task_id)
        .order_by(TaskComment.created_at.asc(), TaskComment.id.asc())
        .all()
    )


def count_comments_by_user(db: Session, user_id: int) -> int:
    return db.query(func.count(TaskComment.id)).filter(TaskComment.user_id == user_id).scalar()


def delete_task_comment(db: Session, comment: TaskComment) -> None:
    db.delete(comment)
    db.commit()


def delete_all_comments_from_task(db: Session, task_id: int) -> int:
    deleted = (
        db.query(TaskComment)
        .filter(TaskComment.task_id == task_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
