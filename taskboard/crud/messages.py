"""Data access for thread messages (append-only)."""
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.models.message import Message, MessageRole
from taskboard.utils.formatting import utcnow


def create_message(db: Session, *, thread_id: int, user_id: int, role: MessageRole, content: str) -> Message:
    message = Message(thread_id=thread_id, user_id=user_id, role=role, content=content, created_at=utcnow())
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def get_messages_by_thread(db: Session, thread_id: int) -> List[Message]:
    """Oldest first."""
    return (
        db.query(Message)
        .filter(Message.thread_id == thread_id)
        .order_by(Message.created_at.asc(), Message.id.asc())
        .all()
    )


def count_messages_by_user(db: Session, user_id: int) -> int:
    return db.query(func.count(Message.id)).filter(Message.user_id == user_id).scalar()


def delete_all_messages_in_thread(db: Session, thread_id: int) -> int:
    deleted = (
        db.query(Message)
        .filter(Message.thread_id == thread_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
