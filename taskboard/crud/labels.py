"""Data access for the labels table."""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.models.label import Label
from taskboard.utils.formatting import utcnow


def create_label(db: Session, *, user_id: int, name: str, color: str) -> Label:
    label = Label(user_id=user_id, name=name, color=color, created_at=utcnow())
    db.add(label)
    db.commit()
    db.refresh(label)
    return label


def get_label_by_id(db: Session, label_id: int) -> Optional[Label]:
    return db.get(Label, label_id)


def get_labels_by_ids(db: Session, label_ids: List[int]) -> List[Label]:
    if not label_ids:
        return []
    return db.query(Label).filter(Label.id.in_(label_ids)).order_by(Label.id).all()


def get_labels_by_user(db: Session, user_id: int) -> List[Label]:
    return (
        db.query(Label)
        .filter(Label.user_id == user_id)
        .order_by(Label.created_at.desc(), Label.id.desc())
        .all()
    )


def get_label_by_user_and_name(db: Session, user_id: int, name: str) -> Optional[Label]:
    return db.query(Label).filter(Label.user_id == user_id, Label.name == name).first()


def count_labels_by_user(db: Session, user_id: int) -> int:
    return db.query(func.count(Label.id)).filter(Label.user_id == user_id).scalar()


def update_label(db: Session, label: Label, changes: dict) -> Label:
    for field, value in changes.items():
        setattr(label, field, value)
    db.commit()
    db.refresh(label)
    return label


def delete_label(db: Session, label: Label) -> None:
    db.delete(label)
    db.commit()
