"""Data access for per-user preferences (at most one row per user)."""
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.models.preferences import UserPreferences, Theme, DefaultView, SortBy, SortOrder
from taskboard.utils.formatting import utcnow


def default_preferences() -> dict:
    """A fresh copy of the defaults used when a user has no stored row."""
    return {
        "theme": Theme.system,
        "default_view": DefaultView.list,
        "sort_by": SortBy.created,
        "sort_order": SortOrder.desc,
        "show_completed": True,
        "enable_ai": True,
    }


def create_user_preferences(db: Session, user_id: int, **values) -> UserPreferences:
    now = utcnow()
    prefs = UserPreferences(user_id=user_id, created_at=now, updated_at=now, **values)
    db.add(prefs)
    db.commit()
    db.refresh(prefs)
    return prefs


def get_user_preferences_by_user(db: Session, user_id: int) -> Optional[UserPreferences]:
    return db.query(UserPreferences).filter(UserPreferences.user_id == user_id).first()


def get_or_create_user_preferences(db: Session, user_id: int) -> UserPreferences:
    existing = get_user_preferences_by_user(db, user_id)
    if existing is not None:
        return existing
    try:
        return create_user_preferences(db, user_id, **default_preferences())
    except IntegrityError:
        # a concurrent request created the row first
        db.rollback()
        return get_user_preferences_by_user(db, user_id)


def update_user_preferences(db: Session, prefs: UserPreferences, changes: dict) -> UserPreferences:
    for field, value in changes.items():
        setattr(prefs, field, value)
    prefs.updated_at = utcnow()
    db.commit()
    db.refresh(prefs)
    return prefs


def count_preferences_by_user(db: Session, user_id: int) -> int:
    return db.query(func.count(UserPreferences.id)).filter(UserPreferences.user_id == user_id).scalar()
