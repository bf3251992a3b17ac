from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.crud import preferences as preferences_crud
from taskboard.database import get_db
from taskboard.dependencies import get_current_user, rate_limit
from taskboard.models.user import User
from taskboard.schemas.preferences import PreferencesUpdate, PreferencesOut

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/", response_model=PreferencesOut)
def get_preferences(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Stored preferences, or the defaults (not persisted) when none exist."""
    prefs = preferences_crud.get_user_preferences_by_user(db, user.id)
    if prefs is None:
        return PreferencesOut(**preferences_crud.default_preferences())
    return prefs


@router.patch("/", response_model=PreferencesOut,
              dependencies=[Depends(rate_limit("update_preferences"))])
def update_preferences(payload: PreferencesUpdate, user: User = Depends(get_current_user),
                       db: Session = Depends(get_db)):
    changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    prefs = preferences_crud.get_or_create_user_preferences(db, user.id)
    return preferences_crud.update_user_preferences(db, prefs, changes)
