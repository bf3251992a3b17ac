from typing import Optional

from pydantic import BaseModel

from taskboard.models.preferences import Theme, DefaultView, SortBy, SortOrder


class PreferencesUpdate(BaseModel):
    theme: Optional[Theme] = None
    default_view: Optional[DefaultView] = None
    sort_by: Optional[SortBy] = None
    sort_order: Optional[SortOrder] = None
    show_completed: Optional[bool] = None
    enable_ai: Optional[bool] = None


class PreferencesOut(BaseModel):
    theme: Theme
    default_view: DefaultView
    sort_by: SortBy
    sort_order: SortOrder
    show_completed: bool
    enable_ai: bool

    class Config:
        from_attributes = True
