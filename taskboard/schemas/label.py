from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from taskboard.utils.constants import MAX_LABEL_NAME_LENGTH
from taskboard.utils.validation import sanitize_string, is_valid_label_name, is_valid_hex_color


def _clean_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = sanitize_string(v)
    if not is_valid_label_name(v):
        raise ValueError(f"Invalid label name (must be 1-{MAX_LABEL_NAME_LENGTH} characters)")
    return v


def _check_color(v: Optional[str]) -> Optional[str]:
    if v is not None and not is_valid_hex_color(v):
        raise ValueError("Invalid color (must be a hex color code like #6366f1)")
    return v


class LabelCreate(BaseModel):
    name: str
    # picked from the default palette when omitted
    color: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_valid(cls, v):
        return _clean_name(v)

    @field_validator("color")
    @classmethod
    def color_valid(cls, v):
        return _check_color(v)


class LabelUpdate(BaseModel):
    name: Optional[str] = None
    color: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_valid(cls, v):
        return _clean_name(v)

    @field_validator("color")
    @classmethod
    def color_valid(cls, v):
        return _check_color(v)


class LabelOut(BaseModel):
    id: int
    user_id: int
    name: str
    color: str
    created_at: datetime

    class Config:
        from_attributes = True


class TaskLabelOut(BaseModel):
    id: int
    task_id: int
    label_id: int
    user_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class TaskLabelKey(BaseModel):
    task_id: int
    label_id: int
