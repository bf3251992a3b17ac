from datetime import datetime

from pydantic import BaseModel, field_validator

from taskboard.models.comment import CommentType
from taskboard.utils.constants import MAX_COMMENT_LENGTH
from taskboard.utils.validation import sanitize_string, is_valid_comment_content


class CommentCreate(BaseModel):
    content: str
    type: CommentType = CommentType.user_note

    @field_validator("content")
    @classmethod
    def content_valid(cls, v: str) -> str:
        v = sanitize_string(v)
        if not is_valid_comment_content(v):
            raise ValueError(f"Invalid comment content (must be 1-{MAX_COMMENT_LENGTH} characters)")
        return v


class CommentOut(BaseModel):
    id: int
    task_id: int
    user_id: int
    content: str
    type: CommentType
    created_at: datetime

    class Config:
        from_attributes = True
