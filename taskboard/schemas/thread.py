from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from taskboard.models.message import MessageRole
from taskboard.models.thread import ThreadStatus
from taskboard.utils.constants import MAX_THREAD_TITLE_LENGTH, MAX_MESSAGE_LENGTH
from taskboard.utils.validation import sanitize_string, is_valid_thread_title, is_valid_message_content


def _clean_title(v: Optional[str]) -> Optional[str]:
    # an empty title means "no title"
    if not v:
        return None
    if not is_valid_thread_title(v):
        raise ValueError(f"Invalid thread title (max {MAX_THREAD_TITLE_LENGTH} characters)")
    return sanitize_string(v)


class ThreadCreate(BaseModel):
    title: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_valid(cls, v):
        return _clean_title(v)


class ThreadUpdate(BaseModel):
    title: Optional[str] = None
    status: Optional[ThreadStatus] = None

    @field_validator("title")
    @classmethod
    def title_valid(cls, v):
        return _clean_title(v)


class MessageCreate(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def content_valid(cls, v: str) -> str:
        v = sanitize_string(v)
        if not is_valid_message_content(v):
            raise ValueError(f"Invalid message content (must be 1-{MAX_MESSAGE_LENGTH} characters)")
        return v


class ThreadOut(BaseModel):
    id: int
    user_id: int
    title: Optional[str] = None
    status: ThreadStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MessageOut(BaseModel):
    id: int
    thread_id: int
    user_id: int
    role: MessageRole
    content: str
    created_at: datetime

    class Config:
        from_attributes = True


class ThreadDetail(BaseModel):
    thread: ThreadOut
    messages: List[MessageOut]
