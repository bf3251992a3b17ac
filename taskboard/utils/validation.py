"""Pure input predicates. No database access."""
import re
from datetime import datetime
from typing import Optional

from taskboard.utils.constants import (
    MAX_TASK_TITLE_LENGTH,
    MAX_TASK_DESCRIPTION_LENGTH,
    MAX_LABEL_NAME_LENGTH,
    MAX_COMMENT_LENGTH,
    MAX_MESSAGE_LENGTH,
    MAX_THREAD_TITLE_LENGTH,
)
from taskboard.utils.formatting import utcnow

HEX_COLOR_PATTERN = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")


def sanitize_string(value: str) -> str:
    return value.strip()


def _is_bounded(value: str, max_length: int) -> bool:
    length = len(value.strip())
    return 0 < length <= max_length


def is_valid_task_title(title: str) -> bool:
    return _is_bounded(title, MAX_TASK_TITLE_LENGTH)


def is_valid_task_description(description: Optional[str]) -> bool:
    if not description:
        return True
    return len(description) <= MAX_TASK_DESCRIPTION_LENGTH


def is_valid_label_name(name: str) -> bool:
    return _is_bounded(name, MAX_LABEL_NAME_LENGTH)


def is_valid_hex_color(color: str) -> bool:
    """True for "#rgb" or "#rrggbb" hex codes, e.g. "#6366f1"."""
    return bool(HEX_COLOR_PATTERN.fullmatch(color))


def is_valid_due_date(due_date: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """A due date is optional; when present it must be in the future (naive UTC)."""
    if due_date is None:
        return True
    return due_date > (now or utcnow())


def is_valid_comment_content(content: str) -> bool:
    return _is_bounded(content, MAX_COMMENT_LENGTH)


def is_valid_message_content(content: str) -> bool:
    return _is_bounded(content, MAX_MESSAGE_LENGTH)


def is_valid_thread_title(title: Optional[str]) -> bool:
    if not title:
        return True
    return _is_bounded(title, MAX_THREAD_TITLE_LENGTH)
