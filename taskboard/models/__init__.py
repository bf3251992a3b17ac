"""
Models package - contains all database models.

Importing the package registers every table with Base.metadata.
"""
from taskboard.models.user import User
from taskboard.models.task import Task, TaskStatus, TaskPriority
from taskboard.models.label import Label
from taskboard.models.task_label import TaskLabel
from taskboard.models.thread import Thread, ThreadStatus
from taskboard.models.message import Message, MessageRole
from taskboard.models.preferences import UserPreferences, Theme, DefaultView, SortBy, SortOrder
from taskboard.models.activity import TaskActivity, ActivityAction
from taskboard.models.comment import TaskComment, CommentType

__all__ = [
    "User",
    "Task", "TaskStatus", "TaskPriority",
    "Label",
    "TaskLabel",
    "Thread", "ThreadStatus",
    "Message", "MessageRole",
    "UserPreferences", "Theme", "DefaultView", "SortBy", "SortOrder",
    "TaskActivity", "ActivityAction",
    "TaskComment", "CommentType",
]
