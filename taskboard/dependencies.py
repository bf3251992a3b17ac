"""FastAPI dependencies implementing the request protocol.

Mutating routes declare ``rate_limit(<operation>)`` in their route
``dependencies`` and the ``owned_*`` loaders in their signature. FastAPI
resolves route-level dependencies first, then signature dependencies, then the
request body, so every call runs

    authenticate -> rate-limit -> load & authorize -> validate payload

and stops at the first failing step.
"""
from typing import Optional

from fastapi import Depends, Header
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.orm import Session

from taskboard.crud import comments as comments_crud
from taskboard.crud import labels as labels_crud
from taskboard.crud import tasks as tasks_crud
from taskboard.crud import threads as threads_crud
from taskboard.crud.users import get_user_by_email
from taskboard.database import get_db
from taskboard.errors import Unauthenticated, NotFound, Forbidden
from taskboard.models.comment import TaskComment
from taskboard.models.label import Label
from taskboard.models.task import Task
from taskboard.models.thread import Thread
from taskboard.models.user import User
from taskboard.rate_limiter import rate_limiter
from taskboard.utils.auth import decode_token, extract_token


def get_current_user(
    authorization: Optional[str] = Header(None),
    token: Optional[str] = None,
    db: Session = Depends(get_db),
) -> User:
    tok = extract_token(authorization, token)
    if not tok:
        raise Unauthenticated("Missing token")
    try:
        payload = decode_token(tok)
    except ExpiredSignatureError:
        raise Unauthenticated("Token has expired")
    except JWTError:
        raise Unauthenticated("Invalid token")

    email = payload.get("sub")
    if not email:
        raise Unauthenticated("Invalid token: missing user")
    user = get_user_by_email(db, email)
    if user is None:
        raise Unauthenticated("Invalid token: unknown user")
    return user


def rate_limit(operation: str):
    """Dependency factory consuming one token of ``operation`` for the caller."""
    def check_rate_limit(user: User = Depends(get_current_user)) -> None:
        rate_limiter.check(operation, user.id)
    return check_rate_limit


def ensure_owned(entity, user: User, noun: str):
    if entity is None:
        raise NotFound(f"{noun.capitalize()} not found")
    if entity.user_id != user.id:
        raise Forbidden(f"Not authorized to access this {noun}")
    return entity


def owned_task(task_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Task:
    return ensure_owned(tasks_crud.get_task_by_id(db, task_id), user, "task")


def owned_label(label_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Label:
    return ensure_owned(labels_crud.get_label_by_id(db, label_id), user, "label")


def owned_comment(comment_id: int, user: User = Depends(get_current_user),
                  db: Session = Depends(get_db)) -> TaskComment:
    return ensure_owned(comments_crud.get_comment_by_id(db, comment_id), user, "comment")


def owned_thread(thread_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Thread:
    return ensure_owned(threads_crud.get_thread_by_id(db, thread_id), user, "thread")
