from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.crud import comments as comments_crud
from taskboard.database import get_db
from taskboard.dependencies import get_current_user, owned_comment, owned_task, rate_limit
from taskboard.models.comment import TaskComment
from taskboard.models.task import Task
from taskboard.models.user import User
from taskboard.schemas.comment import CommentCreate, CommentOut
from taskboard.schemas.common import IdOut

router = APIRouter(tags=["comments"])


@router.get("/tasks/{task_id}/comments", response_model=List[CommentOut])
def list_comments(task: Task = Depends(owned_task), db: Session = Depends(get_db)):
    """Oldest first."""
    return comments_crud.get_comments_by_task(db, task.id)


@router.post("/tasks/{task_id}/comments", response_model=IdOut, status_code=201,
             dependencies=[Depends(rate_limit("create_comment"))])
def create_comment(
    payload: CommentCreate,
    task: Task = Depends(owned_task),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    comment = comments_crud.create_task_comment(
        db, task_id=task.id, user_id=user.id, content=payload.content, type=payload.type
    )
    return IdOut(id=comment.id)


@router.delete("/comments/{comment_id}", response_model=IdOut,
               dependencies=[Depends(rate_limit("delete_comment"))])
def delete_comment(comment: TaskComment = Depends(owned_comment), db: Session = Depends(get_db)):
    comment_id = comment.id
    comments_crud.delete_task_comment(db, comment)
    return IdOut(id=comment_id)
