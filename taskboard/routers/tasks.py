import logging
from math import ceil
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from taskboard.crud import activity as activity_crud
from taskboard.crud import comments as comments_crud
from taskboard.crud import task_labels as task_labels_crud
from taskboard.crud import tasks as tasks_crud
from taskboard.database import get_db
from taskboard.dependencies import get_current_user, owned_task, rate_limit
from taskboard.models.task import Task, TaskStatus
from taskboard.models.user import User
from taskboard.schemas.common import IdOut
from taskboard.schemas.task import TaskCreate, TaskUpdate, TaskReorder, TaskOut, TaskPage, TaskCounts
from taskboard.utils.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from taskboard.utils.formatting import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

# fields that cannot be cleared with an explicit null
NON_NULLABLE_FIELDS = ("title", "status", "priority")


@router.get("/", response_model=Union[TaskPage, List[TaskOut]])
def list_tasks(
    q: Optional[str] = Query(None, description="Search by title"),
    page: Optional[int] = None,
    limit: Optional[int] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Newest first. If page and limit are provided, return the paginated
    envelope {items,page,limit,total,pages}; otherwise a plain list.
    """
    if page is None or limit is None:
        return tasks_crud.get_tasks_by_user(db, user.id, search=q)

    # normalize page/limit
    if page < 1:
        page = 1
    if limit < 1:
        limit = DEFAULT_PAGE_SIZE
    limit = min(limit, MAX_PAGE_SIZE)
    total = tasks_crud.count_tasks_by_user(db, user.id, search=q)
    pages = ceil(total / limit) if total > 0 else 1
    items = tasks_crud.get_tasks_by_user(db, user.id, search=q, limit=limit, offset=(page - 1) * limit)
    return TaskPage(
        items=[TaskOut.model_validate(t) for t in items],
        page=page,
        limit=limit,
        total=total,
        pages=pages,
    )


@router.get("/counts", response_model=TaskCounts)
def get_counts(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    todo = tasks_crud.count_tasks_by_status(db, user.id, TaskStatus.todo)
    in_progress = tasks_crud.count_tasks_by_status(db, user.id, TaskStatus.in_progress)
    completed = tasks_crud.count_tasks_by_status(db, user.id, TaskStatus.completed)
    return TaskCounts(todo=todo, in_progress=in_progress, completed=completed,
                      total=todo + in_progress + completed)


@router.get("/status/{status}", response_model=List[TaskOut])
def list_tasks_by_status(status: TaskStatus, user: User = Depends(get_current_user),
                         db: Session = Depends(get_db)):
    return tasks_crud.get_tasks_by_user_status_ordered(db, user.id, status)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task: Task = Depends(owned_task)):
    return task


@router.post("/", response_model=IdOut, status_code=201,
             dependencies=[Depends(rate_limit("create_task"))])
def create_task(payload: TaskCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    max_order = tasks_crud.get_max_order_for_status(db, user.id, TaskStatus.todo)
    task = tasks_crud.create_task(
        db,
        user_id=user.id,
        title=payload.title,
        description=payload.description,
        status=TaskStatus.todo,
        priority=payload.priority,
        due_date=payload.due_date,
        order=max_order + 1,
    )
    activity_crud.log_task_created(db, task)
    return IdOut(id=task.id)


@router.patch("/{task_id}", response_model=IdOut,
              dependencies=[Depends(rate_limit("update_task"))])
def update_task(payload: TaskUpdate, task: Task = Depends(owned_task), db: Session = Depends(get_db)):
    changes = payload.model_dump(exclude_unset=True)
    for field in NON_NULLABLE_FIELDS:
        if field in changes and changes[field] is None:
            del changes[field]

    old_status, old_priority = task.status, task.priority
    status_changed = "status" in changes and changes["status"] != old_status
    priority_changed = "priority" in changes and changes["priority"] != old_priority

    if status_changed:
        completed = changes["status"] == TaskStatus.completed
        changes["completed_at"] = utcnow() if completed else None
    else:
        changes.pop("status", None)

    tasks_crud.update_task(db, task, changes)

    # one record per kind of change; "updated" only when neither status nor priority moved
    if status_changed:
        activity_crud.log_status_change(db, task, old_status, task.status)
    if priority_changed:
        activity_crud.log_priority_change(db, task, old_priority, task.priority)
    if not status_changed and not priority_changed:
        activity_crud.log_task_updated(db, task)
    return IdOut(id=task.id)


@router.post("/{task_id}/reorder", response_model=IdOut,
             dependencies=[Depends(rate_limit("update_task"))])
def reorder_task(payload: TaskReorder, task: Task = Depends(owned_task), db: Session = Depends(get_db)):
    tasks_crud.update_task(db, task, {"order": payload.new_order})
    return IdOut(id=task.id)


@router.delete("/{task_id}", response_model=IdOut,
               dependencies=[Depends(rate_limit("delete_task"))])
def delete_task(task: Task = Depends(owned_task), db: Session = Depends(get_db)):
    task_id = task.id
    activity_crud.log_task_deleted(db, task)

    # activity rows are kept for history
    removed_labels = task_labels_crud.delete_all_labels_from_task(db, task_id)
    removed_comments = comments_crud.delete_all_comments_from_task(db, task_id)
    tasks_crud.delete_task(db, task)
    logger.info("deleted task %s (labels=%d comments=%d)", task_id, removed_labels, removed_comments)
    return IdOut(id=task_id)
