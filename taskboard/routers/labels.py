import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.crud import labels as labels_crud
from taskboard.crud import task_labels as task_labels_crud
from taskboard.crud import tasks as tasks_crud
from taskboard.database import get_db
from taskboard.dependencies import get_current_user, owned_label, owned_task, rate_limit
from taskboard.errors import InvalidArgument
from taskboard.models.label import Label
from taskboard.models.task import Task
from taskboard.models.user import User
from taskboard.schemas.common import IdOut
from taskboard.schemas.label import LabelCreate, LabelUpdate, LabelOut, TaskLabelKey
from taskboard.schemas.task import TaskOut
from taskboard.utils.constants import DEFAULT_LABEL_COLORS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/labels", tags=["labels"])

DUPLICATE_NAME = "A label with this name already exists"


@router.get("/", response_model=List[LabelOut])
def list_labels(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return labels_crud.get_labels_by_user(db, user.id)


@router.get("/task/{task_id}", response_model=List[LabelOut])
def get_labels_for_task(task: Task = Depends(owned_task), db: Session = Depends(get_db)):
    associations = task_labels_crud.get_labels_for_task(db, task.id)
    return labels_crud.get_labels_by_ids(db, [tl.label_id for tl in associations])


@router.get("/{label_id}", response_model=LabelOut)
def get_label(label: Label = Depends(owned_label)):
    return label


@router.get("/{label_id}/tasks", response_model=List[TaskOut])
def get_tasks_for_label(label: Label = Depends(owned_label), db: Session = Depends(get_db)):
    associations = task_labels_crud.get_tasks_for_label(db, label.id)
    return tasks_crud.get_tasks_by_ids(db, [tl.task_id for tl in associations])


@router.post("/", response_model=IdOut, status_code=201,
             dependencies=[Depends(rate_limit("create_label"))])
def create_label(payload: LabelCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    if labels_crud.get_label_by_user_and_name(db, user.id, payload.name):
        raise InvalidArgument(DUPLICATE_NAME)

    color = payload.color
    if color is None:
        used = labels_crud.count_labels_by_user(db, user.id)
        color = DEFAULT_LABEL_COLORS[used % len(DEFAULT_LABEL_COLORS)]

    label = labels_crud.create_label(db, user_id=user.id, name=payload.name, color=color)
    return IdOut(id=label.id)


@router.patch("/{label_id}", response_model=IdOut,
              dependencies=[Depends(rate_limit("update_label"))])
def update_label(payload: LabelUpdate, label: Label = Depends(owned_label), db: Session = Depends(get_db)):
    changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}

    new_name = changes.get("name")
    if new_name is not None and new_name != label.name:
        if labels_crud.get_label_by_user_and_name(db, label.user_id, new_name):
            raise InvalidArgument(DUPLICATE_NAME)

    labels_crud.update_label(db, label, changes)
    return IdOut(id=label.id)


@router.delete("/{label_id}", response_model=IdOut,
               dependencies=[Depends(rate_limit("delete_label"))])
def delete_label(label: Label = Depends(owned_label), db: Session = Depends(get_db)):
    label_id = label.id
    removed = task_labels_crud.delete_all_tasks_from_label(db, label_id)
    labels_crud.delete_label(db, label)
    logger.info("deleted label %s (task associations=%d)", label_id, removed)
    return IdOut(id=label_id)


@router.post("/{label_id}/tasks/{task_id}", response_model=IdOut, status_code=201,
             dependencies=[Depends(rate_limit("add_label_to_task"))])
def add_label_to_task(
    task: Task = Depends(owned_task),
    label: Label = Depends(owned_label),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    # read-then-write; two concurrent identical requests may both pass this check
    if task_labels_crud.task_label_exists(db, task.id, label.id):
        raise InvalidArgument("This label is already added to the task")
    task_label = task_labels_crud.create_task_label(db, task_id=task.id, label_id=label.id, user_id=user.id)
    return IdOut(id=task_label.id)


@router.delete("/{label_id}/tasks/{task_id}", response_model=TaskLabelKey,
               dependencies=[Depends(rate_limit("remove_label_from_task"))])
def remove_label_from_task(
    task: Task = Depends(owned_task),
    label: Label = Depends(owned_label),
    db: Session = Depends(get_db),
):
    task_labels_crud.delete_task_label(db, task.id, label.id)
    return TaskLabelKey(task_id=task.id, label_id=label.id)
