"""AI conversation threads.

Only the user's side of a conversation is stored: sending a message appends a
``user`` message and no assistant reply is generated.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.crud import messages as messages_crud
from taskboard.crud import threads as threads_crud
from taskboard.database import get_db
from taskboard.dependencies import get_current_user, owned_thread, rate_limit
from taskboard.models.message import MessageRole
from taskboard.models.thread import Thread, ThreadStatus
from taskboard.models.user import User
from taskboard.schemas.common import IdOut
from taskboard.schemas.thread import ThreadCreate, ThreadUpdate, ThreadOut, ThreadDetail, MessageCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


@router.get("/threads", response_model=List[ThreadOut])
def list_threads(status: Optional[ThreadStatus] = None, user: User = Depends(get_current_user),
                 db: Session = Depends(get_db)):
    return threads_crud.get_threads_by_user(db, user.id, status)


@router.get("/threads/{thread_id}", response_model=ThreadDetail)
def get_thread(thread: Thread = Depends(owned_thread), db: Session = Depends(get_db)):
    return ThreadDetail.model_validate(
        {"thread": thread, "messages": messages_crud.get_messages_by_thread(db, thread.id)},
        from_attributes=True,
    )


@router.post("/threads", response_model=IdOut, status_code=201,
             dependencies=[Depends(rate_limit("create_thread"))])
def create_thread(payload: ThreadCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    thread = threads_crud.create_thread(db, user_id=user.id, title=payload.title, status=ThreadStatus.active)
    return IdOut(id=thread.id)


@router.post("/threads/{thread_id}/messages", response_model=IdOut, status_code=201,
             dependencies=[Depends(rate_limit("send_message"))])
def send_message(
    payload: MessageCreate,
    thread: Thread = Depends(owned_thread),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    message = messages_crud.create_message(
        db, thread_id=thread.id, user_id=user.id, role=MessageRole.user, content=payload.content
    )
    return IdOut(id=message.id)


# no bucket is defined for thread updates
@router.patch("/threads/{thread_id}", response_model=IdOut)
def update_thread(payload: ThreadUpdate, thread: Thread = Depends(owned_thread), db: Session = Depends(get_db)):
    changes = payload.model_dump(exclude_unset=True)
    if "status" in changes and changes["status"] is None:
        del changes["status"]
    threads_crud.update_thread(db, thread, changes)
    return IdOut(id=thread.id)


@router.delete("/threads/{thread_id}", response_model=IdOut,
               dependencies=[Depends(rate_limit("delete_thread"))])
def delete_thread(thread: Thread = Depends(owned_thread), db: Session = Depends(get_db)):
    thread_id = thread.id
    removed = messages_crud.delete_all_messages_in_thread(db, thread_id)
    threads_crud.delete_thread(db, thread)
    logger.info("deleted thread %s (messages=%d)", thread_id, removed)
    return IdOut(id=thread_id)
