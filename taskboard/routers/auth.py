import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from taskboard.crud.users import get_user_by_email, create_user
from taskboard.database import get_db
from taskboard.schemas.user import UserCreate, UserOut, TokenOut
from taskboard.utils.auth import hash_password, verify_password, create_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserOut)
def register(user: UserCreate, db: Session = Depends(get_db)):
    if get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already exists")

    try:
        hashed = hash_password(user.password)
    except ValueError as e:
        # map hashing/validation errors to a 400 so client gets a clear message
        raise HTTPException(status_code=400, detail=str(e))

    new_user = create_user(db, email=user.email, hashed_password=hashed)
    logger.info("registered user %s", new_user.id)
    return new_user


@router.post("/login", response_model=TokenOut)
def login(user: UserCreate, db: Session = Depends(get_db)):
    db_user = get_user_by_email(db, user.email)
    if not db_user or not verify_password(user.password, db_user.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return TokenOut(token=create_token(db_user.email))
