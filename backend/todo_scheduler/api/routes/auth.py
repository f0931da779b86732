import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session, select, or_

from todo_scheduler.api.deps import get_current_user
from todo_scheduler.core.config import settings
from todo_scheduler.core.database import get_session
from todo_scheduler.core.security import (
    create_session_token,
    hash_password,
    verify_password,
)
from todo_scheduler.models import User
from todo_scheduler.schemas.auth import (
    LoginIn,
    PasswordUpdate,
    ProfileUpdate,
    SignupIn,
    UserOut,
)
from todo_scheduler.schemas.base import MessageOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def set_session_cookie(response: Response, user: User) -> None:
    response.set_cookie(
        key=settings.cookie_name,
        value=create_session_token(user.id),
        max_age=settings.jwt_expire_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


@router.post("/signup", response_model=UserOut, status_code=201)
def signup(payload: SignupIn, response: Response, session: Session = Depends(get_session)):
    existing = session.exec(
        select(User).where(or_(User.email == payload.email, User.username == payload.username))
    ).first()

    if existing:
        raise HTTPException(
            status_code=400,
            detail="User already exists"
        )

    user = User(
        name=payload.name,
        age=payload.age,
        username=payload.username,
        email=payload.email,
        password_hash=hash_password(payload.password),
    )

    session.add(user)
    session.commit()
    session.refresh(user)

    set_session_cookie(response, user)
    logger.info("New user id=%s username=%s", user.id, user.username)
    return user


@router.post("/login", response_model=UserOut)
def login(payload: LoginIn, response: Response, session: Session = Depends(get_session)):
    user = session.exec(
        select(User).where(User.username == payload.username)
    ).first()

    if not user or not verify_password(payload.password, user.password_hash):
        logger.info("Failed login for username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    set_session_cookie(response, user)
    logger.info("User id=%s logged in", user.id)
    return user


@router.post("/logout", response_model=MessageOut)
def logout(response: Response):
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return MessageOut(message="Logged out successfully")


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return user


@router.get("/profile", response_model=UserOut)
def get_profile(user: User = Depends(get_current_user)):
    return user


@router.put("/profile", response_model=UserOut)
def update_profile(
    data: ProfileUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if not verify_password(data.current_password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid current password")

    if data.email is not None and data.email != user.email:
        taken = session.exec(
            select(User).where(User.email == data.email, User.id != user.id)
        ).first()
        if taken:
            raise HTTPException(status_code=400, detail="Email already in use")
        user.email = data.email

    if data.name is not None:
        user.name = data.name
    if data.age is not None:
        user.age = data.age
    if data.preferences is not None:
        # reassign so the JSON column is flagged dirty
        user.preferences = {**(user.preferences or {}), **data.preferences}

    user.updated_at = datetime.now(timezone.utc)
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Profile updated for user id=%s", user.id)
    return user


@router.put("/password", response_model=MessageOut)
def update_password(
    data: PasswordUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if not verify_password(data.current_password, user.password_hash):
        logger.info("Password change rejected for user id=%s", user.id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid current password")

    user.password_hash = hash_password(data.new_password)
    user.updated_at = datetime.now(timezone.utc)
    session.add(user)
    session.commit()
    logger.info("Password changed for user id=%s", user.id)
    return MessageOut(message="Password updated successfully")
