from datetime import datetime, timedelta, timezone
import logging
from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session
from blog.core.config import ACCESS_TOKEN_EXPIRE_MINUTES
from blog.core.errors import BadRequestError, ConflictError
from blog.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user,
)
from blog.db.database import get_session
from blog.models.user import User
from blog.schemas.user import PasswordUpdate, Token, UserLogin, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter()

@router.post("/login", response_model=Token)
def login(
    user_in: UserLogin,
    session: Annotated[Session, Depends(get_session)]
) -> dict:
    """Log the site owner in"""
    result = session.execute(
        select(User).where(User.username == user_in.username, User.is_deleted.is_(False))
    )
    user = result.scalar_one_or_none()

    if not user or not verify_password(user_in.password, user.password):
        logger.warning(f"Failed login for username={user_in.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user.username}, expires_delta=access_token_expires
    )
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": int(access_token_expires.total_seconds()),
        "username": user.username,
        "nickname": user.nickname,
        "avatar": user.avatar,
    }

@admin_router.get("", response_model=UserResponse)
def read_current_user(
    current_user: Annotated[User, Depends(get_current_user)]
) -> User:
    """Get the owner's profile"""
    return current_user

@admin_router.put("", response_model=UserResponse)
def update_current_user(
    user_update: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)]
) -> User:
    """Update the owner's profile"""
    if user_update.username != current_user.username:
        result = session.execute(
            select(User).where(User.username == user_update.username, User.id != current_user.id)
        )
        if result.scalar_one_or_none():
            raise ConflictError("Username already exists")
        current_user.username = user_update.username

    if user_update.nickname is not None:
        current_user.nickname = user_update.nickname
    if user_update.avatar is not None:
        current_user.avatar = user_update.avatar
    if user_update.email is not None:
        current_user.email = user_update.email
    if user_update.description is not None:
        current_user.description = user_update.description

    current_user.update_time = datetime.now(timezone.utc)
    session.commit()
    session.refresh(current_user)
    return current_user

@admin_router.put("/password", status_code=status.HTTP_204_NO_CONTENT)
def update_password(
    password_update: PasswordUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)]
):
    """Change the owner's password"""
    if not verify_password(password_update.old_password, current_user.password):
        raise BadRequestError("Old password is incorrect")
    if password_update.new_password == password_update.old_password:
        raise BadRequestError("New password must differ from the old one")

    current_user.password = get_password_hash(password_update.new_password)
    session.commit()
    logger.info(f"Password changed for username={current_user.username!r}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
