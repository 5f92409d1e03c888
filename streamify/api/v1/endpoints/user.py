# ============================================================================
# FILE: streamify/api/v1/endpoints/user.py
# ============================================================================
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from datetime import timedelta
from streamify.db.session import get_db
from streamify.api.dependencies import require_current_user
from streamify.schemas.common import Envelope, ok
from streamify.schemas.user import (
    AccountDelete,
    AvatarResponse,
    PasswordChange,
    PrivacySettings,
    PrivacyUpdate,
    ProfileUpdate,
    Token,
    UserCreate,
    UserResponse,
)
from streamify.services.user_service import user_service
from streamify.core.security import create_access_token
from streamify.config import settings
from streamify.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/signup", response_model=Envelope[UserResponse], status_code=status.HTTP_201_CREATED)
async def signup(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user account
    """
    user = user_service.create_user(db, user_data)
    return ok(user)

@router.post("/login", response_model=Envelope[Token])
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """
    Login with email (sent as `username`) and password
    Returns a JWT session token carrying the user id and admin flag
    """
    user = user_service.authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": str(user.id), "email": user.email, "is_admin": bool(user.is_admin)},
        expires_delta=access_token_expires,
    )
    logger.info(f"User logged in: {user.id}")

    return ok({"access_token": access_token, "token_type": "bearer", "user": user})

@router.get("/me", response_model=Envelope[UserResponse])
async def get_current_user_info(
    current_user: User = Depends(require_current_user)
):
    """
    Get current user information
    Requires authentication
    """
    return ok(current_user)

@router.put("/me", response_model=Envelope[UserResponse])
async def update_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Update display name and/or image URL"""
    return ok(user_service.update_profile(db, current_user, data))

@router.post("/me/password", response_model=Envelope[None])
async def change_password(
    data: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    user_service.change_password(db, current_user, data.current_password, data.new_password)
    return ok()

@router.post("/me/avatar", response_model=Envelope[AvatarResponse])
async def upload_profile_picture(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Upload a profile picture (max 5MB)"""
    content = await file.read()
    result = user_service.upload_profile_picture(
        db, current_user, file.filename or "", file.content_type, content
    )
    return ok(result)

@router.delete("/me", response_model=Envelope[None])
async def delete_account(
    data: AccountDelete,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Permanently delete the account with its playlists, library and history
    Requires the current password
    """
    user_service.delete_account(db, current_user, data.password)
    return ok()

@router.get("/me/privacy", response_model=Envelope[PrivacySettings])
async def get_privacy_settings(
    current_user: User = Depends(require_current_user)
):
    return ok(current_user)

@router.put("/me/privacy", response_model=Envelope[PrivacySettings])
async def update_privacy_settings(
    data: PrivacyUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return ok(user_service.update_privacy_settings(db, current_user, data))
