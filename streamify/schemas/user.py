# ============================================================================
# FILE: streamify/schemas/user.py
# ============================================================================
from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional
from datetime import datetime

class UserCreate(BaseModel):
    """Schema for user registration"""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

class UserResponse(BaseModel):
    """Schema for user response"""
    id: int
    name: str
    email: str
    image: Optional[str] = None
    is_admin: bool = False
    created_at: datetime

    class Config:
        from_attributes = True

class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    image: Optional[str] = None

class PasswordChange(BaseModel):
    current_password: str
    new_password: str

class AccountDelete(BaseModel):
    password: str

class PrivacySettings(BaseModel):
    profile_public: bool
    stats_public: bool
    playlists_public: bool
    favorites_public: bool

    class Config:
        from_attributes = True

class PrivacyUpdate(BaseModel):
    profile_public: Optional[bool] = None
    stats_public: Optional[bool] = None
    playlists_public: Optional[bool] = None
    favorites_public: Optional[bool] = None

class Token(BaseModel):
    """Schema for JWT token response"""
    access_token: str
    token_type: str = "bearer"
    user: Optional[UserResponse] = None

class AvatarResponse(BaseModel):
    url: str
    filename: str
