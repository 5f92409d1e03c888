# ============================================================================
# FILE: streamify/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from streamify.config import settings
from streamify.core import storage
from streamify.core.errors import (
    BadRequestError,
    NotFoundError,
    ServiceError,
    translate_integrity_error,
)
from streamify.core.security import get_password_hash, verify_password
from streamify.db.models.user import User
from streamify.schemas.user import UserCreate, ProfileUpdate, PrivacyUpdate
import logging

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
PRIVACY_FIELDS = ("profile_public", "stats_public", "playlists_public", "favorites_public")

def _is_admin_email(email: str) -> bool:
    return bool(settings.ADMIN_EMAIL) and email.lower() == settings.ADMIN_EMAIL.lower()

class UserService:
    """Service layer for user operations"""

    def create_user(self, db: Session, user_data: UserCreate) -> User:
        """Create a new user account"""
        if not (user_data.name or "").strip() or not user_data.email or not user_data.password:
            raise BadRequestError("All fields are required")
        if len(user_data.password) < MIN_PASSWORD_LENGTH:
            raise BadRequestError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        email = str(user_data.email).lower()
        if self.get_user_by_email(db, email):
            raise ServiceError("User with this email already exists", status_code=409)

        try:
            user = User(
                name=user_data.name.strip(),
                email=email,
                hashed_password=get_password_hash(user_data.password),
                is_admin=_is_admin_email(email),
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.id}")
            return user
        except IntegrityError as e:
            db.rollback()
            raise translate_integrity_error(e, duplicate="User with this email already exists")
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email.lower()).first()

    def authenticate_user(self, db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        if not email or not password:
            return None
        user = self.get_user_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    def update_profile(self, db: Session, user: User, data: ProfileUpdate) -> User:
        """Update name and/or image, leaving absent fields untouched"""
        try:
            if data.name:
                user.name = data.name.strip()
            if data.image:
                user.image = data.image
            db.commit()
            db.refresh(user)
            logger.info(f"Profile updated: {user.id}")
            return user
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating profile: {e}")
            raise

    def change_password(self, db: Session, user: User, current_password: str, new_password: str):
        if not verify_password(current_password, user.hashed_password):
            raise BadRequestError("Current password is incorrect")
        if len(new_password or "") < MIN_PASSWORD_LENGTH:
            raise BadRequestError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        try:
            user.hashed_password = get_password_hash(new_password)
            db.commit()
            logger.info(f"Password changed: {user.id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error changing password: {e}")
            raise

    def upload_profile_picture(self, db: Session, user: User, filename: str,
                               content_type: Optional[str], content: bytes) -> dict:
        """Store a profile picture and point the user's image at it"""
        stored = storage.save_upload("avatar", filename, content_type, content, prefix=str(user.id))

        try:
            user.image = stored["url"]
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating database: {e}")
            storage.remove_upload(stored["path"])
            raise ServiceError("Failed to update profile in database", status_code=500)

        logger.info(f"Profile picture updated: {user.id}")
        return {"url": stored["url"], "filename": stored["filename"]}

    def delete_account(self, db: Session, user: User, password: str):
        """Delete the account and everything it owns"""
        if not verify_password(password, user.hashed_password):
            raise BadRequestError("Incorrect password")

        try:
            user_id = user.id
            db.delete(user)
            db.commit()
            logger.info(f"Account deleted: {user_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting account: {e}")
            raise

    def update_privacy_settings(self, db: Session, user: User, data: PrivacyUpdate) -> User:
        try:
            for field in PRIVACY_FIELDS:
                value = getattr(data, field)
                if value is not None:
                    setattr(user, field, value)
            db.commit()
            db.refresh(user)
            return user
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating privacy settings: {e}")
            raise

    def promote_admin(self, db: Session, email: str) -> User:
        """Grant admin rights to an existing account"""
        user = self.get_user_by_email(db, email) if email else None
        if not user:
            raise NotFoundError("User not found")
        user.is_admin = True
        db.commit()
        db.refresh(user)
        logger.info(f"User {user.id} is now an admin")
        return user

    def reset_admin_password(self, db: Session, email: str, password: str, name: str = "Admin") -> User:
        """Set the password of an admin account, creating the account if needed"""
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise BadRequestError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        user = self.get_user_by_email(db, email)
        try:
            if user:
                user.hashed_password = get_password_hash(password)
                user.is_admin = True
            else:
                user = User(
                    name=name,
                    email=email.lower(),
                    hashed_password=get_password_hash(password),
                    is_admin=True,
                )
                db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"Admin account ready: {user.id}")
            return user
        except Exception as e:
            db.rollback()
            logger.error(f"Error resetting admin password: {e}")
            raise

# Create singleton instance
user_service = UserService()
