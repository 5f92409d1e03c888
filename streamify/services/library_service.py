# ============================================================================
# FILE: streamify/services/library_service.py
# Favorites, songs added to a user's library, and offline downloads
# ============================================================================
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from streamify.core.errors import BadRequestError, translate_integrity_error
from streamify.db.models.library import FavoriteSong, UserSong, UserDownload
from streamify.db.models.song import Song
import logging

logger = logging.getLogger(__name__)

class LibraryCollection:
    """One per-user song collection backed by a (user_id, song_id) unique table"""

    def __init__(self, model, label: str, duplicate_message: str, timestamp: str = "added_at"):
        self.model = model
        self.label = label
        self.duplicate_message = duplicate_message
        self.timestamp = timestamp

    def list_songs(self, db: Session, user_id: int) -> List[Song]:
        """Songs in the collection, newest first"""
        order = getattr(self.model, self.timestamp)
        rows = (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(order.desc(), self.model.id.desc())
            .all()
        )
        return [row.song for row in rows]

    def add(self, db: Session, user_id: int, song_id: int) -> Song:
        if not song_id:
            raise BadRequestError("Song ID is required")
        try:
            row = self.model(user_id=user_id, song_id=song_id)
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.info(f"Added song {song_id} to {self.label} of user {user_id}")
            return row.song
        except IntegrityError as e:
            db.rollback()
            raise translate_integrity_error(e, duplicate=self.duplicate_message, missing="Song not found")
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding to {self.label}: {e}")
            raise

    def remove(self, db: Session, user_id: int, song_id: int):
        """Remove a song; removing one that is absent is not an error"""
        try:
            db.query(self.model).filter(
                self.model.user_id == user_id,
                self.model.song_id == song_id,
            ).delete(synchronize_session=False)
            db.commit()
            logger.info(f"Removed song {song_id} from {self.label} of user {user_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing from {self.label}: {e}")
            raise

    def count(self, db: Session, user_id: int) -> int:
        return db.query(self.model).filter(self.model.user_id == user_id).count()

class LibraryService:
    """Service layer for the per-user library"""

    def __init__(self):
        self.favorites = LibraryCollection(FavoriteSong, "favorites", "Song already in favorites")
        self.user_songs = LibraryCollection(UserSong, "user songs", "Song already added")
        self.downloads = LibraryCollection(
            UserDownload, "downloads", "Song already downloaded", timestamp="downloaded_at"
        )

# Create singleton instance
library_service = LibraryService()
