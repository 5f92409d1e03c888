# ============================================================================
# FILE: streamify/services/playlist_service.py
# ============================================================================
from typing import List, Dict, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from streamify.core.errors import (
    BadRequestError,
    NotFoundError,
    PermissionDeniedError,
    translate_integrity_error,
)
from streamify.db.models.playlist import Playlist, PlaylistSong
from streamify.schemas.playlist import PlaylistCreate, PlaylistUpdate
from streamify.services.catalog_service import catalog_service
import logging

logger = logging.getLogger(__name__)

def _clean(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None

class PlaylistService:
    """
    Service layer for playlist operations.

    Methods take `user_id=None` for admin-curated playlists, which skips the
    ownership check.
    """

    def _changed(self, user_id: Optional[int]):
        # Curated playlists are part of the public catalog
        if user_id is None:
            catalog_service.invalidate()

    def get_user_playlists(self, db: Session, user_id: int) -> List[Playlist]:
        """Get all playlists for a user, newest first"""
        return (
            db.query(Playlist)
            .filter(Playlist.user_id == user_id)
            .order_by(Playlist.created_at.desc(), Playlist.id.desc())
            .all()
        )

    def get_all_playlists(self, db: Session) -> List[Playlist]:
        """Every playlist, by name (admin view)"""
        return db.query(Playlist).order_by(Playlist.name, Playlist.id).all()

    def get_playlist(self, db: Session, playlist_id: int, user_id: Optional[int] = None) -> Playlist:
        """Get a specific playlist (verify ownership when user_id is given)"""
        playlist = db.query(Playlist).filter(Playlist.id == playlist_id).first()
        if not playlist:
            raise NotFoundError("Playlist not found")
        if user_id is not None and playlist.user_id != user_id:
            raise PermissionDeniedError("Unauthorized")
        return playlist

    def create_playlist(self, db: Session, user_id: Optional[int], playlist_data: PlaylistCreate) -> Playlist:
        """Create a new playlist for a user (or a curated one when user_id is None)"""
        name = _clean(playlist_data.name)
        if not name:
            raise BadRequestError("Playlist name is required")

        try:
            playlist = Playlist(
                user_id=user_id,
                name=name,
                description=_clean(playlist_data.description),
                image_url=playlist_data.image_url or None,
            )
            db.add(playlist)
            db.commit()
            self._changed(user_id)
            db.refresh(playlist)
            logger.info(f"Playlist created: {playlist.id} for user {user_id}")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise

    def update_playlist(self, db: Session, playlist_id: int, user_id: Optional[int],
                        update_data: PlaylistUpdate) -> Playlist:
        """Update playlist details"""
        playlist = self.get_playlist(db, playlist_id, user_id)

        try:
            if update_data.name is not None:
                name = _clean(update_data.name)
                if not name:
                    raise BadRequestError("Playlist name is required")
                playlist.name = name
            if update_data.description is not None:
                playlist.description = _clean(update_data.description)
            if update_data.image_url:
                playlist.image_url = update_data.image_url

            db.commit()

            self._changed(user_id)
            db.refresh(playlist)
            logger.info(f"Playlist updated: {playlist_id}")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating playlist: {e}")
            raise

    def delete_playlist(self, db: Session, playlist_id: int, user_id: Optional[int]):
        """Delete a playlist"""
        playlist = self.get_playlist(db, playlist_id, user_id)

        try:
            db.delete(playlist)
            db.commit()
            self._changed(user_id)
            logger.info(f"Playlist deleted: {playlist_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise

    def add_song_to_playlist(self, db: Session, playlist_id: int, user_id: Optional[int],
                             song_id: Optional[int]) -> PlaylistSong:
        """Add a song to a playlist"""
        if not song_id:
            raise BadRequestError("Song ID is required")
        self.get_playlist(db, playlist_id, user_id)

        try:
            playlist_song = PlaylistSong(playlist_id=playlist_id, song_id=song_id)
            db.add(playlist_song)
            db.commit()
            self._changed(user_id)
            db.refresh(playlist_song)
            logger.info(f"Song added to playlist {playlist_id}: {song_id}")
            return playlist_song
        except IntegrityError as e:
            db.rollback()
            raise translate_integrity_error(e, duplicate="Song already in playlist", missing="Song not found")
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding song to playlist: {e}")
            raise

    def remove_song_from_playlist(self, db: Session, playlist_id: int, user_id: Optional[int],
                                  song_id: Optional[int]):
        """Remove a song from a playlist"""
        if not song_id:
            raise BadRequestError("Song ID is required")
        self.get_playlist(db, playlist_id, user_id)

        try:
            removed = db.query(PlaylistSong).filter(
                PlaylistSong.playlist_id == playlist_id,
                PlaylistSong.song_id == song_id
            ).delete(synchronize_session=False)
            db.commit()
            self._changed(user_id)
            if removed:
                logger.info(f"Song removed from playlist {playlist_id}: {song_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing song from playlist: {e}")
            raise

    def get_playlist_songs(self, db: Session, playlist_id: int, user_id: int) -> Dict:
        """Songs of an owned playlist, most played first"""
        playlist = self.get_playlist(db, playlist_id, user_id)
        songs = sorted(
            (entry.song for entry in playlist.songs),
            key=lambda s: s.play_count or 0,
            reverse=True,
        )
        return {"playlist": playlist, "songs": songs}

# Create singleton instance
playlist_service = PlaylistService()
