# ============================================================================
# FILE: streamify/services/admin_service.py
# ============================================================================
from typing import List, Dict, Optional
from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from streamify.core import storage
from streamify.core.errors import (
    BadRequestError,
    NotFoundError,
    ServiceError,
    translate_integrity_error,
)
from streamify.db.models.album import Album
from streamify.db.models.artist import Artist
from streamify.db.models.song import Song
from streamify.schemas.admin import (
    AlbumCreate,
    AlbumUpdate,
    ArtistCreate,
    ArtistUpdate,
    SongCreate,
    SongUpdate,
)
from streamify.services.catalog_service import catalog_service
import logging

logger = logging.getLogger(__name__)

ARTIST_IN_USE = "Cannot delete artist. This artist is being used by songs or albums."

def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""

class AdminService:
    """Service layer for catalog content management"""

    def _commit(self, db: Session, action: str):
        """Commit a catalog change and drop cached catalog reads"""
        db.commit()
        catalog_service.invalidate()
        logger.info(action)

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------
    def upload_file(self, kind: Optional[str], filename: str, content_type: Optional[str],
                    content: bytes) -> Dict[str, str]:
        if kind not in ("image", "audio"):
            raise BadRequestError("Type must be 'image' or 'audio'")
        stored = storage.save_upload(kind, filename, content_type, content)
        return {"url": stored["url"], "filename": stored["filename"]}

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------
    def find_or_create_artist(self, db: Session, artist_name: Optional[str]) -> Optional[Artist]:
        """Artist by trimmed name, created on first use (flushed, not committed)"""
        if _blank(artist_name):
            return None
        name = artist_name.strip()
        artist = db.query(Artist).filter(Artist.name == name).first()
        if not artist:
            artist = Artist(name=name)
            db.add(artist)
            db.flush()
            logger.info(f"Artist created: {artist.id} ({name})")
        return artist

    def find_or_create_album(self, db: Session, album_name: Optional[str], artist_id: Optional[int],
                             release_year: Optional[int] = None) -> Optional[Album]:
        """Album by (title, artist), created on first use"""
        if _blank(album_name) or not artist_id:
            return None
        title = album_name.strip()
        album = db.query(Album).filter(Album.title == title, Album.artist_id == artist_id).first()
        if not album:
            album = Album(
                title=title,
                artist_id=artist_id,
                release_year=int(release_year) if release_year else datetime.utcnow().year,
            )
            db.add(album)
            db.flush()
            logger.info(f"Album created: {album.id} ({title})")
        return album

    # ------------------------------------------------------------------
    # Songs
    # ------------------------------------------------------------------
    def get_songs(self, db: Session, artist_id: Optional[int] = None, album_id: Optional[int] = None) -> List[Song]:
        query = db.query(Song)
        if artist_id:
            query = query.filter(Song.artist_id == artist_id)
        if album_id:
            query = query.filter(Song.album_id == album_id)
        return query.order_by(Song.play_count.desc(), Song.id).all()

    def create_song(self, db: Session, data: SongCreate) -> Song:
        if not data.title or not data.duration or not data.song_url or not data.image_url or _blank(data.artist_name):
            raise BadRequestError("Missing required fields")

        try:
            artist = self.find_or_create_artist(db, data.artist_name)
            album = self.find_or_create_album(db, data.album_name, artist.id, data.release_year)
            song = Song(
                title=data.title,
                duration=int(data.duration),
                song_url=data.song_url,
                image_url=data.image_url,
                artist_id=artist.id,
                album_id=album.id if album else None,
                genre=data.genre or None,
            )
            db.add(song)
            db.flush()
            self._commit(db, f"Song created: {song.id}")
            db.refresh(song)
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating song: {e}")
            raise

    def update_song(self, db: Session, song_id: int, data: SongUpdate) -> Song:
        """Apply only the fields that differ from the stored song"""
        song = catalog_service.get_song(db, song_id)
        changes = {}

        if data.title and data.title != song.title:
            changes["title"] = data.title
        if data.duration and int(data.duration) != song.duration:
            changes["duration"] = int(data.duration)
        if "genre" in data.model_fields_set and data.genre != song.genre:
            changes["genre"] = data.genre or None
        if data.song_url and data.song_url != song.song_url:
            changes["song_url"] = data.song_url
        if data.image_url and data.image_url != song.image_url:
            changes["image_url"] = data.image_url

        try:
            if not _blank(data.artist_name):
                artist = self.find_or_create_artist(db, data.artist_name)
                if artist.id != song.artist_id:
                    changes["artist_id"] = artist.id
            if not _blank(data.album_name):
                album = self.find_or_create_album(
                    db, data.album_name, changes.get("artist_id", song.artist_id), data.release_year
                )
                if album and album.id != song.album_id:
                    changes["album_id"] = album.id

            if not changes:
                db.commit()
                return song

            for field, value in changes.items():
                setattr(song, field, value)
            self._commit(db, f"Song updated: {song_id} ({', '.join(changes)})")
            db.refresh(song)
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating song: {e}")
            raise

    def delete_song(self, db: Session, song_id: int):
        song = catalog_service.get_song(db, song_id)
        try:
            db.delete(song)
            self._commit(db, f"Song deleted: {song_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting song: {e}")
            raise

    # ------------------------------------------------------------------
    # Artists
    # ------------------------------------------------------------------
    def get_artists(self, db: Session) -> List[Artist]:
        return db.query(Artist).order_by(Artist.name).all()

    def get_artist(self, db: Session, artist_id: int) -> Artist:
        artist = db.query(Artist).filter(Artist.id == artist_id).first()
        if not artist:
            raise NotFoundError("Artist not found")
        return artist

    def create_artist(self, db: Session, data: ArtistCreate) -> Artist:
        if _blank(data.name):
            raise BadRequestError("Name is required")

        try:
            artist = Artist(
                name=data.name.strip(),
                image_url=data.image_url or None,
                bio=data.bio or None,
                verified=bool(data.verified),
            )
            db.add(artist)
            self._commit(db, f"Artist created: {data.name}")
            db.refresh(artist)
            return artist
        except IntegrityError as e:
            db.rollback()
            raise translate_integrity_error(e, duplicate="Artist name already exists")
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating artist: {e}")
            raise

    def update_artist(self, db: Session, artist_id: int, data: ArtistUpdate) -> Artist:
        artist = self.get_artist(db, artist_id)
        changes = {}

        if data.name and data.name.strip() != artist.name:
            changes["name"] = data.name.strip()
        if "bio" in data.model_fields_set and data.bio != artist.bio:
            changes["bio"] = data.bio or None
        if data.verified is not None and data.verified != artist.verified:
            changes["verified"] = data.verified
        if data.image_url and data.image_url != artist.image_url:
            changes["image_url"] = data.image_url

        if not changes:
            return artist

        try:
            for field, value in changes.items():
                setattr(artist, field, value)
            self._commit(db, f"Artist updated: {artist_id} ({', '.join(changes)})")
            db.refresh(artist)
            return artist
        except IntegrityError as e:
            db.rollback()
            raise translate_integrity_error(e, duplicate="Artist name already exists")
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating artist: {e}")
            raise

    def delete_artist(self, db: Session, artist_id: int):
        """Delete the artist's albums (and their songs), then remaining songs, then the artist"""
        self.get_artist(db, artist_id)

        try:
            albums = db.query(Album).filter(Album.artist_id == artist_id).delete(synchronize_session=False)
            songs = db.query(Song).filter(Song.artist_id == artist_id).delete(synchronize_session=False)
            db.query(Artist).filter(Artist.id == artist_id).delete(synchronize_session=False)
            self._commit(db, f"Artist deleted: {artist_id} ({albums} albums, {songs} loose songs)")
        except IntegrityError as e:
            db.rollback()
            raise translate_integrity_error(e, referenced=ARTIST_IN_USE)
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting artist: {e}")
            raise
        finally:
            db.expire_all()

    # ------------------------------------------------------------------
    # Albums
    # ------------------------------------------------------------------
    def get_albums(self, db: Session, artist_id: Optional[int] = None) -> List[Album]:
        query = db.query(Album)
        if artist_id:
            query = query.filter(Album.artist_id == artist_id)
        return query.order_by(Album.release_year.desc(), Album.id).all()

    def create_album(self, db: Session, data: AlbumCreate) -> Album:
        if _blank(data.title) or not data.release_year or _blank(data.artist_name):
            raise BadRequestError("Missing required fields")

        try:
            artist = self.find_or_create_artist(db, data.artist_name)
            album = Album(
                title=data.title.strip(),
                image_url=data.image_url or None,
                release_year=int(data.release_year),
                artist_id=artist.id,
            )
            db.add(album)
            self._commit(db, f"Album created: {data.title}")
            db.refresh(album)
            return album
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating album: {e}")
            raise

    def update_album(self, db: Session, album_id: int, data: AlbumUpdate) -> Album:
        album = db.query(Album).filter(Album.id == album_id).first()
        if not album:
            raise NotFoundError("Album not found")
        changes = {}

        if data.title and data.title.strip() != album.title:
            changes["title"] = data.title.strip()
        if data.release_year and int(data.release_year) != album.release_year:
            changes["release_year"] = int(data.release_year)
        if data.image_url and data.image_url != album.image_url:
            changes["image_url"] = data.image_url

        try:
            if not _blank(data.artist_name):
                artist = self.find_or_create_artist(db, data.artist_name)
                if artist.id != album.artist_id:
                    changes["artist_id"] = artist.id

            if not changes:
                db.commit()
                return album

            for field, value in changes.items():
                setattr(album, field, value)
            self._commit(db, f"Album updated: {album_id} ({', '.join(changes)})")
            db.refresh(album)
            return album
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating album: {e}")
            raise

    def delete_album(self, db: Session, album_id: int):
        """Delete an album; its songs are removed by ON DELETE CASCADE"""
        deleted = db.query(Album).filter(Album.id == album_id).delete(synchronize_session=False)
        if not deleted:
            db.rollback()
            raise NotFoundError("Album not found")
        try:
            self._commit(db, f"Album deleted: {album_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting album: {e}")
            raise ServiceError("Failed to delete album", status_code=500)
        finally:
            db.expire_all()

# Create singleton instance
admin_service = AdminService()
