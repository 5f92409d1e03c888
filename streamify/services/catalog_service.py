# ============================================================================
# FILE: streamify/services/catalog_service.py
# ============================================================================
from typing import List, Dict, Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from streamify.config import settings
from streamify.core.cache import cache
from streamify.core.errors import NotFoundError
from streamify.db.models.album import Album
from streamify.db.models.artist import Artist
from streamify.db.models.song import Song
from streamify.schemas.catalog import (
    AlbumDetail,
    AlbumResponse,
    ArtistProfile,
    ArtistResponse,
    SearchResults,
    SongResponse,
    TopArtistResponse,
)
import logging

logger = logging.getLogger(__name__)

CACHE_PREFIX = "catalog:"
SEARCH_SONG_LIMIT = 20
SEARCH_ARTIST_LIMIT = 10
SEARCH_ALBUM_LIMIT = 10

def _contains(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"

def _by_plays(songs) -> List[Song]:
    return sorted(songs, key=lambda s: s.play_count or 0, reverse=True)

class CatalogService:
    """Service layer for catalog reads (songs, artists, albums, search)"""

    def get_songs(self, db: Session, limit: int = 50, genre: Optional[str] = None) -> List[Song]:
        """Most played songs, optionally restricted to one genre"""
        query = db.query(Song)
        if genre:
            query = query.filter(Song.genre == genre)
        songs = query.order_by(Song.play_count.desc(), Song.id).limit(limit).all()
        logger.info(f"Fetched {len(songs)} songs")
        return songs

    def get_song(self, db: Session, song_id: int) -> Song:
        song = db.query(Song).filter(Song.id == song_id).first()
        if not song:
            raise NotFoundError("Song not found")
        return song

    def increment_play_count(self, db: Session, song_id: int) -> int:
        """Atomically bump a song's play counter, returns the new value"""
        try:
            updated = db.query(Song).filter(Song.id == song_id).update(
                {Song.play_count: Song.play_count + 1}, synchronize_session=False
            )
            if not updated:
                db.rollback()
                raise NotFoundError("Song not found")
            db.commit()
        except NotFoundError:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Error incrementing play count: {e}")
            raise
        return db.query(Song.play_count).filter(Song.id == song_id).scalar()

    def search(self, db: Session, query: str) -> Dict:
        """
        Case-insensitive substring search over songs, artists and albums.
        Results are cached in Redis for performance

        Returns:
            {"songs": [...], "artists": [...], "albums": [...]}
        """
        term = (query or "").strip().lower()
        if not term:
            return SearchResults().model_dump(mode="json")

        cache_key = f"{CACHE_PREFIX}search:{term}"
        cached_results = cache.get_cache(cache_key)
        if cached_results:
            logger.info(f"Cache hit for search: {term}")
            return cached_results

        pattern = _contains(term)
        songs = (
            db.query(Song)
            .join(Artist, Song.artist_id == Artist.id)
            .outerjoin(Album, Song.album_id == Album.id)
            .filter(or_(
                Song.title.ilike(pattern, escape="\\"),
                Artist.name.ilike(pattern, escape="\\"),
                Album.title.ilike(pattern, escape="\\"),
            ))
            .order_by(Song.play_count.desc(), Song.id)
            .limit(SEARCH_SONG_LIMIT)
            .all()
        )
        artists = (
            db.query(Artist)
            .filter(Artist.name.ilike(pattern, escape="\\"))
            .order_by(Artist.name)
            .limit(SEARCH_ARTIST_LIMIT)
            .all()
        )
        albums = (
            db.query(Album)
            .join(Artist, Album.artist_id == Artist.id)
            .filter(or_(
                Album.title.ilike(pattern, escape="\\"),
                Artist.name.ilike(pattern, escape="\\"),
            ))
            .order_by(Album.release_year.desc(), Album.id)
            .limit(SEARCH_ALBUM_LIMIT)
            .all()
        )

        response_data = SearchResults(
            songs=[SongResponse.model_validate(s) for s in songs],
            artists=[ArtistResponse.model_validate(a) for a in artists],
            albums=[AlbumResponse.model_validate(a) for a in albums],
        ).model_dump(mode="json")

        cache.set_cache(cache_key, response_data, settings.CACHE_EXPIRE_SECONDS)
        return response_data

    def get_top_artists(self, db: Session, limit: int = 10) -> List[Dict]:
        """Artists ranked by the summed play count of their songs"""
        cache_key = f"{CACHE_PREFIX}top-artists:{limit}"
        cached = cache.get_cache(cache_key)
        if cached is not None:
            return cached

        total_plays = func.coalesce(func.sum(Song.play_count), 0).label("total_plays")
        rows = (
            db.query(Artist, total_plays)
            .outerjoin(Song, Song.artist_id == Artist.id)
            .group_by(Artist.id)
            .order_by(total_plays.desc(), Artist.name)
            .limit(limit)
            .all()
        )
        top = [
            TopArtistResponse(
                **ArtistResponse.model_validate(artist).model_dump(),
                total_plays=int(plays or 0),
            ).model_dump(mode="json")
            for artist, plays in rows
        ]

        cache.set_cache(cache_key, top, settings.CACHE_EXPIRE_SECONDS)
        return top

    def get_top_albums(self, db: Session, limit: int = 10) -> List[Dict]:
        """Newest albums first, ties broken by total plays; each with its songs"""
        cache_key = f"{CACHE_PREFIX}top-albums:{limit}"
        cached = cache.get_cache(cache_key)
        if cached is not None:
            return cached

        total_plays = func.coalesce(func.sum(Song.play_count), 0).label("total_plays")
        rows = (
            db.query(Album, total_plays)
            .outerjoin(Song, Song.album_id == Album.id)
            .group_by(Album.id)
            .order_by(Album.release_year.desc(), total_plays.desc(), Album.id)
            .limit(limit)
            .all()
        )
        top = []
        for album, _ in rows:
            detail = AlbumDetail.model_validate(album)
            detail.songs.sort(key=lambda s: s.play_count, reverse=True)
            top.append(detail.model_dump(mode="json"))

        cache.set_cache(cache_key, top, settings.CACHE_EXPIRE_SECONDS)
        return top

    def get_artist_profile(self, db: Session, artist_id: int) -> ArtistProfile:
        """Artist page: albums newest first, songs most played first"""
        artist = db.query(Artist).filter(Artist.id == artist_id).first()
        if not artist:
            raise NotFoundError("Artist not found")

        profile = ArtistProfile.model_validate(artist)
        profile.albums.sort(key=lambda a: a.release_year, reverse=True)
        profile.songs = [SongResponse.model_validate(s) for s in _by_plays(artist.songs)]
        return profile

    def get_album(self, db: Session, album_id: int) -> AlbumDetail:
        album = db.query(Album).filter(Album.id == album_id).first()
        if not album:
            raise NotFoundError("Album not found")

        detail = AlbumDetail.model_validate(album)
        detail.songs.sort(key=lambda s: s.id)
        return detail

    def get_home(self, db: Session, genre: Optional[str] = None) -> Dict:
        """Landing page feed"""
        return {
            "songs": self.get_songs(db, limit=20, genre=genre),
            "top_albums": self.get_top_albums(db, limit=3),
            "top_artists": self.get_top_artists(db, limit=5),
        }

    def invalidate(self):
        """Drop every cached catalog read after a content change"""
        removed = cache.delete_prefix(CACHE_PREFIX)
        if removed:
            logger.info(f"Invalidated {removed} cached catalog entries")

# Create singleton instance
catalog_service = CatalogService()
