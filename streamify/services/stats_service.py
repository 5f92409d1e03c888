# ============================================================================
# FILE: streamify/services/stats_service.py
# Per-user statistics, top lists, recommendations and year in review
# ============================================================================
from typing import List, Dict, Optional
from collections import Counter
from datetime import datetime
from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from streamify.db.models.history import ListeningHistory
from streamify.db.models.song import Song
from streamify.schemas.catalog import ArtistResponse, AlbumSummary, SongResponse
from streamify.schemas.stats import ListeningTime, UserTopArtist, UserTopAlbum
from streamify.services.history_service import history_service
from streamify.services.library_service import library_service
from streamify.db.models.playlist import Playlist
import logging

logger = logging.getLogger(__name__)

RECOMMENDATION_ARTISTS = 5
RECOMMENDATION_GENRES = 3
RECOMMENDATION_WINDOW = 100
YEAR_TOP_LIMIT = 10

def listening_time(seconds: Optional[int]) -> ListeningTime:
    seconds = int(seconds or 0)
    minutes = seconds // 60
    return ListeningTime(seconds=seconds, minutes=minutes, hours=minutes // 60)

def _rank_artists(entries: List[ListeningHistory], limit: int) -> List[UserTopArtist]:
    counts = Counter()
    artists = {}
    for entry in entries:
        artist = entry.song.artist
        artists[artist.id] = artist
        counts[artist.id] += 1
    return [
        UserTopArtist(**ArtistResponse.model_validate(artists[artist_id]).model_dump(), play_count=count)
        for artist_id, count in counts.most_common(limit)
    ]

def _rank_albums(entries: List[ListeningHistory], limit: int) -> List[UserTopAlbum]:
    counts = Counter()
    albums = {}
    for entry in entries:
        album = entry.song.album
        if album is None:
            continue
        albums[album.id] = album
        counts[album.id] += 1
    return [
        UserTopAlbum(
            **AlbumSummary.model_validate(albums[album_id]).model_dump(),
            artist=ArtistResponse.model_validate(albums[album_id].artist),
            play_count=count,
        )
        for album_id, count in counts.most_common(limit)
    ]

class StatsService:
    """Service layer for listening statistics"""

    def _history(self, db: Session, user_id: int, start: Optional[datetime] = None,
                 end: Optional[datetime] = None):
        query = db.query(ListeningHistory).filter(ListeningHistory.user_id == user_id)
        if start is not None:
            query = query.filter(ListeningHistory.played_at >= start)
        if end is not None:
            query = query.filter(ListeningHistory.played_at < end)
        return query

    def _total_seconds(self, query) -> int:
        return query.with_entities(func.coalesce(func.sum(ListeningHistory.duration), 0)).scalar() or 0

    def get_user_statistics(self, db: Session, user_id: int) -> Dict:
        history = self._history(db, user_id)
        return {
            "total_songs_played": history.count(),
            "total_playlists": db.query(Playlist).filter(Playlist.user_id == user_id).count(),
            "total_favorites": library_service.favorites.count(db, user_id),
            "total_user_songs": library_service.user_songs.count(db, user_id),
            "total_listening_time": listening_time(self._total_seconds(history)),
            "recently_played_count": history_service.count_recently_played(db, user_id),
        }

    def get_user_top_artists(self, db: Session, user_id: int, limit: int = 10) -> List[UserTopArtist]:
        return _rank_artists(self._history(db, user_id).all(), limit)

    def get_user_top_albums(self, db: Session, user_id: int, limit: int = 10) -> List[UserTopAlbum]:
        return _rank_albums(self._history(db, user_id).all(), limit)

    def get_recommendations(self, db: Session, user_id: int, limit: int = 20) -> List[Song]:
        """
        Catalog songs by the user's top artists or in their top genres,
        most played first. Users without history get nothing.
        """
        artist_ids = [a.id for a in self.get_user_top_artists(db, user_id, RECOMMENDATION_ARTISTS)]

        recent = (
            self._history(db, user_id)
            .order_by(ListeningHistory.played_at.desc())
            .limit(RECOMMENDATION_WINDOW)
            .all()
        )
        genres = Counter(entry.song.genre for entry in recent if entry.song.genre)
        top_genres = [genre for genre, _ in genres.most_common(RECOMMENDATION_GENRES)]

        if not artist_ids and not top_genres:
            return []

        conditions = []
        if artist_ids:
            conditions.append(Song.artist_id.in_(artist_ids))
        if top_genres:
            conditions.append(Song.genre.in_(top_genres))
        return (
            db.query(Song)
            .filter(or_(*conditions))
            .order_by(Song.play_count.desc(), Song.id)
            .limit(limit)
            .all()
        )

    def get_year_in_review(self, db: Session, user_id: int, year: Optional[int] = None) -> Dict:
        year = year or datetime.utcnow().year
        start = datetime(year, 1, 1)
        # No upper bound for the last representable year
        end = datetime(year + 1, 1, 1) if year < datetime.max.year else None
        history = self._history(db, user_id, start, end)

        song_counts = (
            history.with_entities(ListeningHistory.song_id, func.count(ListeningHistory.id).label("plays"))
            .group_by(ListeningHistory.song_id)
            .order_by(func.count(ListeningHistory.id).desc(), ListeningHistory.song_id)
            .limit(YEAR_TOP_LIMIT)
            .all()
        )
        songs = {
            song.id: song
            for song in db.query(Song).filter(Song.id.in_([song_id for song_id, _ in song_counts]))
        }
        top_songs = [
            SongResponse.model_validate(songs[song_id]).model_copy(update={"play_count": plays})
            for song_id, plays in song_counts
            if song_id in songs
        ]

        entries = history.all()
        return {
            "year": year,
            "total_plays": len(entries),
            "total_time": listening_time(self._total_seconds(history)),
            "top_songs": top_songs,
            "top_artists": _rank_artists(entries, YEAR_TOP_LIMIT),
            "top_albums": _rank_albums(entries, YEAR_TOP_LIMIT),
        }

# Create singleton instance
stats_service = StatsService()
