# ============================================================================
# FILE: streamify/schemas/stats.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import Optional, List
from streamify.schemas.catalog import ArtistResponse, AlbumSummary, SongResponse

class ListeningTime(BaseModel):
    seconds: int = 0
    minutes: int = 0
    hours: int = 0

class UserStatistics(BaseModel):
    total_songs_played: int = 0
    total_playlists: int = 0
    total_favorites: int = 0
    total_user_songs: int = 0
    total_listening_time: ListeningTime = Field(default_factory=ListeningTime)
    recently_played_count: int = 0

class UserTopArtist(ArtistResponse):
    play_count: int = 0

class UserTopAlbum(AlbumSummary):
    artist: Optional[ArtistResponse] = None
    play_count: int = 0

class YearInReview(BaseModel):
    year: int
    total_plays: int = 0
    total_time: ListeningTime = Field(default_factory=ListeningTime)
    top_songs: List[SongResponse] = []
    top_artists: List[UserTopArtist] = []
    top_albums: List[UserTopAlbum] = []
