# ============================================================================
# FILE: streamify/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from streamify.schemas.catalog import SongResponse

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

class PlaylistUpdate(BaseModel):
    """Schema for updating a playlist"""
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

class PlaylistSongAdd(BaseModel):
    """Schema for adding a song to playlist"""
    song_id: Optional[int] = None

class PlaylistSongResponse(BaseModel):
    """Schema for playlist song response"""
    id: int
    song_id: int
    added_at: datetime
    song: Optional[SongResponse] = None

    class Config:
        from_attributes = True

class PlaylistResponse(BaseModel):
    """Schema for playlist response"""
    id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    user_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    song_count: int = 0
    cover_song: Optional[SongResponse] = None

    class Config:
        from_attributes = True

class PlaylistDetail(PlaylistResponse):
    songs: List[PlaylistSongResponse] = []

class PlaylistSongs(BaseModel):
    """Songs of a playlist (by play count) with the playlist header"""
    playlist: PlaylistResponse
    songs: List[SongResponse] = []
