# ============================================================================
# FILE: streamify/schemas/catalog.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class ArtistResponse(BaseModel):
    """Schema for artist information"""
    id: int
    name: str
    image_url: Optional[str] = None
    bio: Optional[str] = None
    verified: bool = False

    class Config:
        from_attributes = True

class ArtistWithCounts(ArtistResponse):
    song_count: int = 0
    album_count: int = 0

class TopArtistResponse(ArtistResponse):
    total_plays: int = 0

class AlbumSummary(BaseModel):
    id: int
    title: str
    image_url: Optional[str] = None
    release_year: int
    artist_id: int

    class Config:
        from_attributes = True

class SongResponse(BaseModel):
    """Schema for song information"""
    id: int
    title: str
    duration: int  # Duration in seconds
    song_url: str
    image_url: str
    genre: Optional[str] = None
    play_count: int = 0
    artist_id: int
    album_id: Optional[int] = None
    artist: Optional[ArtistResponse] = None
    album: Optional[AlbumSummary] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class AlbumResponse(AlbumSummary):
    artist: Optional[ArtistResponse] = None
    song_count: int = 0

class AlbumDetail(AlbumResponse):
    songs: List[SongResponse] = []
    total_plays: int = 0

class ArtistProfile(ArtistWithCounts):
    albums: List[AlbumResponse] = []
    songs: List[SongResponse] = []

class SearchResults(BaseModel):
    songs: List[SongResponse] = []
    artists: List[ArtistResponse] = []
    albums: List[AlbumResponse] = []

class HomeFeed(BaseModel):
    songs: List[SongResponse] = []
    top_albums: List[AlbumDetail] = []
    top_artists: List[TopArtistResponse] = []
