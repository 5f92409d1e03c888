# ============================================================================
# FILE: streamify/schemas/admin.py
# Admin content-management payloads; required fields are checked by the services
# ============================================================================
from pydantic import BaseModel
from typing import Optional

class SongCreate(BaseModel):
    title: Optional[str] = None
    duration: Optional[int] = None
    song_url: Optional[str] = None
    image_url: Optional[str] = None
    artist_name: Optional[str] = None
    album_name: Optional[str] = None
    release_year: Optional[int] = None
    genre: Optional[str] = None

class SongUpdate(SongCreate):
    pass

class ArtistCreate(BaseModel):
    name: Optional[str] = None
    image_url: Optional[str] = None
    bio: Optional[str] = None
    verified: Optional[bool] = None

class ArtistUpdate(ArtistCreate):
    pass

class AlbumCreate(BaseModel):
    title: Optional[str] = None
    image_url: Optional[str] = None
    release_year: Optional[int] = None
    artist_name: Optional[str] = None

class AlbumUpdate(AlbumCreate):
    pass

class UploadResponse(BaseModel):
    url: str
    filename: str
