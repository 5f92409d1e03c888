# ============================================================================
# FILE: streamify/api/v1/endpoints/admin.py
# Content management; every route requires an admin session
# ============================================================================
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session
from typing import List, Optional
from streamify.db.session import get_db
from streamify.api.dependencies import require_admin
from streamify.config import settings
from streamify.core.constants import get_all_artists
from streamify.core.errors import BadRequestError
from streamify.schemas.admin import (
    AlbumCreate,
    AlbumUpdate,
    ArtistCreate,
    ArtistUpdate,
    SongCreate,
    SongUpdate,
    UploadResponse,
)
from streamify.schemas.catalog import AlbumDetail, AlbumResponse, ArtistProfile, ArtistWithCounts, SongResponse
from streamify.schemas.common import Envelope, ok
from streamify.schemas.playlist import (
    PlaylistCreate,
    PlaylistDetail,
    PlaylistResponse,
    PlaylistSongAdd,
    PlaylistSongResponse,
    PlaylistUpdate,
)
from streamify.schemas.user import UserResponse
from streamify.services.admin_service import admin_service
from streamify.services.catalog_service import catalog_service
from streamify.services.playlist_service import playlist_service
from streamify.services.user_service import user_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter()
admin_router = APIRouter(dependencies=[Depends(require_admin)])

@router.post("/setup", response_model=Envelope[UserResponse])
async def setup_admin(db: Session = Depends(get_db)):
    """
    Promote the configured ADMIN_EMAIL account to admin
    """
    if not settings.ADMIN_EMAIL:
        raise BadRequestError("ADMIN_EMAIL is not configured")
    return ok(user_service.promote_admin(db, settings.ADMIN_EMAIL))

# ----------------------------------------------------------------------------
# Uploads
# ----------------------------------------------------------------------------
@admin_router.post("/upload", response_model=Envelope[UploadResponse])
async def upload_file(
    file: Optional[UploadFile] = File(None),
    type: Optional[str] = Form(None),
):
    """
    Upload a song file (`type=audio`, max 50MB) or a cover image (`type=image`, max 10MB)
    Returns the public URL to store on the song/artist/album
    """
    if file is None:
        raise BadRequestError("No file provided")
    content = await file.read()
    return ok(admin_service.upload_file(type, file.filename or "", file.content_type, content))

@admin_router.get("/artist-suggestions", response_model=Envelope[List[str]])
async def artist_suggestions():
    return ok(get_all_artists())

# ----------------------------------------------------------------------------
# Songs
# ----------------------------------------------------------------------------
@admin_router.get("/songs", response_model=Envelope[List[SongResponse]])
async def list_songs(
    artist_id: Optional[int] = None,
    album_id: Optional[int] = None,
    db: Session = Depends(get_db)
):
    return ok(admin_service.get_songs(db, artist_id, album_id))

@admin_router.get("/songs/{song_id}", response_model=Envelope[SongResponse])
async def get_song(song_id: int, db: Session = Depends(get_db)):
    return ok(catalog_service.get_song(db, song_id))

@admin_router.post("/songs", response_model=Envelope[SongResponse], status_code=status.HTTP_201_CREATED)
async def create_song(data: SongCreate, db: Session = Depends(get_db)):
    """Create a song; artist and album are found or created by name"""
    return ok(admin_service.create_song(db, data))

@admin_router.put("/songs/{song_id}", response_model=Envelope[SongResponse])
async def update_song(song_id: int, data: SongUpdate, db: Session = Depends(get_db)):
    return ok(admin_service.update_song(db, song_id, data))

@admin_router.delete("/songs/{song_id}", response_model=Envelope[None])
async def delete_song(song_id: int, db: Session = Depends(get_db)):
    admin_service.delete_song(db, song_id)
    return ok()

# ----------------------------------------------------------------------------
# Artists
# ----------------------------------------------------------------------------
@admin_router.get("/artists", response_model=Envelope[List[ArtistWithCounts]])
async def list_artists(db: Session = Depends(get_db)):
    return ok(admin_service.get_artists(db))

@admin_router.get("/artists/{artist_id}", response_model=Envelope[ArtistProfile])
async def get_artist(artist_id: int, db: Session = Depends(get_db)):
    return ok(catalog_service.get_artist_profile(db, artist_id))

@admin_router.post("/artists", response_model=Envelope[ArtistWithCounts], status_code=status.HTTP_201_CREATED)
async def create_artist(data: ArtistCreate, db: Session = Depends(get_db)):
    return ok(admin_service.create_artist(db, data))

@admin_router.put("/artists/{artist_id}", response_model=Envelope[ArtistWithCounts])
async def update_artist(artist_id: int, data: ArtistUpdate, db: Session = Depends(get_db)):
    return ok(admin_service.update_artist(db, artist_id, data))

@admin_router.delete("/artists/{artist_id}", response_model=Envelope[None])
async def delete_artist(artist_id: int, db: Session = Depends(get_db)):
    """Delete an artist together with its albums and songs"""
    admin_service.delete_artist(db, artist_id)
    return ok()

# ----------------------------------------------------------------------------
# Albums
# ----------------------------------------------------------------------------
@admin_router.get("/albums", response_model=Envelope[List[AlbumResponse]])
async def list_albums(artist_id: Optional[int] = None, db: Session = Depends(get_db)):
    return ok(admin_service.get_albums(db, artist_id))

@admin_router.get("/albums/{album_id}", response_model=Envelope[AlbumDetail])
async def get_album(album_id: int, db: Session = Depends(get_db)):
    return ok(catalog_service.get_album(db, album_id))

@admin_router.post("/albums", response_model=Envelope[AlbumResponse], status_code=status.HTTP_201_CREATED)
async def create_album(data: AlbumCreate, db: Session = Depends(get_db)):
    return ok(admin_service.create_album(db, data))

@admin_router.put("/albums/{album_id}", response_model=Envelope[AlbumResponse])
async def update_album(album_id: int, data: AlbumUpdate, db: Session = Depends(get_db)):
    return ok(admin_service.update_album(db, album_id, data))

@admin_router.delete("/albums/{album_id}", response_model=Envelope[None])
async def delete_album(album_id: int, db: Session = Depends(get_db)):
    """Delete an album and its songs"""
    admin_service.delete_album(db, album_id)
    return ok()

# ----------------------------------------------------------------------------
# Curated playlists
# ----------------------------------------------------------------------------
@admin_router.get("/playlists", response_model=Envelope[List[PlaylistResponse]])
async def list_playlists(db: Session = Depends(get_db)):
    return ok(playlist_service.get_all_playlists(db))

@admin_router.get("/playlists/{playlist_id}", response_model=Envelope[PlaylistDetail])
async def get_playlist(playlist_id: int, db: Session = Depends(get_db)):
    return ok(playlist_service.get_playlist(db, playlist_id))

@admin_router.post("/playlists", response_model=Envelope[PlaylistResponse], status_code=status.HTTP_201_CREATED)
async def create_playlist(data: PlaylistCreate, db: Session = Depends(get_db)):
    return ok(playlist_service.create_playlist(db, None, data))

@admin_router.put("/playlists/{playlist_id}", response_model=Envelope[PlaylistResponse])
async def update_playlist(playlist_id: int, data: PlaylistUpdate, db: Session = Depends(get_db)):
    return ok(playlist_service.update_playlist(db, playlist_id, None, data))

@admin_router.delete("/playlists/{playlist_id}", response_model=Envelope[None])
async def delete_playlist(playlist_id: int, db: Session = Depends(get_db)):
    playlist_service.delete_playlist(db, playlist_id, None)
    return ok()

@admin_router.post("/playlists/{playlist_id}/songs", response_model=Envelope[PlaylistSongResponse],
                   status_code=status.HTTP_201_CREATED)
async def add_song_to_playlist(playlist_id: int, data: PlaylistSongAdd, db: Session = Depends(get_db)):
    return ok(playlist_service.add_song_to_playlist(db, playlist_id, None, data.song_id))

@admin_router.delete("/playlists/{playlist_id}/songs/{song_id}", response_model=Envelope[None])
async def remove_song_from_playlist(playlist_id: int, song_id: int, db: Session = Depends(get_db)):
    playlist_service.remove_song_from_playlist(db, playlist_id, None, song_id)
    return ok()

router.include_router(admin_router)
