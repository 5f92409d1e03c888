# ============================================================================
# FILE: streamify/api/v1/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from streamify.db.session import get_db
from streamify.api.dependencies import require_current_user
from streamify.schemas.common import Envelope, ok
from streamify.schemas.playlist import (
    PlaylistCreate,
    PlaylistUpdate,
    PlaylistResponse,
    PlaylistSongAdd,
    PlaylistSongs,
)
from streamify.services.playlist_service import playlist_service
from streamify.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/my-playlists", response_model=Envelope[List[PlaylistResponse]])
async def get_my_playlists(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Get all playlists for the current user
    Requires authentication
    """
    playlists = playlist_service.get_user_playlists(db, current_user.id)
    return ok(playlists)

@router.post("/create", response_model=Envelope[PlaylistResponse], status_code=status.HTTP_201_CREATED)
async def create_playlist(
    playlist_data: PlaylistCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Create a new playlist
    Requires authentication
    """
    playlist = playlist_service.create_playlist(db, current_user.id, playlist_data)
    return ok(playlist)

@router.get("/{playlist_id}", response_model=Envelope[PlaylistSongs])
async def get_playlist(
    playlist_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Get a specific playlist with its songs, most played first
    Requires authentication and ownership
    """
    return ok(playlist_service.get_playlist_songs(db, playlist_id, current_user.id))

@router.put("/{playlist_id}", response_model=Envelope[PlaylistResponse])
async def update_playlist(
    playlist_id: int,
    update_data: PlaylistUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Update playlist details (name, description, image)
    Requires authentication and ownership
    """
    playlist = playlist_service.update_playlist(db, playlist_id, current_user.id, update_data)
    return ok(playlist)

@router.delete("/{playlist_id}", response_model=Envelope[None])
async def delete_playlist(
    playlist_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Delete a playlist
    Requires authentication and ownership
    """
    playlist_service.delete_playlist(db, playlist_id, current_user.id)
    return ok()

@router.post("/{playlist_id}/add-song", response_model=Envelope[None])
async def add_song_to_playlist(
    playlist_id: int,
    song_data: PlaylistSongAdd,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Add a song to a playlist
    Requires authentication and ownership
    """
    playlist_service.add_song_to_playlist(db, playlist_id, current_user.id, song_data.song_id)
    return ok()

@router.delete("/{playlist_id}/remove-song/{song_id}", response_model=Envelope[None])
async def remove_song_from_playlist(
    playlist_id: int,
    song_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Remove a song from a playlist
    Requires authentication and ownership
    """
    playlist_service.remove_song_from_playlist(db, playlist_id, current_user.id, song_id)
    return ok()
