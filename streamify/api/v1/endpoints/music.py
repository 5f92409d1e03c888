# ============================================================================
# FILE: streamify/api/v1/endpoints/music.py
# ============================================================================
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from streamify.db.session import get_db
from streamify.api.dependencies import get_current_user, require_current_user
from streamify.core.constants import get_all_genres
from streamify.schemas.catalog import (
    AlbumDetail,
    ArtistProfile,
    HomeFeed,
    SearchResults,
    SongResponse,
    TopArtistResponse,
)
from streamify.schemas.common import Envelope, ok
from streamify.schemas.history import PlayRequest, PlayResult
from streamify.services.catalog_service import catalog_service
from streamify.services.history_service import history_service
from streamify.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/home", response_model=Envelope[HomeFeed])
async def get_home(
    genre: Optional[str] = Query(None, description="Restrict the song list to one genre"),
    db: Session = Depends(get_db)
):
    """
    Landing page feed: most played songs, newest albums, top artists
    """
    return ok(catalog_service.get_home(db, genre))

@router.get("/songs", response_model=Envelope[List[SongResponse]])
async def get_songs(
    limit: int = Query(50, ge=1, le=200),
    genre: Optional[str] = None,
    db: Session = Depends(get_db)
):
    return ok(catalog_service.get_songs(db, limit, genre))

@router.get("/songs/{song_id}", response_model=Envelope[SongResponse])
async def get_song(
    song_id: int,
    db: Session = Depends(get_db)
):
    return ok(catalog_service.get_song(db, song_id))

@router.get("/search", response_model=Envelope[SearchResults])
async def search(
    query: str = Query("", description="Search query"),
    db: Session = Depends(get_db)
):
    """
    Search songs, artists and albums by substring
    Available to all users (authenticated and anonymous)
    """
    return ok(catalog_service.search(db, query))

@router.get("/genres", response_model=Envelope[List[str]])
async def get_genres():
    return ok(get_all_genres())

@router.get("/top-artists", response_model=Envelope[List[TopArtistResponse]])
async def get_top_artists(
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db)
):
    return ok(catalog_service.get_top_artists(db, limit))

@router.get("/top-albums", response_model=Envelope[List[AlbumDetail]])
async def get_top_albums(
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db)
):
    return ok(catalog_service.get_top_albums(db, limit))

@router.get("/artists/{artist_id}", response_model=Envelope[ArtistProfile])
async def get_artist(
    artist_id: int,
    db: Session = Depends(get_db)
):
    """Artist page with albums and songs"""
    return ok(catalog_service.get_artist_profile(db, artist_id))

@router.get("/albums/{album_id}", response_model=Envelope[AlbumDetail])
async def get_album(
    album_id: int,
    db: Session = Depends(get_db)
):
    return ok(catalog_service.get_album(db, album_id))

@router.post("/play/{song_id}", response_model=Envelope[PlayResult])
async def track_play(
    song_id: int,
    play: Optional[PlayRequest] = None,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Track song play
    Play count is always incremented; history is saved only for authenticated users
    """
    user_id = current_user.id if current_user else None
    duration = play.duration if play else None
    return ok(history_service.track_playback(db, song_id, user_id, duration))

@router.get("/recently-played", response_model=Envelope[List[SongResponse]])
async def get_recently_played(
    limit: int = Query(20, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return ok(history_service.get_recently_played(db, current_user.id, limit))
