# ============================================================================
# FILE: streamify/api/v1/endpoints/library.py
# Favorites, user songs, downloads, listening history and statistics
# ============================================================================
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from streamify.db.session import get_db
from streamify.api.dependencies import require_current_user
from streamify.schemas.catalog import SongResponse
from streamify.schemas.common import Envelope, ok
from streamify.schemas.history import HistoryAdd, HistoryPage, ListeningHistoryEntry
from streamify.schemas.playlist import PlaylistSongAdd
from streamify.schemas.stats import UserStatistics, UserTopAlbum, UserTopArtist, YearInReview
from streamify.services.history_service import history_service
from streamify.services.library_service import LibraryCollection, library_service
from streamify.services.stats_service import stats_service
from streamify.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _register_collection(path: str, collection: LibraryCollection):
    """GET / POST / DELETE routes for one per-user song collection"""

    @router.get(f"/{path}", response_model=Envelope[List[SongResponse]], name=f"list_{path}")
    async def list_songs(
        db: Session = Depends(get_db),
        current_user: User = Depends(require_current_user)
    ):
        return ok(collection.list_songs(db, current_user.id))

    @router.post(f"/{path}", response_model=Envelope[SongResponse],
                 status_code=status.HTTP_201_CREATED, name=f"add_{path}")
    async def add_song(
        song_data: PlaylistSongAdd,
        db: Session = Depends(get_db),
        current_user: User = Depends(require_current_user)
    ):
        return ok(collection.add(db, current_user.id, song_data.song_id))

    @router.delete(f"/{path}/{{song_id}}", response_model=Envelope[None], name=f"remove_{path}")
    async def remove_song(
        song_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(require_current_user)
    ):
        collection.remove(db, current_user.id, song_id)
        return ok()

_register_collection("favorites", library_service.favorites)
_register_collection("songs", library_service.user_songs)
_register_collection("downloads", library_service.downloads)

@router.get("/history", response_model=Envelope[HistoryPage])
async def get_listening_history(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Get user's listening history, newest first
    Requires authentication
    """
    return ok(history_service.get_listening_history(db, current_user.id, limit, offset))

@router.post("/history", response_model=Envelope[ListeningHistoryEntry], status_code=status.HTTP_201_CREATED)
async def add_listening_history(
    entry: HistoryAdd,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return ok(history_service.add_listening_history(db, current_user.id, entry.song_id, entry.duration))

@router.get("/statistics", response_model=Envelope[UserStatistics])
async def get_statistics(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return ok(stats_service.get_user_statistics(db, current_user.id))

@router.get("/top-artists", response_model=Envelope[List[UserTopArtist]])
async def get_top_artists(
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return ok(stats_service.get_user_top_artists(db, current_user.id, limit))

@router.get("/top-albums", response_model=Envelope[List[UserTopAlbum]])
async def get_top_albums(
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return ok(stats_service.get_user_top_albums(db, current_user.id, limit))

@router.get("/recommendations", response_model=Envelope[List[SongResponse]])
async def get_recommendations(
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Songs by the user's top artists or in their top genres"""
    return ok(stats_service.get_recommendations(db, current_user.id, limit))

@router.get("/year-in-review", response_model=Envelope[YearInReview])
async def get_year_in_review(
    year: Optional[int] = Query(None, ge=1970, le=9999),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return ok(stats_service.get_year_in_review(db, current_user.id, year))
