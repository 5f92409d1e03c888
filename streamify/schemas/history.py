# ============================================================================
# FILE: streamify/schemas/history.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from streamify.schemas.catalog import SongResponse

class PlayRequest(BaseModel):
    """Body of the player hook; duration is seconds listened"""
    duration: Optional[int] = None

class HistoryAdd(BaseModel):
    song_id: int
    duration: Optional[int] = None

class ListeningHistoryEntry(BaseModel):
    id: int
    song_id: int
    duration: Optional[int] = None
    played_at: datetime
    song: Optional[SongResponse] = None

    class Config:
        from_attributes = True

class HistoryPage(BaseModel):
    items: List[ListeningHistoryEntry] = []
    total: int = 0

class PlayResult(BaseModel):
    song_id: int
    play_count: int
    saved: bool
