# ============================================================================
# FILE: streamify/schemas/share.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional

class ShareData(BaseModel):
    """Metadata for link previews of shared content"""
    type: str
    id: int
    title: str
    description: str
    image: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    url: str
