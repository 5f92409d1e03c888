# ============================================================================
# FILE: streamify/api/v1/endpoints/share.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from streamify.db.session import get_db
from streamify.schemas.common import Envelope, ok
from streamify.schemas.share import ShareData
from streamify.services.share_service import share_service

router = APIRouter()

@router.get("/{share_type}/{item_id}", response_model=Envelope[ShareData])
async def get_share_data(
    share_type: str,
    item_id: int,
    db: Session = Depends(get_db)
):
    """
    Link-preview metadata (title, description, image, canonical URL)
    for a song, artist, album or playlist
    """
    return ok(share_service.get_share_data(db, share_type, item_id))
