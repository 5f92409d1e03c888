# ============================================================================
# FILE: streamify/services/history_service.py
# ============================================================================
from typing import List, Dict, Optional
from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from streamify.config import settings
from streamify.core.errors import translate_integrity_error
from streamify.db.models.history import RecentlyPlayed, ListeningHistory
from streamify.db.models.song import Song
from streamify.services.catalog_service import catalog_service
import logging

logger = logging.getLogger(__name__)

class HistoryService:
    """Service layer for playback tracking, recently played and listening history"""

    def track_playback(self, db: Session, song_id: int, user_id: Optional[int] = None,
                       duration: Optional[int] = None) -> Dict:
        """
        Player hook called when a song starts.
        Play counts are public; history is only saved for logged-in users
        """
        play_count = catalog_service.increment_play_count(db, song_id)

        if user_id is None:
            logger.info(f"Anonymous playback: {song_id} (not saved)")
            return {"song_id": song_id, "play_count": play_count, "saved": False}

        if duration is None:
            duration = db.query(Song.duration).filter(Song.id == song_id).scalar()
        self.add_to_recently_played(db, user_id, song_id)
        self.add_listening_history(db, user_id, song_id, duration)
        logger.info(f"Playback tracked for user {user_id}: {song_id}")
        return {"song_id": song_id, "play_count": play_count, "saved": True}

    def add_to_recently_played(self, db: Session, user_id: int, song_id: int) -> RecentlyPlayed:
        """Upsert the (user, song) row, then evict the oldest rows beyond the cap"""
        try:
            entry = db.query(RecentlyPlayed).filter(
                RecentlyPlayed.user_id == user_id,
                RecentlyPlayed.song_id == song_id
            ).first()
            if entry:
                entry.played_at = datetime.utcnow()
            else:
                entry = RecentlyPlayed(user_id=user_id, song_id=song_id, played_at=datetime.utcnow())
                db.add(entry)
            db.flush()

            overflow = self.count_recently_played(db, user_id) - settings.RECENTLY_PLAYED_LIMIT
            if overflow > 0:
                oldest_ids = [
                    row_id for (row_id,) in db.query(RecentlyPlayed.id)
                    .filter(RecentlyPlayed.user_id == user_id)
                    .order_by(RecentlyPlayed.played_at.asc(), RecentlyPlayed.id.asc())
                    .limit(overflow)
                ]
                db.query(RecentlyPlayed).filter(RecentlyPlayed.id.in_(oldest_ids)).delete(
                    synchronize_session=False
                )
            db.commit()
            return entry
        except IntegrityError as e:
            db.rollback()
            raise translate_integrity_error(e, missing="Song not found")
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding to recently played: {e}")
            raise

    def count_recently_played(self, db: Session, user_id: int) -> int:
        return db.query(RecentlyPlayed).filter(RecentlyPlayed.user_id == user_id).count()

    def get_recently_played(self, db: Session, user_id: int, limit: int = 20) -> List[Song]:
        rows = (
            db.query(RecentlyPlayed)
            .filter(RecentlyPlayed.user_id == user_id)
            .order_by(RecentlyPlayed.played_at.desc(), RecentlyPlayed.id.desc())
            .limit(limit)
            .all()
        )
        return [row.song for row in rows]

    def add_listening_history(self, db: Session, user_id: int, song_id: int,
                              duration: Optional[int] = None) -> ListeningHistory:
        try:
            entry = ListeningHistory(user_id=user_id, song_id=song_id, duration=duration)
            db.add(entry)
            db.commit()
            db.refresh(entry)
            return entry
        except IntegrityError as e:
            db.rollback()
            raise translate_integrity_error(e, missing="Song not found")
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding to listening history: {e}")
            raise

    def get_listening_history(self, db: Session, user_id: int, limit: int = 50, offset: int = 0) -> Dict:
        """A page of listening history, newest first, with the total row count"""
        query = db.query(ListeningHistory).filter(ListeningHistory.user_id == user_id)
        items = (
            query.order_by(ListeningHistory.played_at.desc(), ListeningHistory.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return {"items": items, "total": query.count()}

# Create singleton instance
history_service = HistoryService()
