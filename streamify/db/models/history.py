# ============================================================================
# FILE: streamify/db/models/history.py
# ============================================================================
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from streamify.db.base import Base

class RecentlyPlayed(Base):
    """Most recent play of each song per user, capped per user"""
    __tablename__ = "recently_played"
    __table_args__ = (UniqueConstraint("user_id", "song_id", name="uq_recently_played"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id = Column(Integer, ForeignKey("songs.id", ondelete="CASCADE"), nullable=False)
    played_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="recently_played")
    song = relationship("Song")

class ListeningHistory(Base):
    """Every play of a song by a logged-in user"""
    __tablename__ = "listening_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id = Column(Integer, ForeignKey("songs.id", ondelete="CASCADE"), nullable=False)
    duration = Column(Integer, nullable=True)  # Seconds listened
    played_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="history")
    song = relationship("Song")
