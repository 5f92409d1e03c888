# ============================================================================
# FILE: streamify/db/models/library.py
# Per-user song collections, each unique on (user_id, song_id)
# ============================================================================
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from streamify.db.base import Base

class FavoriteSong(Base):
    __tablename__ = "favorite_songs"
    __table_args__ = (UniqueConstraint("user_id", "song_id", name="uq_favorite_song"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id = Column(Integer, ForeignKey("songs.id", ondelete="CASCADE"), nullable=False)
    added_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="favorites")
    song = relationship("Song")

class UserSong(Base):
    """Song a user added to their own library"""
    __tablename__ = "user_songs"
    __table_args__ = (UniqueConstraint("user_id", "song_id", name="uq_user_song"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id = Column(Integer, ForeignKey("songs.id", ondelete="CASCADE"), nullable=False)
    added_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="user_songs")
    song = relationship("Song")

class UserDownload(Base):
    __tablename__ = "user_downloads"
    __table_args__ = (UniqueConstraint("user_id", "song_id", name="uq_user_download"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id = Column(Integer, ForeignKey("songs.id", ondelete="CASCADE"), nullable=False)
    downloaded_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="downloads")
    song = relationship("Song")
