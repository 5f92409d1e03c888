# ============================================================================
# FILE: streamify/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from streamify.db.base import Base

class Song(Base):
    """Catalog song; song_url and image_url point into the public upload directory"""
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    duration = Column(Integer, nullable=False)  # Duration in seconds
    song_url = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    genre = Column(String, nullable=True, index=True)
    play_count = Column(Integer, default=0, nullable=False)
    artist_id = Column(Integer, ForeignKey("artists.id"), nullable=False, index=True)
    album_id = Column(Integer, ForeignKey("albums.id", ondelete="CASCADE"), nullable=True, index=True)
    release_date = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    artist = relationship("Artist", back_populates="songs")
    album = relationship("Album", back_populates="songs")
