# ============================================================================
# FILE: streamify/db/models/album.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from streamify.db.base import Base

class Album(Base):
    """Album belonging to one artist"""
    __tablename__ = "albums"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    image_url = Column(String, nullable=True)
    release_year = Column(Integer, nullable=False)
    artist_id = Column(Integer, ForeignKey("artists.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    artist = relationship("Artist", back_populates="albums")
    # Songs go with their album (ON DELETE CASCADE on songs.album_id)
    songs = relationship("Song", back_populates="album", passive_deletes="all")

    @property
    def song_count(self) -> int:
        return len(self.songs)

    @property
    def total_plays(self) -> int:
        return sum(song.play_count or 0 for song in self.songs)
