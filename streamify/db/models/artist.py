# ============================================================================
# FILE: streamify/db/models/artist.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from streamify.db.base import Base

class Artist(Base):
    """Catalog artist, unique by name"""
    __tablename__ = "artists"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)
    image_url = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # No cascade: albums and songs are deleted explicitly before the artist
    albums = relationship("Album", back_populates="artist", passive_deletes="all")
    songs = relationship("Song", back_populates="artist", passive_deletes="all")

    @property
    def song_count(self) -> int:
        return len(self.songs)

    @property
    def album_count(self) -> int:
        return len(self.albums)
