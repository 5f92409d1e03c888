# ============================================================================
# FILE: streamify/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from streamify.db.base import Base

class User(Base):
    """User model for authentication and user-specific features"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    image = Column(String, nullable=True)
    is_admin = Column(Boolean, default=False, nullable=False)

    # Privacy settings
    profile_public = Column(Boolean, default=True, nullable=False)
    stats_public = Column(Boolean, default=True, nullable=False)
    playlists_public = Column(Boolean, default=True, nullable=False)
    favorites_public = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships (rows are removed by ON DELETE CASCADE)
    playlists = relationship("Playlist", back_populates="user", passive_deletes="all")
    favorites = relationship("FavoriteSong", back_populates="user", passive_deletes="all")
    user_songs = relationship("UserSong", back_populates="user", passive_deletes="all")
    downloads = relationship("UserDownload", back_populates="user", passive_deletes="all")
    recently_played = relationship("RecentlyPlayed", back_populates="user", passive_deletes="all")
    history = relationship("ListeningHistory", back_populates="user", passive_deletes="all")
