# ============================================================================
# FILE: streamify/services/share_service.py
# ============================================================================
from typing import List, Dict
from datetime import datetime
from xml.etree import ElementTree
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from streamify.config import settings
from streamify.core.errors import BadRequestError, NotFoundError
from streamify.db.models.album import Album
from streamify.db.models.artist import Artist
from streamify.db.models.playlist import Playlist
from streamify.db.models.song import Song
import logging

logger = logging.getLogger(__name__)

SHARE_TYPES = ("song", "artist", "album", "playlist")
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
SITEMAP_SONG_LIMIT = 1000
SITEMAP_ARTIST_LIMIT = 500
SITEMAP_ALBUM_LIMIT = 500

def base_url() -> str:
    return settings.SITE_URL.rstrip("/")

def get_share_url(share_type: str, item_id: int) -> str:
    return f"{base_url()}/share/{share_type}/{item_id}"

class ShareService:
    """Link-preview metadata for shared content and the public sitemap"""

    def get_share_data(self, db: Session, share_type: str, item_id: int) -> Dict:
        if share_type not in SHARE_TYPES:
            raise BadRequestError(f"Unsupported share type: {share_type}")

        data = getattr(self, f"_{share_type}")(db, item_id)
        if data is None:
            raise NotFoundError(f"{share_type.capitalize()} not found")
        data.update({"type": share_type, "id": item_id, "url": get_share_url(share_type, item_id)})
        return data

    def _song(self, db: Session, song_id: int):
        song = db.query(Song).filter(Song.id == song_id).first()
        if not song:
            return None
        artist_name = song.artist.name if song.artist else None
        return {
            "title": song.title,
            "description": f"Listen to {song.title} by {artist_name or 'Unknown Artist'}",
            "image": song.image_url,
            "artist": artist_name,
            "album": song.album.title if song.album else None,
        }

    def _artist(self, db: Session, artist_id: int):
        artist = db.query(Artist).filter(Artist.id == artist_id).first()
        if not artist:
            return None
        return {
            "title": artist.name,
            "description": f"Listen to {artist.name} - {artist.song_count} songs, {artist.album_count} albums",
            "image": artist.image_url,
        }

    def _album(self, db: Session, album_id: int):
        album = db.query(Album).filter(Album.id == album_id).first()
        if not album:
            return None
        artist_name = album.artist.name if album.artist else None
        return {
            "title": album.title,
            "description": f"{album.title} by {artist_name or 'Unknown Artist'} - {album.song_count} songs",
            "image": album.image_url,
            "artist": artist_name,
        }

    def _playlist(self, db: Session, playlist_id: int):
        playlist = db.query(Playlist).filter(Playlist.id == playlist_id).first()
        if not playlist:
            return None
        description = playlist.description
        if not description:
            owner = f" by {playlist.user.name}" if playlist.user else ""
            description = f"{playlist.name} - {playlist.song_count} songs{owner}"
        return {
            "title": playlist.name,
            "description": description,
            "image": playlist.image_url,
        }

    def get_sitemap_entries(self, db: Session) -> List[Dict]:
        now = datetime.utcnow()
        entries = [
            {"loc": base_url(), "lastmod": now, "changefreq": "daily", "priority": 1.0},
            {"loc": f"{base_url()}/search", "lastmod": now, "changefreq": "daily", "priority": 0.8},
        ]

        try:
            songs = (
                db.query(Song.id, Song.updated_at)
                .order_by(Song.updated_at.desc())
                .limit(SITEMAP_SONG_LIMIT)
                .all()
            )
            entries.extend(
                {"loc": get_share_url("song", song_id), "lastmod": updated_at or now,
                 "changefreq": "weekly", "priority": 0.7}
                for song_id, updated_at in songs
            )
            for share_type, model, limit in (("artist", Artist, SITEMAP_ARTIST_LIMIT), ("album", Album, SITEMAP_ALBUM_LIMIT)):
                entries.extend(
                    {"loc": get_share_url(share_type, item_id), "lastmod": now,
                     "changefreq": "monthly", "priority": 0.6}
                    for (item_id,) in db.query(model.id).order_by(model.id).limit(limit)
                )
        except SQLAlchemyError as e:
            logger.error(f"Sitemap generation error: {e}")
            # Crawlers still get the site root
            return entries[:1]
        return entries

    def render_sitemap(self, db: Session) -> str:
        """sitemaps.org urlset XML"""
        urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NS)
        for entry in self.get_sitemap_entries(db):
            url = ElementTree.SubElement(urlset, "url")
            ElementTree.SubElement(url, "loc").text = entry["loc"]
            ElementTree.SubElement(url, "lastmod").text = entry["lastmod"].strftime("%Y-%m-%d")
            ElementTree.SubElement(url, "changefreq").text = entry["changefreq"]
            ElementTree.SubElement(url, "priority").text = f"{entry['priority']:.1f}"
        body = ElementTree.tostring(urlset, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'

# Create singleton instance
share_service = ShareService()
