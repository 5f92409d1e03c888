from streamify.db.models.user import User
from streamify.db.models.artist import Artist
from streamify.db.models.album import Album
from streamify.db.models.song import Song
from streamify.db.models.playlist import Playlist, PlaylistSong
from streamify.db.models.library import FavoriteSong, UserSong, UserDownload
from streamify.db.models.history import RecentlyPlayed, ListeningHistory

__all__ = [
    "User",
    "Artist",
    "Album",
    "Song",
    "Playlist",
    "PlaylistSong",
    "FavoriteSong",
    "UserSong",
    "UserDownload",
    "RecentlyPlayed",
    "ListeningHistory",
]
