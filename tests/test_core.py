import pytest
from sqlalchemy.exc import IntegrityError

from streamify.config import settings
from streamify.core import storage
from streamify.core.cache import RedisCache
from streamify.core.constants import get_all_artists, get_all_genres
from streamify.core.errors import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    is_foreign_key_violation,
    is_unique_violation,
    translate_integrity_error,
)


class FakePgError(Exception):
    def __init__(self, pgcode):
        super().__init__(f"pg error {pgcode}")
        self.pgcode = pgcode


def integrity_error(orig):
    return IntegrityError("INSERT ...", {}, orig)


# errors

def test_translate_sqlite_unique_violation():
    exc = integrity_error(Exception("UNIQUE constraint failed: artists.name"))
    assert is_unique_violation(exc)
    error = translate_integrity_error(exc, duplicate="Artist name already exists")
    assert isinstance(error, ConflictError)
    assert error.status_code == 409
    assert error.message == "Artist name already exists"


def test_translate_postgres_foreign_key_violation():
    exc = integrity_error(FakePgError("23503"))
    assert is_foreign_key_violation(exc)
    error = translate_integrity_error(exc, missing="Song not found")
    assert isinstance(error, NotFoundError)
    assert error.status_code == 404


def test_translate_referenced_row():
    exc = integrity_error(FakePgError("23503"))
    error = translate_integrity_error(exc, referenced="Still in use")
    assert isinstance(error, ConflictError)


def test_translate_unknown_code_reraises():
    exc = integrity_error(FakePgError("23502"))
    with pytest.raises(IntegrityError):
        translate_integrity_error(exc, duplicate="dup", missing="missing")


# storage

def test_safe_filename():
    assert storage.safe_filename("my song (live)!.mp3") == "my_song__live__.mp3"


def test_image_validation():
    assert storage.is_valid_image("a.png", "image/png")
    assert not storage.is_valid_image("a.png", "text/plain")
    assert storage.is_valid_image("a.png", None)
    # profile pictures only need a known extension
    assert storage.is_valid_image("a.png", "text/plain", strict_mime=False)
    assert not storage.is_valid_image("a.exe", "application/octet-stream", strict_mime=False)


def test_audio_validation():
    assert storage.is_valid_audio("track.bin", "audio/mpeg")
    assert storage.is_valid_audio("track.flac", "")
    assert not storage.is_valid_audio("track.txt", "text/plain")


def test_validate_upload_messages():
    with pytest.raises(BadRequestError, match="File is empty"):
        storage.validate_upload("image", "a.png", "image/png", 0)
    with pytest.raises(BadRequestError, match=r"File size too large \(10\.50MB\)\. Max size: 10MB"):
        storage.validate_upload("image", "a.png", "image/png", int(10.5 * storage.MB))
    with pytest.raises(BadRequestError, match="Invalid audio type"):
        storage.validate_upload("audio", "a.txt", "text/plain", 10)


def test_save_and_remove_upload(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path))

    stored = storage.save_upload("audio", "My Track.mp3", "audio/mpeg", b"ID3", prefix="7")
    assert stored["url"] == f"/songs/files/{stored['filename']}"
    assert stored["filename"].startswith("7_")
    assert stored["filename"].endswith("_My_Track.mp3")
    assert (tmp_path / "songs" / "files" / stored["filename"]).read_bytes() == b"ID3"

    storage.remove_upload(stored["path"])
    assert not (tmp_path / "songs" / "files" / stored["filename"]).exists()


def test_save_upload_unknown_kind():
    with pytest.raises(BadRequestError, match="Type must be 'image' or 'audio'"):
        storage.save_upload("video", "clip.mp4", "video/mp4", b"data")


# cache

def test_disabled_cache_is_a_no_op():
    cache = RedisCache(enabled=False)
    assert not cache.enabled
    assert cache.set_cache("catalog:x", {"a": 1}) is False
    assert cache.get_cache("catalog:x") is None
    assert cache.delete_prefix("catalog:") == 0


# constants

def test_genres_and_artist_suggestions():
    assert "Pop" in get_all_genres()
    artists = get_all_artists()
    assert artists == sorted(set(artists))
    assert len(artists) > 0
