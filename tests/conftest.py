import os

os.environ["CACHE_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_EMAIL"] = "owner@example.com"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from streamify.config import settings
from streamify.db import models
from streamify.db.base import Base
from streamify.db.session import enable_sqlite_foreign_keys, get_db
from streamify.main import app
from streamify.services.user_service import user_service

SQLALCHEMY_DB = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DB,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,  # in-memory tests
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(name="db_session")
def fixture_db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="client")
def fixture_client(db_session, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path))

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


# helpers

def signup(client, email, password="password123", name="Listener"):
    return client.post("/api/v1/user/signup", json={"name": name, "email": email, "password": password})


def login(client, email, password="password123"):
    return client.post("/api/v1/user/login", data={"username": email, "password": password})


def get_auth(token):
    return {"Authorization": f"Bearer {token}"}


def create_user_get_token(client, email, password="password123"):
    signup(client, email, password)
    response = login(client, email, password)
    return response.json()["data"]["access_token"]


def add_song(db, title, artist_name="Artist", album_title=None, genre=None, play_count=0,
             duration=180, release_year=2020):
    """Insert a song (and its artist/album when new) straight through the ORM"""
    artist = db.query(models.Artist).filter(models.Artist.name == artist_name).first()
    if artist is None:
        artist = models.Artist(name=artist_name)
        db.add(artist)
        db.flush()

    album = None
    if album_title:
        album = db.query(models.Album).filter(
            models.Album.title == album_title, models.Album.artist_id == artist.id
        ).first()
        if album is None:
            album = models.Album(title=album_title, artist_id=artist.id, release_year=release_year)
            db.add(album)
            db.flush()

    song = models.Song(
        title=title,
        duration=duration,
        song_url=f"/songs/files/{title}.mp3",
        image_url=f"/songs/images/{title}.jpg",
        genre=genre,
        play_count=play_count,
        artist_id=artist.id,
        album_id=album.id if album else None,
    )
    db.add(song)
    db.commit()
    db.refresh(song)
    return song


@pytest.fixture
def user_token(client):
    return create_user_get_token(client, "listener@example.com")


@pytest.fixture
def user_headers(user_token):
    return get_auth(user_token)


@pytest.fixture
def admin_headers(client, db_session):
    user_service.reset_admin_password(db_session, "admin@example.com", "adminpass123")
    response = login(client, "admin@example.com", "adminpass123")
    return get_auth(response.json()["data"]["access_token"])
