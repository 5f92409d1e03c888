import pytest

from conftest import add_song
from streamify.db import models


@pytest.mark.parametrize("path, duplicate", [
    ("favorites", "Song already in favorites"),
    ("songs", "Song already added"),
    ("downloads", "Song already downloaded"),
])
def test_collection_add_list_remove(client, db_session, user_headers, path, duplicate):
    first = add_song(db_session, "First")
    second = add_song(db_session, "Second")
    url = f"/api/v1/library/{path}"

    for song in (first, second):
        response = client.post(url, json={"song_id": song.id}, headers=user_headers)
        assert response.status_code == 201
        assert response.json()["data"]["id"] == song.id

    response = client.post(url, json={"song_id": first.id}, headers=user_headers)
    assert response.status_code == 409
    assert response.json() == {"success": False, "error": duplicate}

    titles = [s["title"] for s in client.get(url, headers=user_headers).json()["data"]]
    assert titles == ["Second", "First"]

    assert client.delete(f"{url}/{first.id}", headers=user_headers).status_code == 200
    titles = [s["title"] for s in client.get(url, headers=user_headers).json()["data"]]
    assert titles == ["Second"]


def test_favorites_require_auth(client):
    assert client.get("/api/v1/library/favorites").status_code == 401


def test_favorite_unknown_song(client, user_headers):
    response = client.post("/api/v1/library/favorites", json={"song_id": 12345}, headers=user_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Song not found"


def test_anonymous_play_only_counts(client, db_session):
    song = add_song(db_session, "Public", play_count=7)

    response = client.post(f"/api/v1/music/play/{song.id}")
    assert response.status_code == 200
    assert response.json()["data"] == {"song_id": song.id, "play_count": 8, "saved": False}
    assert db_session.query(models.ListeningHistory).count() == 0
    assert db_session.query(models.RecentlyPlayed).count() == 0


def test_play_unknown_song(client):
    response = client.post("/api/v1/music/play/999")
    assert response.status_code == 404
    assert response.json()["error"] == "Song not found"


def test_logged_in_play_records_history(client, db_session, user_headers):
    song = add_song(db_session, "Tracked", duration=200)

    response = client.post(f"/api/v1/music/play/{song.id}", headers=user_headers)
    assert response.json()["data"]["saved"] is True
    client.post(f"/api/v1/music/play/{song.id}", json={"duration": 30}, headers=user_headers)

    recent = client.get("/api/v1/music/recently-played", headers=user_headers).json()["data"]
    assert [s["title"] for s in recent] == ["Tracked"]

    history = client.get("/api/v1/library/history", headers=user_headers).json()["data"]
    assert history["total"] == 2
    assert [entry["duration"] for entry in history["items"]] == [30, 200]
    assert db_session.get(models.Song, song.id).play_count == 2


def test_recently_played_is_capped(client, db_session, user_headers):
    songs = [add_song(db_session, f"Song {i}") for i in range(52)]
    for song in songs:
        client.post(f"/api/v1/music/play/{song.id}", headers=user_headers)

    assert db_session.query(models.RecentlyPlayed).count() == 50
    recent = client.get("/api/v1/music/recently-played", params={"limit": 50}, headers=user_headers).json()["data"]
    assert len(recent) == 50
    assert recent[0]["title"] == "Song 51"
    assert "Song 0" not in {s["title"] for s in recent}
    assert "Song 1" not in {s["title"] for s in recent}


def test_replaying_moves_song_to_front(client, db_session, user_headers):
    first = add_song(db_session, "First")
    second = add_song(db_session, "Second")
    for song in (first, second, first):
        client.post(f"/api/v1/music/play/{song.id}", headers=user_headers)

    recent = client.get("/api/v1/music/recently-played", headers=user_headers).json()["data"]
    assert [s["title"] for s in recent] == ["First", "Second"]


def test_add_history_entry(client, db_session, user_headers):
    song = add_song(db_session, "Manual")

    response = client.post("/api/v1/library/history", json={"song_id": song.id, "duration": 42}, headers=user_headers)
    assert response.status_code == 201
    assert response.json()["data"]["duration"] == 42

    page = client.get("/api/v1/library/history", params={"limit": 1, "offset": 1}, headers=user_headers).json()["data"]
    assert page == {"items": [], "total": 1}
