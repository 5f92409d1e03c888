from datetime import datetime

from conftest import add_song
from streamify.db import models


def play(client, headers, song, times=1, duration=None):
    body = {"duration": duration} if duration is not None else None
    for _ in range(times):
        client.post(f"/api/v1/music/play/{song.id}", json=body, headers=headers)


def test_statistics_for_new_user(client, user_headers):
    data = client.get("/api/v1/library/statistics", headers=user_headers).json()["data"]
    assert data == {
        "total_songs_played": 0,
        "total_playlists": 0,
        "total_favorites": 0,
        "total_user_songs": 0,
        "total_listening_time": {"seconds": 0, "minutes": 0, "hours": 0},
        "recently_played_count": 0,
    }


def test_statistics(client, db_session, user_headers):
    song = add_song(db_session, "Long", duration=1800)
    play(client, user_headers, song, times=3)
    client.post("/api/v1/library/favorites", json={"song_id": song.id}, headers=user_headers)
    client.post("/api/v1/playlist/create", json={"name": "Mix"}, headers=user_headers)

    data = client.get("/api/v1/library/statistics", headers=user_headers).json()["data"]
    assert data["total_songs_played"] == 3
    assert data["total_playlists"] == 1
    assert data["total_favorites"] == 1
    assert data["recently_played_count"] == 1
    assert data["total_listening_time"] == {"seconds": 5400, "minutes": 90, "hours": 1}


def test_top_artists_and_albums(client, db_session, user_headers):
    often = add_song(db_session, "Often", artist_name="Favorite", album_title="Best Of")
    rarely = add_song(db_session, "Rarely", artist_name="Casual")
    play(client, user_headers, often, times=3)
    play(client, user_headers, rarely)

    artists = client.get("/api/v1/library/top-artists", headers=user_headers).json()["data"]
    assert [(a["name"], a["play_count"]) for a in artists] == [("Favorite", 3), ("Casual", 1)]

    albums = client.get("/api/v1/library/top-albums", headers=user_headers).json()["data"]
    assert [(a["title"], a["play_count"]) for a in albums] == [("Best Of", 3)]
    assert albums[0]["artist"]["name"] == "Favorite"


def test_recommendations_empty_without_history(client, db_session, user_headers):
    add_song(db_session, "Unheard")
    data = client.get("/api/v1/library/recommendations", headers=user_headers).json()["data"]
    assert data == []


def test_recommendations_by_artist_and_genre(client, db_session, user_headers):
    heard = add_song(db_session, "Heard", artist_name="Known", genre="Jazz")
    add_song(db_session, "Same Artist", artist_name="Known", genre="Pop", play_count=5)
    add_song(db_session, "Same Genre", artist_name="Stranger", genre="Jazz", play_count=2)
    add_song(db_session, "Unrelated", artist_name="Nobody", genre="Metal", play_count=99)
    play(client, user_headers, heard)

    data = client.get("/api/v1/library/recommendations", headers=user_headers).json()["data"]
    assert [s["title"] for s in data] == ["Same Artist", "Same Genre", "Heard"]


def test_year_in_review(client, db_session, user_headers):
    favorite = add_song(db_session, "Anthem", artist_name="Headliner", album_title="Tour", duration=120)
    other = add_song(db_session, "B-Side", artist_name="Opener", duration=60)
    play(client, user_headers, favorite, times=2)
    play(client, user_headers, other)

    user = db_session.query(models.User).filter(models.User.email == "listener@example.com").one()
    db_session.add(models.ListeningHistory(
        user_id=user.id, song_id=other.id, duration=600, played_at=datetime(2001, 6, 1)
    ))
    db_session.commit()

    data = client.get("/api/v1/library/year-in-review", headers=user_headers).json()["data"]
    assert data["year"] == datetime.utcnow().year
    assert data["total_plays"] == 3
    assert data["total_time"]["seconds"] == 300
    assert [(s["title"], s["play_count"]) for s in data["top_songs"]] == [("Anthem", 2), ("B-Side", 1)]
    assert [a["name"] for a in data["top_artists"]] == ["Headliner", "Opener"]
    assert [a["title"] for a in data["top_albums"]] == ["Tour"]

    data = client.get("/api/v1/library/year-in-review", params={"year": 2001}, headers=user_headers).json()["data"]
    assert data["total_plays"] == 1
    assert data["total_time"]["minutes"] == 10


def test_year_in_review_last_year(client, user_headers):
    response = client.get("/api/v1/library/year-in-review", params={"year": 9999}, headers=user_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["year"] == 9999
    assert data["total_plays"] == 0
