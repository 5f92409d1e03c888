from conftest import add_song


def test_songs_most_played_first(client, db_session):
    add_song(db_session, "Quiet", play_count=1)
    add_song(db_session, "Loud", play_count=10)

    response = client.get("/api/v1/music/songs")
    assert response.status_code == 200
    titles = [s["title"] for s in response.json()["data"]]
    assert titles == ["Loud", "Quiet"]


def test_songs_filtered_by_genre(client, db_session):
    add_song(db_session, "Riff", genre="Rock")
    add_song(db_session, "Beat", genre="Hip-Hop")

    response = client.get("/api/v1/music/songs", params={"genre": "Rock"})
    assert [s["title"] for s in response.json()["data"]] == ["Riff"]


def test_song_detail_includes_artist_and_album(client, db_session):
    song = add_song(db_session, "Track", artist_name="Band", album_title="Record")

    response = client.get(f"/api/v1/music/songs/{song.id}")
    data = response.json()["data"]
    assert data["artist"]["name"] == "Band"
    assert data["album"]["title"] == "Record"


def test_song_not_found(client):
    response = client.get("/api/v1/music/songs/999")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Song not found"}


def test_search_matches_song_artist_and_album(client, db_session):
    add_song(db_session, "Midnight City", artist_name="M83", album_title="Hurry Up")
    add_song(db_session, "Wait", artist_name="M83", album_title="Hurry Up")
    add_song(db_session, "Other", artist_name="Someone Else")

    response = client.get("/api/v1/music/search", params={"query": "m83"})
    data = response.json()["data"]
    assert {s["title"] for s in data["songs"]} == {"Midnight City", "Wait"}
    assert [a["name"] for a in data["artists"]] == ["M83"]
    assert [a["title"] for a in data["albums"]] == ["Hurry Up"]

    response = client.get("/api/v1/music/search", params={"query": "midnight"})
    assert [s["title"] for s in response.json()["data"]["songs"]] == ["Midnight City"]


def test_search_treats_wildcards_literally(client, db_session):
    add_song(db_session, "100% Pure")
    add_song(db_session, "Plain")

    response = client.get("/api/v1/music/search", params={"query": "%"})
    assert [s["title"] for s in response.json()["data"]["songs"]] == ["100% Pure"]


def test_search_empty_query(client, db_session):
    add_song(db_session, "Anything")

    response = client.get("/api/v1/music/search", params={"query": "   "})
    assert response.json()["data"] == {"songs": [], "artists": [], "albums": []}


def test_genres(client):
    genres = client.get("/api/v1/music/genres").json()["data"]
    assert "Rock" in genres
    assert len(genres) == len(set(genres))


def test_top_artists_by_total_plays(client, db_session):
    add_song(db_session, "A1", artist_name="Small", play_count=3)
    add_song(db_session, "B1", artist_name="Big", play_count=5)
    add_song(db_session, "B2", artist_name="Big", play_count=5)

    data = client.get("/api/v1/music/top-artists").json()["data"]
    assert [(a["name"], a["total_plays"]) for a in data] == [("Big", 10), ("Small", 3)]


def test_top_albums_newest_first(client, db_session):
    add_song(db_session, "Old Hit", album_title="Old", release_year=1999, play_count=100)
    add_song(db_session, "New Hit", album_title="New", release_year=2023, play_count=1)

    data = client.get("/api/v1/music/top-albums").json()["data"]
    assert [a["title"] for a in data] == ["New", "Old"]
    assert data[1]["total_plays"] == 100
    assert [s["title"] for s in data[1]["songs"]] == ["Old Hit"]


def test_artist_profile(client, db_session):
    song = add_song(db_session, "One", artist_name="Solo", album_title="First", release_year=2001, play_count=1)
    add_song(db_session, "Two", artist_name="Solo", album_title="Second", release_year=2010, play_count=9)

    data = client.get(f"/api/v1/music/artists/{song.artist_id}").json()["data"]
    assert data["name"] == "Solo"
    assert data["song_count"] == 2
    assert data["album_count"] == 2
    assert [a["title"] for a in data["albums"]] == ["Second", "First"]
    assert [s["title"] for s in data["songs"]] == ["Two", "One"]


def test_artist_not_found(client):
    response = client.get("/api/v1/music/artists/42")
    assert response.status_code == 404
    assert response.json()["error"] == "Artist not found"


def test_album_detail(client, db_session):
    first = add_song(db_session, "Intro", album_title="LP", play_count=2)
    add_song(db_session, "Outro", album_title="LP", play_count=3)

    data = client.get(f"/api/v1/music/albums/{first.album_id}").json()["data"]
    assert data["song_count"] == 2
    assert data["total_plays"] == 5
    assert [s["title"] for s in data["songs"]] == ["Intro", "Outro"]


def test_home_feed(client, db_session):
    add_song(db_session, "Hit", album_title="Album", play_count=4)

    data = client.get("/api/v1/music/home").json()["data"]
    assert [s["title"] for s in data["songs"]] == ["Hit"]
    assert [a["title"] for a in data["top_albums"]] == ["Album"]
    assert [a["name"] for a in data["top_artists"]] == ["Artist"]
