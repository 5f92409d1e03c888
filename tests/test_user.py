from conftest import create_user_get_token, get_auth, login, signup


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_signup(client):
    response = signup(client, "Nessa@Example.com", name="Nessa")
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["email"] == "nessa@example.com"
    assert body["data"]["name"] == "Nessa"
    assert body["data"]["is_admin"] is False
    assert "hashed_password" not in body["data"]


def test_signup_missing_fields(client):
    response = client.post("/api/v1/user/signup", json={"email": "a@example.com", "password": "password123"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "All fields are required"}


def test_signup_blank_fields(client):
    for payload in (
        {"name": "Blank", "email": "", "password": "password123"},
        {"name": "   ", "email": "blank@example.com", "password": "password123"},
    ):
        response = client.post("/api/v1/user/signup", json=payload)
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "All fields are required"}


def test_signup_short_password(client):
    response = signup(client, "short@example.com", password="1234567")
    assert response.status_code == 400
    assert response.json()["error"] == "Password must be at least 8 characters"


def test_signup_duplicate_email(client):
    signup(client, "dup@example.com")
    response = signup(client, "DUP@example.com")
    assert response.status_code == 409
    assert response.json()["error"] == "User with this email already exists"


def test_signup_admin_email_is_admin(client):
    response = signup(client, "owner@example.com")
    assert response.json()["data"]["is_admin"] is True


def test_login(client):
    signup(client, "login@example.com")
    response = login(client, "login@example.com")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["user"]["email"] == "login@example.com"


def test_login_wrong_password(client):
    signup(client, "wrong@example.com")
    response = login(client, "wrong@example.com", "not-the-password")
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid email or password"}


def test_me_requires_auth(client):
    response = client.get("/api/v1/user/me")
    assert response.status_code == 401
    assert response.json()["error"] == "Not authenticated"


def test_me_with_garbage_token(client):
    response = client.get("/api/v1/user/me", headers=get_auth("not-a-jwt"))
    assert response.status_code == 401


def test_me(client, user_headers):
    response = client.get("/api/v1/user/me", headers=user_headers)
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "listener@example.com"


def test_update_profile(client, user_headers):
    response = client.put("/api/v1/user/me", json={"name": "  New Name "}, headers=user_headers)
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "New Name"


def test_change_password(client, user_headers):
    response = client.post(
        "/api/v1/user/me/password",
        json={"current_password": "wrong-password", "new_password": "newpassword1"},
        headers=user_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Current password is incorrect"

    response = client.post(
        "/api/v1/user/me/password",
        json={"current_password": "password123", "new_password": "newpassword1"},
        headers=user_headers,
    )
    assert response.status_code == 200
    assert login(client, "listener@example.com", "newpassword1").status_code == 200
    assert login(client, "listener@example.com", "password123").status_code == 401


def test_privacy_settings(client, user_headers):
    response = client.get("/api/v1/user/me/privacy", headers=user_headers)
    assert response.json()["data"] == {
        "profile_public": True,
        "stats_public": True,
        "playlists_public": True,
        "favorites_public": True,
    }

    response = client.put("/api/v1/user/me/privacy", json={"stats_public": False}, headers=user_headers)
    assert response.status_code == 200
    assert response.json()["data"]["stats_public"] is False
    assert response.json()["data"]["profile_public"] is True


def test_upload_avatar(client, user_headers, tmp_path):
    response = client.post(
        "/api/v1/user/me/avatar",
        files={"file": ("me.png", b"\x89PNG fake image", "image/png")},
        headers=user_headers,
    )
    assert response.status_code == 200
    url = response.json()["data"]["url"]
    assert url.startswith("/users/")
    assert (tmp_path / url.lstrip("/")).exists()

    me = client.get("/api/v1/user/me", headers=user_headers).json()["data"]
    assert me["image"] == url


def test_upload_avatar_too_large(client, user_headers):
    content = b"x" * (5 * 1024 * 1024 + 1)
    response = client.post(
        "/api/v1/user/me/avatar",
        files={"file": ("big.png", content, "image/png")},
        headers=user_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "File size too large. Max size: 5MB"


def test_delete_account(client):
    token = create_user_get_token(client, "leaving@example.com")
    headers = get_auth(token)
    client.post("/api/v1/playlist/create", json={"name": "Mine"}, headers=headers)

    response = client.request("DELETE", "/api/v1/user/me", json={"password": "wrong-password"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Incorrect password"

    response = client.request("DELETE", "/api/v1/user/me", json={"password": "password123"}, headers=headers)
    assert response.status_code == 200
    assert login(client, "leaving@example.com").status_code == 401
    assert client.get("/api/v1/user/me", headers=headers).status_code == 401
