from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from postboard.core.config import get_settings
from postboard.core.security import TokenService
from postboard.main import app
from postboard.services import posts as post_service

from .helpers import bearer, register


def test_register_create_post_and_list_mine(client):
    response = register(client, "alice", password="pw1", email="a@x.com", full_name="Alice A")
    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "Bearer"
    assert body["username"] == "alice"
    assert body["email"] == "a@x.com"
    assert body["role"] == "USER"
    token = body["token"]

    created = client.post("/api/posts", json={"title": "hello", "content": "world"}, headers=bearer(token))
    assert created.status_code == 200
    post = created.json()
    assert post["title"] == "hello"
    assert post["authorUsername"] == "alice"
    assert {"id", "content", "createdAt", "updatedAt"} <= post.keys()

    mine = client.get("/api/posts/my", headers=bearer(token))
    assert mine.status_code == 200
    assert [p["authorUsername"] for p in mine.json()] == ["alice"]


def test_login_returns_token_for_registered_user(client):
    register(client, "alice", password="pw1")

    response = client.post("/auth/login", json={"username": "alice", "password": "pw1"})

    assert response.status_code == 200
    body = response.json()
    assert body["role"] == "USER"
    assert TokenService().validate(body["token"]).username == "alice"


def test_login_with_bad_credentials_is_generic(client):
    register(client, "alice", password="pw1")

    wrong_password = client.post("/auth/login", json={"username": "alice", "password": "nope"})
    unknown_user = client.post("/auth/login", json={"username": "zed", "password": "pw1"})

    for response in (wrong_password, unknown_user):
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid username or password"


def test_duplicate_registration_conflicts(client):
    register(client, "alice")

    response = register(client, "alice", email="another@example.com")

    assert response.status_code == 409
    assert response.json()["message"] == "Username already exists"


def test_registration_validation_errors(client):
    response = client.post(
        "/auth/register",
        json={"username": "alice", "password": "pw", "email": "not-an-email", "fullName": "Alice"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert "email" in body["message"]
    assert body["path"] == "/auth/register"


def test_registration_requires_full_name(client):
    response = client.post("/auth/register", json={"username": "alice", "password": "pw", "email": "a@x.com"})

    assert response.status_code == 400
    assert "fullName" in response.json()["message"]


def test_protected_routes_require_token(client):
    for method, path in [
        ("get", "/api/data"),
        ("post", "/api/posts"),
        ("get", "/api/posts/my"),
        ("get", "/api/users"),
        ("get", "/api/me"),
    ]:
        response = client.request(method.upper(), path)
        assert response.status_code == 401, path
        assert response.headers["www-authenticate"] == "Bearer"
        body = response.json()
        assert body["status"] == 401
        assert body["message"] == "Not authenticated"
        assert body["path"] == path
        assert "timestamp" in body


def test_invalid_token_is_rejected(client):
    response = client.get("/api/data", headers=bearer("not.a.token"))

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_non_bearer_scheme_is_rejected(client):
    token = register(client, "alice").json()["token"]

    response = client.get("/api/me", headers={"Authorization": f"Basic {token}"})

    assert response.status_code == 401


def test_users_listing_never_exposes_password_hashes(client):
    token = register(client, "alice", full_name="Alice Liddell").json()["token"]
    register(client, "bob")

    response = client.get("/api/users", headers=bearer(token))

    assert response.status_code == 200
    users = response.json()
    assert [u["username"] for u in users] == ["alice", "bob"]
    assert users[0]["fullName"] == "Alice Liddell"
    for user in users:
        assert set(user) == {"id", "username", "email", "fullName", "role", "createdAt"}


def test_me_returns_caller(client):
    token = register(client, "alice").json()["token"]

    response = client.get("/api/me", headers=bearer(token))

    assert response.status_code == 200
    assert response.json()["username"] == "alice"
    assert response.json()["role"] == "USER"


def test_all_posts_listing_spans_users(client):
    alice = register(client, "alice").json()["token"]
    bob = register(client, "bob").json()["token"]
    client.post("/api/posts", json={"title": "first", "content": "a"}, headers=bearer(alice))
    client.post("/api/posts", json={"title": "second", "content": "b"}, headers=bearer(bob))

    everything = client.get("/api/data", headers=bearer(alice)).json()
    mine = client.get("/api/posts/my", headers=bearer(bob)).json()

    assert [p["title"] for p in everything] == ["second", "first"]
    assert [p["title"] for p in mine] == ["second"]


def test_create_post_validates_body(client):
    token = register(client, "alice").json()["token"]

    response = client.post("/api/posts", json={"title": "", "content": "x"}, headers=bearer(token))

    assert response.status_code == 400
    assert "title" in response.json()["message"]


def test_token_for_unknown_user_cannot_create_posts(client):
    token = TokenService().issue("ghost", "USER")

    response = client.post("/api/posts", json={"title": "t", "content": "c"}, headers=bearer(token))

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_unknown_route_uses_error_shape(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["path"] == "/api/nothing-here"


def test_startup_seeds_demo_data_when_enabled(monkeypatch):
    monkeypatch.setenv("POSTBOARD_SEED_DEMO_DATA", "true")
    get_settings.cache_clear()

    with TestClient(app) as client:
        login = client.post("/auth/login", json={"username": "admin", "password": "admin123"})
        assert login.status_code == 200
        assert login.json()["role"] == "ADMIN"

        posts = client.get("/api/data", headers=bearer(login.json()["token"])).json()
        assert len(posts) == 4
        users = client.get("/api/users", headers=bearer(login.json()["token"])).json()
        assert [u["username"] for u in users] == ["admin", "john", "jane"]


def test_registration_length_applies_to_stripped_username(client):
    response = register(client, " ab ", email="ab@example.com")

    assert response.status_code == 400
    assert "username" in response.json()["message"]


def test_login_strips_username_like_registration(client):
    register(client, " alice ", password="pw1", email="alice@example.com")

    response = client.post("/auth/login", json={"username": " alice ", "password": "pw1"})

    assert response.status_code == 200
    assert response.json()["username"] == "alice"


def test_expired_token_is_rejected_by_gate(client):
    register(client, "alice")
    stale = TokenService().issue("alice", "USER", now=datetime.now(timezone.utc) - timedelta(days=2))

    response = client.get("/api/posts/my", headers=bearer(stale))

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_tampered_token_is_rejected_by_gate(client):
    token = register(client, "alice").json()["token"]
    header, payload, signature = token.split(".")
    forged = ("A" if signature[0] != "A" else "B") + signature[1:]

    response = client.get("/api/me", headers=bearer(f"{header}.{payload}.{forged}"))

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_unexpected_failure_returns_generic_500(monkeypatch):
    async def broken(*_):
        raise RuntimeError("database exploded at 10.0.0.5")

    monkeypatch.setattr(post_service, "list_all", broken)

    with TestClient(app, raise_server_exceptions=False) as client:
        token = register(client, "alice").json()["token"]
        response = client.get("/api/data", headers=bearer(token))

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == 500
    assert body["message"] == "Internal server error"
    assert body["path"] == "/api/data"
    assert "exploded" not in response.text


def test_timestamps_carry_utc_offset(client):
    token = register(client, "alice").json()["token"]
    client.post("/api/posts", json={"title": "t", "content": "c"}, headers=bearer(token))

    post = client.get("/api/posts/my", headers=bearer(token)).json()[0]
    me = client.get("/api/me", headers=bearer(token)).json()

    for value in (post["createdAt"], post["updatedAt"], me["createdAt"]):
        assert datetime.fromisoformat(value.replace("Z", "+00:00")).utcoffset() == timedelta(0)
