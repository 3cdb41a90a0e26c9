from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from farmhub.models.user import User, UserRole
from farmhub.services.security import TokenService, verify_password

from conftest import ADMIN_EMAIL, PASSWORD

ADMIN_ROUTES = [
    ("get", "/api/members"),
    ("get", "/api/members/some-id"),
    ("post", "/api/members"),
    ("post", "/api/news"),
    ("put", "/api/news/some-id"),
    ("delete", "/api/news/some-id"),
]


def test_register_then_login_succeeds(client, session_factory):
    resp = client.post("/api/register", json={"email": "new@farmhub.org", "password": "pw-123456"})

    assert resp.status_code == 201, resp.json()
    body = resp.json()
    assert body["email"] == "new@farmhub.org"
    assert body["role"] == "user"
    assert "password" not in body and "hashedPassword" not in body

    resp = client.post("/api/login", json={"email": "new@farmhub.org", "password": "pw-123456"})
    assert resp.status_code == 200, resp.json()
    assert resp.json()["token"]
    assert resp.json()["tokenType"] == "bearer"


def test_register_stores_hashed_password(client, session_factory):
    client.post("/api/register", json={"email": "hash@farmhub.org", "password": "plain-text"})

    with session_factory() as db:
        user = db.query(User).filter(User.email == "hash@farmhub.org").one()
    assert user.hashed_password != "plain-text"
    assert verify_password("plain-text", user.hashed_password)
    assert user.role == UserRole.USER


def test_register_rejects_duplicate_email(client):
    payload = {"email": "dup@farmhub.org", "password": "pw-123456"}
    assert client.post("/api/register", json=payload).status_code == 201

    resp = client.post("/api/register", json=payload)

    assert resp.status_code == 400
    assert resp.json() == {"message": "Email already used"}


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "x@farmhub.org"},
        {"password": "pw"},
        {"email": "  ", "password": "pw"},
        {},
    ],
)
def test_register_requires_email_and_password(client, payload):
    resp = client.post("/api/register", json=payload)

    assert resp.status_code == 400
    assert resp.json()["message"] == "Email and password required"


def test_register_rejects_malformed_email(client):
    resp = client.post("/api/register", json={"email": "not-an-email", "password": "pw"})

    assert resp.status_code == 400
    assert "message" in resp.json()


def test_register_keeps_email_as_typed_so_login_matches(client):
    creds = {"email": "Ada@Farm.ORG", "password": "pw-123456"}

    resp = client.post("/api/register", json=creds)

    assert resp.status_code == 201, resp.json()
    assert resp.json()["email"] == "Ada@Farm.ORG"
    resp = client.post("/api/login", json=creds)
    assert resp.status_code == 200, resp.json()


@pytest.mark.parametrize("password", ["  pw-123456  ", "   "])
def test_password_whitespace_is_part_of_the_credential(client, session_factory, password):
    creds = {"email": "pad@farmhub.org", "password": password}

    assert client.post("/api/register", json=creds).status_code == 201

    with session_factory() as db:
        user = db.query(User).filter(User.email == "pad@farmhub.org").one()
    assert verify_password(password, user.hashed_password)
    assert client.post("/api/login", json=creds).status_code == 200
    stripped = {"email": "pad@farmhub.org", "password": password.strip() or "x"}
    assert client.post("/api/login", json=stripped).status_code == 401


def test_login_wrong_password_returns_401_without_token(client, admin_headers):
    resp = client.post("/api/login", json={"email": ADMIN_EMAIL, "password": "wrong"})

    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid email or password"}


def test_login_unknown_email_returns_401(client):
    resp = client.post("/api/login", json={"email": "ghost@farmhub.org", "password": PASSWORD})

    assert resp.status_code == 401
    assert "token" not in resp.json()


def test_login_missing_fields_returns_400(client):
    resp = client.post("/api/login", json={"email": ADMIN_EMAIL})

    assert resp.status_code == 400


def test_current_user_returns_email_and_role(client, user_headers):
    resp = client.get("/api/user", headers=user_headers)

    assert resp.status_code == 200, resp.json()
    body = resp.json()
    assert body["email"] == "farmer@farmhub.org"
    assert body["role"] == "user"


def test_current_user_without_token_asks_to_login(client):
    resp = client.get("/api/user")

    assert resp.status_code == 401
    assert resp.json() == {"message": "Please login"}


def test_current_user_with_garbage_token_is_forbidden(client):
    resp = client.get("/api/user", headers={"Authorization": "Bearer not.a.jwt"})

    assert resp.status_code == 403
    assert resp.json() == {"message": "Invalid session"}


def test_token_signed_with_other_secret_is_rejected(client, user_headers, session_factory):
    with session_factory() as db:
        user = db.query(User).filter(User.role == UserRole.USER).one()
    forged = TokenService("someone-elses-secret").issue(user.id, "admin")

    resp = client.get("/api/members", headers={"Authorization": f"Bearer {forged}"})

    assert resp.status_code == 403
    assert resp.json() == {"message": "Invalid session"}


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
def test_user_role_is_forbidden_on_admin_routes(client, user_headers, method, path):
    resp = getattr(client, method)(path, headers=user_headers)

    assert resp.status_code == 403
    assert resp.json() == {"message": "Admin access required"}


@pytest.mark.parametrize("method,path", ADMIN_ROUTES + [("get", "/api/user")])
def test_expired_token_is_rejected_on_protected_routes(client, settings, admin_headers, session_factory, method, path):
    with session_factory() as db:
        admin = db.query(User).filter(User.email == ADMIN_EMAIL).one()
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    stale = TokenService(settings.SECRET_KEY, minutes=60, clock=lambda: two_hours_ago).issue(admin.id, admin.role)

    resp = getattr(client, method)(path, headers={"Authorization": f"Bearer {stale}"})

    assert resp.status_code == 403
    assert resp.json() == {"message": "Invalid session"}


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
def test_admin_routes_require_a_token(client, method, path):
    resp = getattr(client, method)(path)

    assert resp.status_code == 401
