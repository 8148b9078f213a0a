"""Admin 가입/로그인과 토큰 검증 동작을 검증합니다."""

import base64
import json
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from portfolio.config import settings
from portfolio.services.token_service import TokenError, create_access_token, decode_token
from tests.conftest import auth_headers, get_token


def _tamper_payload(token: str, **changes) -> str:
    header, payload, signature = token.split(".")
    padded = payload + "=" * (-len(payload) % 4)
    claims = json.loads(base64.urlsafe_b64decode(padded))
    claims.update(changes)
    forged = base64.urlsafe_b64encode(json.dumps(claims).encode()).rstrip(b"=").decode()
    return ".".join([header, forged, signature])


def test_signup_then_login_with_username(client):
    resp = client.post("/signup", json={"username": "admin", "email": "admin@example.com", "password": "pw-1234"})
    assert resp.status_code == 201
    assert resp.json()["message"] == "Signed up successfully"

    resp = client.post("/login", json={"login": "admin", "password": "pw-1234"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Logged in successfully"
    claims = decode_token(data["token"])
    assert claims["username"] == "admin"
    assert claims["email"] == "admin@example.com"


def test_login_with_email_identifier(client, seed_admin):
    token = get_token(client, login="shokh@example.com")
    assert decode_token(token)["username"] == "shokh"


def test_login_with_email_ignores_case(client, seed_admin):
    token = get_token(client, login="Shokh@EXAMPLE.com")
    assert decode_token(token)["username"] == "shokh"


def test_login_wrong_password(client, seed_admin):
    resp = client.post("/login", json={"login": "shokh", "password": "nope"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid credentials"


def test_login_unknown_account(client, seed_admin):
    resp = client.post("/login", json={"login": "ghost@example.com", "password": "s3cret!"})
    assert resp.status_code == 400


def test_login_missing_fields(client):
    resp = client.post("/login", json={"login": "shokh"})
    assert resp.status_code == 400


def test_password_is_stored_hashed(client, db):
    client.post("/signup", json={"username": "admin", "email": "admin@example.com", "password": "pw-1234"})
    from portfolio.models.admin import Admin

    admin = db.query(Admin).filter(Admin.username == "admin").first()
    assert admin.password_hash != "pw-1234"


def test_signup_rejects_invalid_email(client):
    resp = client.post("/signup", json={"username": "admin", "email": "not-an-email", "password": "pw"})
    assert resp.status_code == 400


def test_signup_duplicate_username_or_email(client, seed_admin):
    resp = client.post("/signup", json={"username": "shokh", "email": "other@example.com", "password": "pw"})
    assert resp.status_code == 400
    resp = client.post("/signup", json={"username": "other", "email": "shokh@example.com", "password": "pw"})
    assert resp.status_code == 400


def test_signup_hidden_when_flag_off(client, monkeypatch):
    monkeypatch.setattr(settings, "SHOW_SIGNUP", False)
    resp = client.post("/signup", json={"username": "admin", "email": "admin@example.com", "password": "pw"})
    assert resp.status_code == 404


def test_login_without_secret_fails(client, seed_admin, monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", "")
    resp = client.post("/login", json={"login": "shokh", "password": "s3cret!"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Could not generate token"


def test_altered_token_is_rejected():
    token = create_access_token("shokh", "shokh@example.com")
    assert decode_token(token)["username"] == "shokh"
    with pytest.raises(TokenError):
        decode_token(_tamper_payload(token, username="intruder"))


def test_expired_token_is_rejected():
    expired = jwt.encode(
        {"username": "shokh", "email": "shokh@example.com", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.JWT_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(TokenError):
        decode_token(expired)


def test_wrong_algorithm_token_is_rejected():
    other = jwt.encode(
        {"username": "shokh", "email": "shokh@example.com", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.JWT_SECRET,
        algorithm="HS512",
    )
    with pytest.raises(TokenError):
        decode_token(other)


def test_token_without_username_is_rejected():
    token = jwt.encode(
        {"email": "shokh@example.com", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.JWT_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(TokenError):
        decode_token(token)


def test_malformed_token_is_rejected():
    with pytest.raises(TokenError):
        decode_token("not-a-jwt")


def test_protected_route_requires_token(client):
    resp = client.delete("/delete/1")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "You did not input the token"


def test_protected_route_rejects_altered_token(client, seed_admin):
    token = get_token(client)
    resp = client.delete("/delete/1", headers={"Authorization": _tamper_payload(token, username="x")})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_protected_route_accepts_bearer_prefix(client, seed_admin):
    headers = {"Authorization": f"Bearer {get_token(client)}"}
    resp = client.delete("/delete/999", headers=headers)
    assert resp.status_code == 404


def test_portfolio_hello(client):
    resp = client.get("/portfolio")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Hello world"}


def test_auth_headers_use_raw_token(client, seed_admin):
    headers = auth_headers(client)
    assert not headers["Authorization"].startswith("Bearer")
