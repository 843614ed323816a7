"""Tests for access token helpers."""

from datetime import datetime, timedelta, timezone

from jose import jwt
from starlette.requests import Request

from app.core.config import settings
from app.core.security import (
    extract_token_from_header,
    get_access_token,
    is_token_expired,
    read_token_claims,
)


def make_request(headers=None, cookies=None) -> Request:
    raw_headers = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    if cookies:
        cookie = "; ".join(f"{k}={v}" for k, v in cookies.items())
        raw_headers.append((b"cookie", cookie.encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw_headers})


def test_extract_token_from_header():
    assert extract_token_from_header("Bearer abc") == "abc"
    assert extract_token_from_header("bearer abc") == "abc"
    assert extract_token_from_header("Basic abc") is None
    assert extract_token_from_header("Bearer") is None
    assert extract_token_from_header("") is None


def test_access_token_prefers_header():
    request = make_request(
        headers={"Authorization": "Bearer from-header"},
        cookies={settings.access_token_cookie: "from-cookie"},
    )
    assert get_access_token(request) == "from-header"


def test_access_token_from_cookie():
    request = make_request(cookies={settings.access_token_cookie: "from-cookie"})
    assert get_access_token(request) == "from-cookie"


def test_no_access_token():
    assert get_access_token(make_request()) is None


def test_read_token_claims():
    token = jwt.encode({"sub": "u1"}, "secret", algorithm="HS256")
    assert read_token_claims(token) == {"sub": "u1"}
    assert read_token_claims("garbage") is None


def test_is_token_expired():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    past = int((now - timedelta(seconds=1)).timestamp())
    future = int((now + timedelta(hours=1)).timestamp())

    assert is_token_expired({"exp": past}, now=now) is True
    assert is_token_expired({"exp": future}, now=now) is False
    assert is_token_expired({}, now=now) is False
    assert is_token_expired({"exp": "soon"}, now=now) is True
