"""Unit tests for auth cookie handling."""

from __future__ import annotations

from starlette.responses import Response

from buzzhub.auth.cookies import (
    clear_auth_cookies,
    decode_user_data,
    encode_user_data,
    set_auth_cookies,
    set_auth_token_cookie,
)


def _set_cookie_headers(response: Response) -> dict:
    headers = {}
    for name, value in response.raw_headers:
        if name == b"set-cookie":
            cookie = value.decode("latin-1")
            headers[cookie.split("=", 1)[0]] = cookie
    return headers


class TestUserData:
    """user_data cookie encoding."""

    def test_encoding_is_url_safe(self):
        raw = encode_user_data({"id": 1, "username": "a b;c", "badges": ["Top Creator"]})

        assert ";" not in raw and " " not in raw and "," not in raw
        assert decode_user_data(raw) == {"id": 1, "username": "a b;c", "badges": ["Top Creator"]}

    def test_corrupt_or_missing_values(self):
        assert decode_user_data(None) is None
        assert decode_user_data("") is None
        assert decode_user_data("%7Bnot-json") is None
        assert decode_user_data("%5B1%5D") is None


class TestCookieHeaders:
    """Set-Cookie attributes."""

    def test_session_cookies(self):
        response = Response()
        set_auth_cookies(response, token="tok", refresh_token="ref", user_data={"id": 1}, expiry_days=7)

        cookies = _set_cookie_headers(response)

        assert set(cookies) == {"auth_token", "refresh_token", "user_data"}
        assert "Max-Age=604800" in cookies["auth_token"]
        assert "Max-Age=1209600" in cookies["refresh_token"]
        assert "Max-Age=604800" in cookies["user_data"]
        for cookie in cookies.values():
            assert "Path=/" in cookie
            assert "SameSite=lax" in cookie
            assert "HttpOnly" not in cookie
            assert "Secure" not in cookie

    def test_secure_flag(self):
        response = Response()
        set_auth_token_cookie(response, "tok", expiry_days=1, secure=True)

        cookie = _set_cookie_headers(response)["auth_token"]
        assert "Secure" in cookie
        assert "Max-Age=86400" in cookie

    def test_clear_expires_every_cookie(self):
        response = Response()
        clear_auth_cookies(response)

        cookies = _set_cookie_headers(response)
        assert set(cookies) == {"auth_token", "refresh_token", "user_data"}
        assert all("Max-Age=0" in cookie for cookie in cookies.values())
