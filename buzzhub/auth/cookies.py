"""
Auth cookie handling.

Three cookies make up a session: ``auth_token`` and ``user_data`` (the public
user as URL-encoded JSON) for the token lifetime, and ``refresh_token`` for
twice that. All are scoped to ``/`` with ``SameSite=Lax`` and stay readable by
browser scripts.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, unquote

from starlette.responses import Response

from ..core.logging_config import get_logger

logger = get_logger(__name__)

AUTH_TOKEN_COOKIE = "auth_token"
REFRESH_TOKEN_COOKIE = "refresh_token"
USER_DATA_COOKIE = "user_data"
AUTH_COOKIES = (AUTH_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE, USER_DATA_COOKIE)

SECONDS_PER_DAY = 24 * 60 * 60


def encode_user_data(user_data: Mapping[str, Any]) -> str:
    """Serialize the public user for the ``user_data`` cookie."""
    return quote(json.dumps(user_data, default=str, separators=(",", ":")), safe="")


def decode_user_data(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    """Parse a ``user_data`` cookie value; ``None`` when absent or corrupt."""
    if not raw:
        return None
    try:
        data = json.loads(unquote(raw))
    except ValueError:
        logger.warning("Error parsing user data from cookie")
        return None
    return data if isinstance(data, dict) else None


def _set(response: Response, key: str, value: str, days: int, secure: bool) -> None:
    response.set_cookie(
        key=key,
        value=value,
        max_age=days * SECONDS_PER_DAY,
        path="/",
        secure=secure,
        httponly=False,
        samesite="lax",
    )


def set_auth_cookies(
    response: Response,
    token: str,
    refresh_token: str,
    user_data: Mapping[str, Any],
    expiry_days: int = 7,
    secure: bool = False,
) -> None:
    """Attach the three session cookies to ``response``."""
    _set(response, AUTH_TOKEN_COOKIE, token, expiry_days, secure)
    _set(response, REFRESH_TOKEN_COOKIE, refresh_token, expiry_days * 2, secure)
    _set(response, USER_DATA_COOKIE, encode_user_data(user_data), expiry_days, secure)


def set_auth_token_cookie(response: Response, token: str, expiry_days: int = 7, secure: bool = False) -> None:
    """Replace only the ``auth_token`` cookie."""
    _set(response, AUTH_TOKEN_COOKIE, token, expiry_days, secure)


def clear_auth_cookies(response: Response, secure: bool = False) -> None:
    """Expire every session cookie."""
    for key in AUTH_COOKIES:
        response.delete_cookie(key=key, path="/", secure=secure, httponly=False, samesite="lax")
