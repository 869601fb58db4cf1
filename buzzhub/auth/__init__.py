"""
Authentication helpers: placeholder tokens, session cookies and role checks.
"""

from .cookies import (
    AUTH_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    USER_DATA_COOKIE,
    clear_auth_cookies,
    decode_user_data,
    encode_user_data,
    set_auth_cookies,
    set_auth_token_cookie,
)
from .tokens import AuthTokenManager

__all__ = [
    "AUTH_TOKEN_COOKIE",
    "REFRESH_TOKEN_COOKIE",
    "USER_DATA_COOKIE",
    "AuthTokenManager",
    "clear_auth_cookies",
    "decode_user_data",
    "encode_user_data",
    "set_auth_cookies",
    "set_auth_token_cookie",
]
