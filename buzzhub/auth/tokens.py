"""
Placeholder session tokens.

Tokens look like JWTs (``base64(header).base64(payload).signature``) but the
signature segment is the literal string ``signature``: they are not signed and
anyone can forge one. They carry the user id and role so a session can be
routed, nothing more.
"""

from __future__ import annotations

import base64
import binascii
import json
import time
from typing import Any, Callable, Dict, Mapping, Optional

from ..core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_EXPIRY_DAYS = 7
SECONDS_PER_DAY = 24 * 60 * 60
TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}
SIGNATURE = "signature"


def _encode_segment(data: Mapping[str, Any]) -> str:
    return base64.b64encode(json.dumps(data, separators=(",", ":")).encode("utf-8")).decode("ascii")


def _decode_segment(segment: str) -> Any:
    padded = segment + "=" * (-len(segment) % 4)
    return json.loads(base64.b64decode(padded.encode("ascii"), validate=True).decode("utf-8"))


class AuthTokenManager:
    """Issue and inspect placeholder tokens.

    Args:
        expiry_days: Lifetime of issued auth tokens
        clock: Returns the current UNIX time in seconds; injectable for tests
    """

    def __init__(self, expiry_days: int = DEFAULT_EXPIRY_DAYS, clock: Optional[Callable[[], float]] = None) -> None:
        self.expiry_days = expiry_days
        self._clock = clock or time.time

    def _now(self) -> int:
        return int(self._clock())

    def generate_token(self, user_id: int, role: str, expiry_days: Optional[int] = None) -> str:
        """Issue a token for ``user_id`` valid for ``expiry_days`` (default: the manager's)."""
        issued_at = self._now()
        lifetime = self.expiry_days if expiry_days is None else expiry_days
        payload = {
            "userId": user_id,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + lifetime * SECONDS_PER_DAY,
        }
        return f"{_encode_segment(TOKEN_HEADER)}.{_encode_segment(payload)}.{SIGNATURE}"

    def generate_refresh_token(self, user_id: int, role: str) -> str:
        """Issue a refresh token living twice as long as an auth token."""
        return self.generate_token(user_id, role, expiry_days=self.expiry_days * 2)

    def decode_token(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Return the payload of ``token``, or ``None`` when it is malformed."""
        if not token:
            return None
        parts = token.split(".")
        if len(parts) != 3:
            return None
        try:
            payload = _decode_segment(parts[1])
        except (binascii.Error, UnicodeError, ValueError):
            logger.debug("Rejected malformed token payload")
            return None
        if not isinstance(payload, dict):
            return None
        return payload

    def is_token_expired(self, token: Optional[str]) -> bool:
        """True for missing or malformed tokens and for tokens past ``exp``."""
        payload = self.decode_token(token)
        if payload is None:
            return True
        expires_at = payload.get("exp")
        if not isinstance(expires_at, (int, float)):
            return True
        return expires_at < self._now()

    def user_id_from_token(self, token: Optional[str]) -> Optional[int]:
        """User id of an unexpired token, else ``None``."""
        if self.is_token_expired(token):
            return None
        user_id = self.decode_token(token).get("userId")
        return user_id if isinstance(user_id, int) else None

    def refresh_if_needed(
        self,
        auth_token: Optional[str],
        refresh_token: Optional[str],
        user_data: Optional[Mapping[str, Any]],
    ) -> Optional[str]:
        """Keep a session alive.

        Returns:
            ``auth_token`` when it is still valid; a fresh token when it
            expired but a refresh token and the user data (``id`` and
            ``role``) are available; otherwise ``None``.
        """
        if not self.is_token_expired(auth_token):
            return auth_token
        if not refresh_token or not user_data:
            return None
        user_id = user_data.get("id")
        role = user_data.get("role")
        if not isinstance(user_id, int) or not role:
            return None
        logger.info(f"Refreshing expired auth token for user {user_id}")
        return self.generate_token(user_id, role)
