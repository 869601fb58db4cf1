"""Error types raised by BuzzHub services.

Services raise these; the API layer maps them onto HTTP responses
(``InvalidInputError`` -> 400, ``AuthenticationError`` -> 401,
``PermissionDeniedError`` -> 403, ``NotFoundError`` -> 404, ``ConflictError`` -> 409,
``YouTubeApiError`` -> 502).
"""

from __future__ import annotations

from typing import Any, Optional


class BuzzHubError(Exception):
    """Base error for BuzzHub failures.

    Args:
        message: Human-readable error description.
        details: Optional structured context for diagnosis.
    """

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(BuzzHubError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, key: Any) -> None:
        super().__init__(f"{entity} not found", details={"entity": entity, "key": key})
        self.entity = entity
        self.key = key


class ConflictError(BuzzHubError):
    """Raised when a unique field (email, username, name, key) is already taken."""


class PermissionDeniedError(BuzzHubError):
    """Raised when an operation is disabled or not allowed for the caller."""


class InvalidInputError(BuzzHubError):
    """Raised when a request is well-formed but semantically unusable."""


class YouTubeApiError(BuzzHubError):
    """Raised when the YouTube Data API call fails.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code returned by the API, if any.
        details: Response body or transport error text.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code


class AuthenticationError(BuzzHubError):
    """Raised when credentials or the session token are missing or invalid."""
