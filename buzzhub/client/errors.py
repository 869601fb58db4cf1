"""Error types raised by :class:`~buzzhub.client.client.BuzzHubClient`.

Catch ``BuzzHubApiError`` and inspect ``status_code`` or ``details`` (the
decoded ``detail`` field of the error body when present, else the raw text).
"""

from __future__ import annotations

from typing import Any, Optional


class BuzzHubApiError(Exception):
    """Base error for BuzzHub API failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional structured payload from the server.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details
