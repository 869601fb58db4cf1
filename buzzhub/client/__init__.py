"""
HTTP client for the BuzzHub API.
"""

from .client import BuzzHubClient
from .errors import BuzzHubApiError

__all__ = ["BuzzHubApiError", "BuzzHubClient"]
