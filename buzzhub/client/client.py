from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ..auth.cookies import AUTH_TOKEN_COOKIE
from ..auth.tokens import AuthTokenManager
from ..core.logging_config import get_logger
from ..core.models.io import AuthResponse, PostCreate, PostRead, TokenRefreshResponse, UserRead
from .errors import BuzzHubApiError


class BuzzHubClient:
    """
    Thin async HTTP client for the BuzzHub API.

    The session lives in the client's cookie jar: ``register`` and ``login``
    store the auth cookies the server sets, ``logout`` drops them, and every
    other call sends them back.

    Responsibilities:
    - register / login / logout / me / refresh
    - is_authenticated / is_token_expired (local cookie inspection)
    - list_posts / get_post / create_post
    - get_youtube_title
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout, follow_redirects=True)
        self._owns_client = client is None
        self._tokens = AuthTokenManager()
        self._logger = get_logger(__name__)

    async def __aenter__(self) -> "BuzzHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}/api{path}"
        try:
            self._logger.debug("BuzzHubClient: %s %s", method, url)
            r = await self._client.request(method, url, **kwargs)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise BuzzHubApiError(
                f"BuzzHub {method} {path} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=self._error_details(e.response),
            ) from e
        except httpx.HTTPError as e:
            raise BuzzHubApiError(f"BuzzHub {method} {path} failed: {e}", details=str(e)) from e
        return r

    @staticmethod
    def _error_details(response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict) and "detail" in body:
            return body["detail"]
        return body

    # ------------------------------------------------------------------ auth

    @property
    def auth_token(self) -> Optional[str]:
        return self._client.cookies.get(AUTH_TOKEN_COOKIE)

    def is_authenticated(self) -> bool:
        return self.auth_token is not None

    def is_token_expired(self) -> bool:
        return self._tokens.is_token_expired(self.auth_token)

    async def register(self, username: str, email: str, password: str, **fields: Any) -> AuthResponse:
        payload = {"username": username, "email": email, "password": password, **fields}
        r = await self._request("POST", "/auth/register", json=payload)
        return AuthResponse.model_validate(r.json())

    async def login(self, email: str, password: str) -> AuthResponse:
        r = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        return AuthResponse.model_validate(r.json())

    async def logout(self) -> None:
        await self._request("POST", "/auth/logout")
        # drop local copies even if the server's expiry headers were not applied
        self._client.cookies.clear()

    async def me(self) -> UserRead:
        r = await self._request("GET", "/auth/me")
        return UserRead.model_validate(r.json())

    async def refresh(self) -> TokenRefreshResponse:
        r = await self._request("POST", "/auth/refresh")
        return TokenRefreshResponse.model_validate(r.json())

    # ----------------------------------------------------------------- posts

    async def list_posts(
        self,
        *,
        category: Optional[str] = None,
        status: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[PostRead]:
        params: Dict[str, Any] = {"limit": limit, "offset": offset}
        if category is not None:
            params["category"] = category
        if status is not None:
            params["status"] = status
        r = await self._request("GET", "/posts", params=params)
        return [PostRead.model_validate(item) for item in r.json()]

    async def get_post(self, post_id: int) -> PostRead:
        r = await self._request("GET", f"/posts/{post_id}")
        return PostRead.model_validate(r.json())

    async def create_post(self, post: PostCreate) -> PostRead:
        r = await self._request("POST", "/posts", json=post.model_dump(mode="json", exclude_none=True))
        return PostRead.model_validate(r.json())

    # --------------------------------------------------------------- youtube

    async def get_youtube_title(self, video_id: str) -> Optional[str]:
        """Resolved title of a video, or ``None`` when the server cannot resolve it."""
        try:
            r = await self._request("GET", f"/youtube/{video_id}/title")
        except BuzzHubApiError as e:
            if e.status_code == 404:
                return None
            raise
        return r.json().get("title")
