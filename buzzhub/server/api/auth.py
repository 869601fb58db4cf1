"""
Authentication endpoints.

Sessions are carried by three cookies (``auth_token``, ``refresh_token`` and
``user_data``) holding placeholder tokens; see :mod:`buzzhub.auth.tokens`.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status

from buzzhub.auth import permissions
from buzzhub.auth.cookies import clear_auth_cookies, decode_user_data, set_auth_cookies, set_auth_token_cookie
from buzzhub.core.database.entities import User
from buzzhub.core.logging_config import get_logger
from buzzhub.core.models.io import (
    AuthResponse,
    LoginRequest,
    PermissionsRead,
    TokenRefreshResponse,
    UserCreate,
    UserRead,
)
from buzzhub.server.core.config import settings
from buzzhub.server.services.deps import AccountServiceDep, StorageDep, TokenManagerDep

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _start_session(response: Response, user: User, token_manager) -> str:
    token = token_manager.generate_token(user.id, user.role)
    refresh_token = token_manager.generate_refresh_token(user.id, user.role)
    set_auth_cookies(
        response,
        token=token,
        refresh_token=refresh_token,
        user_data=UserRead.model_validate(user).model_dump(mode="json"),
        expiry_days=token_manager.expiry_days,
        secure=settings.auth.cookie_secure,
    )
    return token


async def get_current_user(
    storage: StorageDep,
    token_manager: TokenManagerDep,
    auth_token: Annotated[Optional[str], Cookie()] = None,
) -> User:
    """Resolve the user of the ``auth_token`` cookie or answer 401."""
    user_id = token_manager.user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    user = await storage.get_user(user_id)
    if user is None or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create an account and start a session for it.",
    responses={
        201: {"description": "Account created and session cookies set"},
        409: {"description": "E-mail or username already in use"},
    },
)
async def register(
    data: UserCreate,
    response: Response,
    accounts: AccountServiceDep,
    token_manager: TokenManagerDep,
) -> AuthResponse:
    """
    Register a new user.

    On success the new user is logged in immediately: the session cookies are
    set on the response exactly as for ``/auth/login``.
    """
    user = await accounts.register(data)
    token = _start_session(response, user, token_manager)
    return AuthResponse(user=UserRead.model_validate(user), token=token)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log In",
    description="Check e-mail and password and start a session.",
    responses={
        200: {"description": "Session cookies set"},
        401: {"description": "Invalid credentials"},
        403: {"description": "Account is inactive"},
    },
)
async def login(
    credentials: LoginRequest,
    response: Response,
    accounts: AccountServiceDep,
    token_manager: TokenManagerDep,
) -> AuthResponse:
    user = await accounts.authenticate(credentials.email, credentials.password)
    token = _start_session(response, user, token_manager)
    logger.info(f"User {user.id} logged in")
    return AuthResponse(user=UserRead.model_validate(user), token=token)


@router.post("/logout", summary="Log Out", description="Clear the session cookies.")
async def logout(response: Response):
    clear_auth_cookies(response, secure=settings.auth.cookie_secure)
    return {"success": True}


@router.get(
    "/me",
    response_model=UserRead,
    summary="Current User",
    description="Return the user of the current session.",
    responses={401: {"description": "Missing, malformed or expired auth token"}},
)
async def me(user: CurrentUserDep) -> UserRead:
    return UserRead.model_validate(user)


@router.post(
    "/refresh",
    response_model=TokenRefreshResponse,
    summary="Refresh Session",
    description="Re-issue the auth token when it expired and a refresh token is present.",
    responses={401: {"description": "Session cannot be refreshed"}},
)
async def refresh(
    response: Response,
    token_manager: TokenManagerDep,
    auth_token: Annotated[Optional[str], Cookie()] = None,
    refresh_token: Annotated[Optional[str], Cookie()] = None,
    user_data: Annotated[Optional[str], Cookie()] = None,
) -> TokenRefreshResponse:
    """
    Refresh the auth token.

    - A still-valid auth token is returned unchanged (``refreshed: false``).
    - An expired one is replaced when both the refresh token and the user data
      cookie are present (``refreshed: true``; the cookie is updated).
    - Otherwise the session is over and 401 is returned.
    """
    token = token_manager.refresh_if_needed(auth_token, refresh_token, decode_user_data(user_data))
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Session expired")
    refreshed = token != auth_token
    if refreshed:
        set_auth_token_cookie(
            response, token, expiry_days=token_manager.expiry_days, secure=settings.auth.cookie_secure
        )
    return TokenRefreshResponse(refreshed=refreshed, token=token)


@router.get(
    "/permissions",
    response_model=PermissionsRead,
    summary="Current Permissions",
    description="Capabilities derived from the role of the current user.",
)
async def get_permissions(user: CurrentUserDep) -> PermissionsRead:
    role = user.role
    return PermissionsRead(
        role=role,
        is_admin=permissions.is_admin(role),
        can_edit=permissions.can_edit(role),
        can_delete=permissions.can_delete(role),
        can_manage_users=permissions.can_manage_users(role),
        can_view_analytics=permissions.can_view_analytics(role),
        can_access_admin_panel=permissions.can_access_admin_panel(role),
    )
