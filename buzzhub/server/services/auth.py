"""
Account service: registration and credential checks.

Passwords are stored and compared as given; hashing is outside the scope of
the placeholder token scheme.
"""

from __future__ import annotations

import secrets
from typing import Optional

from buzzhub.core.database.entities import User
from buzzhub.core.errors import AuthenticationError, ConflictError, NotFoundError, PermissionDeniedError
from buzzhub.core.logging_config import get_logger
from buzzhub.core.models.io import UserCreate, UserUpdate
from buzzhub.core.storage import BlogStorage

logger = get_logger(__name__)


class AccountService:
    """Create, authenticate and update user accounts."""

    def __init__(self, storage: BlogStorage) -> None:
        self.storage = storage

    async def _ensure_unique(self, email: Optional[str], username: Optional[str], user_id: Optional[int] = None) -> None:
        if email is not None:
            existing = await self.storage.get_user_by_email(email)
            if existing is not None and existing.id != user_id:
                raise ConflictError("User with this email already exists")
        if username is not None:
            existing = await self.storage.get_user_by_username(username)
            if existing is not None and existing.id != user_id:
                raise ConflictError("Username already taken")

    async def register(self, data: UserCreate) -> User:
        await self._ensure_unique(data.email, data.username)
        fields = data.model_dump()
        fields["role"] = data.role.value
        user = await self.storage.create_user(User(**fields))
        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    async def authenticate(self, email: str, password: str) -> User:
        user = await self.storage.get_user_by_email(email)
        if user is None or not secrets.compare_digest(user.password.encode(), password.encode()):
            logger.info(f"Failed login attempt for {email}")
            raise AuthenticationError("Invalid credentials")
        if not user.is_active:
            raise PermissionDeniedError("Account is inactive")
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self.storage.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        await self.get_user(user_id)
        updates = data.model_dump(exclude_unset=True)
        if updates.get("role") is not None:
            updates["role"] = updates["role"].value
        await self._ensure_unique(updates.get("email"), updates.get("username"), user_id=user_id)
        user = await self.storage.update_user(user_id, updates)
        if user is None:
            raise NotFoundError("User", user_id)
        return user
