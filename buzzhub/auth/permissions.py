"""Role-based permission checks."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from ..core.models.enums import UserRole

RoleLike = Union[UserRole, str, None]

ADMIN_ROLES = frozenset({UserRole.admin, UserRole.super_admin})
EDIT_ROLES = ADMIN_ROLES | {UserRole.editor, UserRole.author}
ANALYTICS_ROLES = ADMIN_ROLES | {UserRole.editor}
ADMIN_PANEL_ROLES = EDIT_ROLES


def _as_role(role: RoleLike) -> Optional[UserRole]:
    if role is None:
        return None
    try:
        return UserRole(role)
    except ValueError:
        return None


def has_role(role: RoleLike, required: RoleLike) -> bool:
    current = _as_role(role)
    return current is not None and current == _as_role(required)


def has_any_role(role: RoleLike, roles: Iterable[RoleLike]) -> bool:
    current = _as_role(role)
    return current is not None and current in {_as_role(candidate) for candidate in roles}


def is_admin(role: RoleLike) -> bool:
    return has_any_role(role, ADMIN_ROLES)


def can_edit(role: RoleLike) -> bool:
    return has_any_role(role, EDIT_ROLES)


def can_delete(role: RoleLike) -> bool:
    return has_any_role(role, ADMIN_ROLES)


def can_manage_users(role: RoleLike) -> bool:
    return has_any_role(role, ADMIN_ROLES)


def can_view_analytics(role: RoleLike) -> bool:
    return has_any_role(role, ANALYTICS_ROLES)


def can_access_admin_panel(role: RoleLike) -> bool:
    return has_any_role(role, ADMIN_PANEL_ROLES)
