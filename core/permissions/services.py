"""
Role gate.

Answers "may this role / user do that?" from the static table in
core_config. Consumed by the view decorators and by services that need to
double-check the caller.
"""
from typing import Iterable, Tuple

from core.permissions.core_config import ROLE_PERMISSIONS, Roles


def get_role_permissions(role) -> frozenset:
    """Return the permission set of a role (empty for unknown roles)."""
    return ROLE_PERMISSIONS.get(role, frozenset())


def has_permission(role, permission: str) -> bool:
    return permission in get_role_permissions(role)


def has_any_permission(role, permissions: Iterable[str]) -> bool:
    granted = get_role_permissions(role)
    return any(permission in granted for permission in permissions)


def has_all_permissions(role, permissions: Iterable[str]) -> bool:
    granted = get_role_permissions(role)
    return all(permission in granted for permission in permissions)


def is_admin_role(role) -> bool:
    return role == Roles.ADMIN


def user_can(user, permission: str) -> Tuple[bool, str]:
    """
    Check if a user holds a permission.

    Args:
        user: The User instance (or AnonymousUser)
        permission: The permission identifier (e.g., 'manage_events')

    Returns:
        Tuple of (allowed: bool, reason: str)
        - (True, "Permission granted") if the user's role grants it
        - (False, "reason for denial") otherwise

    Permission Logic (priority order):
    1. Anonymous users are denied
    2. Inactive accounts are denied
    3. Role table lookup
    """
    if user is None or not getattr(user, 'is_authenticated', False):
        return False, "Authentication required"

    if not user.is_active:
        return False, "Account disabled"

    if has_permission(user.role, permission):
        return True, "Permission granted"

    return False, f"Role '{user.role}' does not grant '{permission}'"
