"""Capability predicates over user roles.

Plain functions rather than middleware: handlers call ``require()`` with the
predicate the use case needs.
"""

from __future__ import annotations

from typing import Callable

from storefront.domain.exceptions import PermissionDeniedError
from storefront.domain.model.user import Role

_ADMIN_ROLES = frozenset({Role.ADMIN, Role.SUPERADMIN})
_STAFF_ROLES = _ADMIN_ROLES | {Role.SHOP_MANAGER}


def is_admin(role: Role) -> bool:
    return role in _ADMIN_ROLES


def is_shop_manager(role: Role) -> bool:
    return role == Role.SHOP_MANAGER


def can_manage_products(role: Role) -> bool:
    return role in _STAFF_ROLES


def can_manage_orders(role: Role) -> bool:
    return role in _STAFF_ROLES


def can_edit_product(role: Role, actor_id: str, owner_id: str) -> bool:
    """Admins edit any product; shop managers only their own."""
    if is_admin(role):
        return True
    return is_shop_manager(role) and actor_id == owner_id


def require(allowed: bool, action: str) -> None:
    if not allowed:
        raise PermissionDeniedError(f"Access denied: cannot {action}")


def require_capability(predicate: Callable[[Role], bool], role: Role, action: str) -> None:
    require(predicate(role), action)
