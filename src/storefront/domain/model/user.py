"""User roles.

Accounts and authentication live outside this package; callers hand us the
acting user's id and role and we only decide what that role may do.
"""

from __future__ import annotations

from enum import Enum

from storefront.domain.exceptions import ValidationError


class Role(Enum):
    USER = "user"
    ADMIN = "admin"
    SHOP_MANAGER = "shopmanager"
    SUPERADMIN = "superadmin"

    @staticmethod
    def parse(raw: str) -> Role:
        try:
            return Role(raw.strip().lower())
        except ValueError as exc:
            choices = ", ".join(r.value for r in Role)
            raise ValidationError(f"Unknown role '{raw}' (expected one of: {choices})") from exc
