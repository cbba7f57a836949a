from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cta_market.domain.errors import ForbiddenError


class UserRole(str, Enum):
    BUYER = "BUYER"
    DEALERSHIP = "DEALERSHIP"
    ADMINISTRATOR = "ADMINISTRATOR"


@dataclass(frozen=True, slots=True)
class SessionContext:
    """Who is calling. Built per request and passed explicitly to handlers."""

    user_id: str
    role: UserRole

    def require_role(self, *roles: UserRole) -> None:
        if self.role not in roles:
            raise ForbiddenError(
                "Operation not allowed for this role",
                role=self.role.value,
                required=[role.value for role in roles],
            )
