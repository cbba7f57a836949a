"""
Per-request session context.

The caller identifies itself with ``X-User-Id`` and ``X-User-Role``
headers. Verifying those claims belongs to an upstream gateway; this
module only turns them into an explicit SessionContext for the route.
"""

from __future__ import annotations

import logging
from typing import Callable, Generator

from fastapi import Depends, Header

from cta_market.domain.errors import UnauthorizedError
from cta_market.domain.session import SessionContext, UserRole

logger = logging.getLogger(__name__)


def get_session_context(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> Generator[SessionContext, None, None]:
    """
    Build the SessionContext for one request.

    Yields:
        SessionContext: Caller identity and role

    Raises:
        UnauthorizedError: If either header is missing or the role is unknown
    """
    if not x_user_id or not x_user_id.strip():
        raise UnauthorizedError("Missing X-User-Id header")
    if not x_user_role:
        raise UnauthorizedError("Missing X-User-Role header")
    try:
        role = UserRole(x_user_role.strip().upper())
    except ValueError:
        raise UnauthorizedError("Unknown user role", role=x_user_role)

    context = SessionContext(user_id=x_user_id.strip(), role=role)
    logger.debug("Session started", extra={"user_id": context.user_id, "role": role.value})
    try:
        yield context
    finally:
        logger.debug("Session ended", extra={"user_id": context.user_id, "role": role.value})


def require_roles(*roles: UserRole) -> Callable[..., SessionContext]:
    """Dependency factory: the session must hold one of ``roles`` (403 otherwise)."""

    def dependency(context: SessionContext = Depends(get_session_context)) -> SessionContext:
        context.require_role(*roles)
        return context

    return dependency


require_admin = require_roles(UserRole.ADMINISTRATOR)
require_dealership = require_roles(UserRole.DEALERSHIP, UserRole.ADMINISTRATOR)
require_buyer = require_roles(UserRole.BUYER, UserRole.ADMINISTRATOR)
