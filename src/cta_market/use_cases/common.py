"""Helpers shared by the use cases: clock, id generation and id validation."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from cta_market.domain.errors import ValidationError, field_error


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


def ensure_uuid(value: str, field: str) -> None:
    """
    Raise ValidationError unless ``value`` is a well-formed UUID.

    Repositories answer ``None`` for malformed ids; checking here lets the
    caller see a 422 instead of a misleading 404.
    """
    try:
        UUID(value)
    except (ValueError, TypeError):
        raise ValidationError(
            errors=[field_error(field, "Must be a valid UUID format", "INVALID_UUID")]
        )
