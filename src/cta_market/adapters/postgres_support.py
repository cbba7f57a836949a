from __future__ import annotations

from uuid import UUID


def parse_uuid(value: str) -> UUID | None:
    """UUID for ``value``, or None when it is not a valid UUID string."""
    try:
        return UUID(value)
    except (ValueError, TypeError):
        return None
