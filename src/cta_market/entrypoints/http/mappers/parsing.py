"""Text to domain value conversions shared by the mappers.

``to_decimal`` is strict and reports a field error. The ``lenient_*``
helpers are used for catalog filters, where input that cannot be
interpreted means "no constraint".
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from cta_market.domain.errors import ValidationError, field_error

E = TypeVar("E", bound=Enum)


def to_decimal(value: str, field: str) -> Decimal:
    try:
        amount = Decimal(value)
    except (InvalidOperation, ValueError):
        raise ValidationError(
            errors=[field_error(field, f"Must be a valid decimal: {value}", "INVALID_DECIMAL")]
        )
    if not amount.is_finite():
        raise ValidationError(
            errors=[field_error(field, f"Must be a finite decimal: {value}", "INVALID_DECIMAL")]
        )
    return amount


def lenient_text(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def lenient_decimal(value: str | None) -> Decimal | None:
    text = lenient_text(value)
    if text is None:
        return None
    try:
        amount = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    return amount if amount.is_finite() else None


def lenient_int(value: str | None) -> int | None:
    text = lenient_text(value)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def lenient_enum(enum_cls: type[E], value: str | None) -> E | None:
    text = lenient_text(value)
    if text is None:
        return None
    for member in enum_cls:
        if str(member.value).upper() == text.upper():
            return member
    return None
