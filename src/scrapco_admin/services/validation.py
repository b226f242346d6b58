"""
scrapco_admin.services.validation

Lenient input coercion shared by the configuration handlers.

Request bodies come from an admin UI that sends strings for numbers and omits
fields freely; these helpers normalize values and raise `ValidationError` with the
message returned to the caller.
"""

from __future__ import annotations

import math
from typing import Any

from scrapco_admin.errors import ValidationError


def text(value: Any) -> str:
    # Falsy input (None, False, 0, "") reads as blank, matching the admin UI.
    if not value:
        return ""
    return str(value).strip()


def required_text(value: Any, field: str) -> str:
    cleaned = text(value)
    if not cleaned:
        raise ValidationError(f"{field} is required")
    return cleaned


def optional_text(value: Any) -> str | None:
    return text(value) or None


def to_number(value: Any) -> int | float | None:
    """Numeric value of `value`, or None when it is not a finite number."""

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def optional_number(value: Any, message: str) -> int | float | None:
    if value is None:
        return None
    number = to_number(value)
    if number is None:
        raise ValidationError(message)
    return number


def sort_order(value: Any) -> int | float | None:
    return optional_number(value, "sortOrder must be a number")


def rating(value: Any) -> int | float | None:
    message = "rating must be between 1 and 5"
    number = optional_number(value, message)
    if number is not None and not 1 <= number <= 5:
        raise ValidationError(message)
    return number


def flag(value: Any) -> bool:
    # Truthiness, as the admin UI sends booleans, 0/1 or omitted values.
    return bool(value)
