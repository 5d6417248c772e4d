from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return str(value).strip()


def to_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not number.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_non_negative(value: Any, field_name: str) -> Decimal:
    number = to_decimal(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must be >= 0 (got {value})")
    return number
