from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative_number(value: Optional[str], field_name: str) -> float:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")

    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    # "-0" parses as -0.0
    return number + 0.0


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[str]:
    text = optional_text(value)
    if text is None:
        return None
    try:
        parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    return text
