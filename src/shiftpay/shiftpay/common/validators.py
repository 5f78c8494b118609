from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_positive_id(value, field_name: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if parsed <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return parsed


def normalize_category(value: Optional[str]) -> Optional[str]:
    """Contribution category: a single uppercase letter, or None when unset."""
    if value is None or not value.strip():
        return None
    letter = value.strip().upper()
    if len(letter) != 1 or not letter.isalpha():
        raise ValidationError(f"Contribution category must be a single letter, got {value!r}")
    return letter


def optional_confidence(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Face match confidence must be a number")
    if confidence < 0:
        raise ValidationError("Face match confidence cannot be negative")
    return confidence
