"""Field shape checks applied by services before writing."""

from __future__ import annotations

from core.errors import ValidationError


def require_text(value: object, field_name: str, *, max_length: int | None = None) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    normalized = value.strip()
    if not normalized:
        raise ValidationError(f"{field_name} must not be empty")
    if max_length is not None and len(normalized) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return normalized
