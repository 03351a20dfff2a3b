from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Reject the payload when any of ``fields`` is absent or blank."""
    missing = [f for f in fields if payload.get(f) is None or not str(payload.get(f)).strip()]
    if missing:
        raise ValidationError(f"Required fields missing: {', '.join(missing)}")


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_quantity(value: Any, default: int = 1) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        qty = int(str(value).strip())
    except ValueError:
        raise ValidationError("Quantity must be a whole number")
    if qty < 1:
        raise ValidationError("Quantity must be at least 1")
    return qty
