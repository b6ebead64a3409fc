"""Required-field checks for request identifiers."""

from __future__ import annotations

from typing import Any

from akamai_appsec.utils.exceptions import ValidationError

BLANK = "cannot be blank"


def is_blank(value: Any) -> bool:
    """Zero values count as missing: None, 0, empty string or empty collection."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set, bytes)):
        return len(value) == 0
    return False


def validate_required(fields: dict[str, Any]) -> None:
    """Raise one ValidationError naming every blank field, or return None."""
    errors = {name: BLANK for name, value in fields.items() if is_blank(value)}
    if errors:
        raise ValidationError(errors)
