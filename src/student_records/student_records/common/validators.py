from __future__ import annotations

from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_non_empty(value: Optional[str]) -> Optional[str]:
    """Blank or missing patch fields mean "leave unchanged"."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("expected a string value")
    value = value.strip()
    return value or None


def require_email(value: Optional[str], field_name: str = "email") -> str:
    value = require_non_empty(value, field_name)
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError as e:
        raise ValidationError(f"{field_name} is not a valid email address: {e}") from e


def require_positive_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; True must not pass as id 1
    if isinstance(value, bool):
        raise ValidationError(f"invalid {field_name}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"invalid {field_name}")
    if isinstance(value, float) and value != number:
        raise ValidationError(f"invalid {field_name}")
    if number <= 0:
        raise ValidationError(f"invalid {field_name}")
    return number


def require_int_field(value: Any, field_name: str) -> int:
    """JSON body ids must be real integers, not strings or floats."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"invalid {field_name}")
    return value
