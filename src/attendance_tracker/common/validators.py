from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..core.exceptions import FormatError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_keys(document: Any, keys: Iterable[str], *, what: str = "document") -> Mapping[str, Any]:
    """Check that ``document`` is a mapping carrying every key in ``keys``."""
    if not isinstance(document, Mapping):
        raise FormatError(f"Invalid {what}: expected an object")

    missing = [k for k in keys if k not in document]
    if missing:
        raise FormatError(f"Invalid {what}: missing {', '.join(missing)}")
    return document
