"""Small normalizers shared by the stores."""

from __future__ import annotations

from typing import Any


def is_blank(value: Any) -> bool:
    """None, empty strings and empty sequences all count as absent."""

    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def as_list(value: Any) -> list:
    """Wrap a scalar in a one-element list; leave lists alone."""

    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
