"""Parameter checks shared by the We.Retail case factories."""

from __future__ import annotations


def require_count(name: str, value: int) -> int:
    """Return `value` if it is a positive int (bools rejected), else raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def require_selector(name: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty selector string, got {value!r}")
    return value.strip()
