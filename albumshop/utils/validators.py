from __future__ import annotations

from typing import Any


def require_text(v: Any, name: str = "value") -> str:
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f"{name} must be a non-empty string")
    return v


def require_non_negative_number(v: Any, name: str = "value") -> float:
    # bool is an int subclass, "true" is not a price
    if isinstance(v, bool):
        raise ValueError(f"{name} must be a number")
    if isinstance(v, str):
        try:
            v = float(v.strip().replace(",", "."))
        except ValueError:
            raise ValueError(f"{name} must be a number") from None
    if not isinstance(v, (int, float)):
        raise ValueError(f"{name} must be a number")
    v = float(v)
    if v != v or v in (float("inf"), float("-inf")):
        raise ValueError(f"{name} must be a finite number")
    if v < 0:
        raise ValueError(f"{name} must be >= 0")
    return v
