"""Config validation – value checks shared by policies and settings."""
from __future__ import annotations

import math
from typing import Any


def is_finite_number(value: Any) -> bool:
    """``True`` for real ints and floats that are neither NaN nor infinite. Bools are rejected."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


__all__ = ["is_finite_number"]
