"""Validation helpers for numeric inputs and wallet addresses."""

from __future__ import annotations

import math
from typing import Any


def is_finite_number(x: Any) -> bool:
    """Return True if x is a real int/float that is neither NaN nor infinite (bools excluded)."""
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    return math.isfinite(x)


def is_probability(x: Any) -> bool:
    """Return True if x is a finite number in the closed interval [0, 1]."""
    return is_finite_number(x) and 0.0 <= x <= 1.0


def is_hex_address(addr: Any) -> bool:
    """Return True if addr is a valid 0x wallet address (42 chars)."""
    if not isinstance(addr, str):
        return False
    s = addr.strip()
    if len(s) != 42:
        return False
    if not s.startswith("0x"):
        return False
    try:
        int(s[2:], 16)
        return True
    except ValueError:
        return False


def mask_address(addr: str | None) -> str:
    """Return a masked wallet address for logging (e.g. 0x1234...abcd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:6]}...{addr[-4:]}"
