# -*- coding: utf-8 -*-
"""Utility modules."""

from perp_bet_hedging.utils.formatting import describe_parameters, format_odd, format_usd
from perp_bet_hedging.utils.validation import (
    is_finite_number,
    is_hex_address,
    is_probability,
    mask_address,
)

__all__ = [
    "describe_parameters",
    "format_odd",
    "format_usd",
    "is_finite_number",
    "is_hex_address",
    "is_probability",
    "mask_address",
]
