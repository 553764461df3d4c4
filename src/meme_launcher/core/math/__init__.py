"""
Core math modules для meme-launcher

Целочисленные примитивы с гарантией отсутствия переполнений и
ценообразование по bonding curve.
"""

# Integer Safeguards
from meme_launcher.core.math.integer_safeguards import (
    U64_MAX,
    U128_MAX,
    checked_add,
    checked_mul,
    is_uint,
    narrow_to_u64,
    validate_u64,
)

# Bonding Curve
from meme_launcher.core.math.bonding_curve import (
    PriceQuote,
    calculate_price,
    quote_buy,
)

__all__ = [
    # Integer Safeguards — Bounds
    "U64_MAX",
    "U128_MAX",
    # Integer Safeguards — Functions
    "checked_add",
    "checked_mul",
    "is_uint",
    "narrow_to_u64",
    "validate_u64",
    # Bonding Curve — Types
    "PriceQuote",
    # Bonding Curve — Functions
    "calculate_price",
    "quote_buy",
]
