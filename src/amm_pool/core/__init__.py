"""
amm_pool Core
=============

Unified exports for the integer-domain primitives used by Account and Pool.
Coin amounts are plain ints; Dec is an 18-digit fixed-point decimal whose
inexact operations truncate toward zero. Decimal/float helpers are provided
*only* for formatting.
"""

# NOTE:
#   Nothing in `core` touches float except `fmt.dec_to_float` and `Dec.to_float`,
#   which exist for the reporting boundary.

# Integer-domain constants
from .constants import (
    DEC_PRECISION,
    DEC_MULTIPLIER,
    DENOM_PATTERN,
    PRICE_DISPLAY_PLACES,
)

# Amount primitives
from .amounts import (
    Dec,
    DecLike,
    to_dec,
    to_human,
    quo_trunc,
    decimal_scale,
)

# Core datatypes
from .datatypes import (
    Coin,
    PoolSnapshot,
    validate_denom,
)

# Formatting helpers (non-core arithmetic)
from .fmt import (
    fmt_dec,
    fmt_price,
    coin_to_decimal,
    dec_to_float,
)

# Core exceptions
from .exc import (
    PoolError,
    DivisionByZero,
    InvalidDenom,
    InsufficientFunds,
    InvalidConfiguration,
    AmountDomainError,
    InvariantViolation,
)

__all__ = [
    # constants
    "DEC_PRECISION",
    "DEC_MULTIPLIER",
    "DENOM_PATTERN",
    "PRICE_DISPLAY_PLACES",
    # amounts
    "Dec",
    "DecLike",
    "to_dec",
    "to_human",
    "quo_trunc",
    "decimal_scale",
    # datatypes
    "Coin",
    "PoolSnapshot",
    "validate_denom",
    # fmt
    "fmt_dec",
    "fmt_price",
    "coin_to_decimal",
    "dec_to_float",
    # exceptions
    "PoolError",
    "DivisionByZero",
    "InvalidDenom",
    "InsufficientFunds",
    "InvalidConfiguration",
    "AmountDomainError",
    "InvariantViolation",
]
