"""
Pool Core Constants (integer domain)
====================================

Integer constants for the fixed-point decimal type and the denom grammar.
Display defaults below are formatting helpers only and never enter reserve or `k`
arithmetic.
"""

# NOTE: DEC_PRECISION is the number of fractional digits carried by Dec; it matches
# the 18-digit legacy decimal used by Cosmos SDK coin math.

import re

# ---------------------------------------------------------------------------
# Fixed-point decimal
# ---------------------------------------------------------------------------

#: Fractional digits carried by Dec.
DEC_PRECISION: int = 18
#: Integer multiplier of the implicit Dec scale (10^18).
DEC_MULTIPLIER: int = 10 ** DEC_PRECISION


# ---------------------------------------------------------------------------
# Denominations
# ---------------------------------------------------------------------------

#: Coin denom grammar: a letter followed by 2..127 of [a-zA-Z0-9/:._-].
DENOM_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9/:._-]{2,127}$")


# ---------------------------------------------------------------------------
# Display defaults (formatting helpers)
# ---------------------------------------------------------------------------

#: Default number of fractional digits shown for prices.
PRICE_DISPLAY_PLACES: int = 6


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "DEC_PRECISION",
    "DEC_MULTIPLIER",
    "DENOM_PATTERN",
    "PRICE_DISPLAY_PLACES",
]
