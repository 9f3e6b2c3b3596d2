"""
Formatting helpers (non-core arithmetic).

Core arithmetic uses ints and Dec. Decimal and float appear here only for
display (logs, console output, charts); nothing returned from this module may
be fed back into reserve or `k` computations.
"""

from decimal import Decimal, getcontext, ROUND_DOWN

from .amounts import Dec, to_human
from .constants import PRICE_DISPLAY_PLACES
from .datatypes import Coin
from .exc import AmountDomainError


# ---------------------------------------------------------------------------
# Global Decimal precision (formatting only)
# ---------------------------------------------------------------------------

#: Significant digits for Decimal-based formatting. Reserve-sized values (1e23
#: and beyond carried to 18 fractional digits) need more than the default 28.
DEFAULT_DECIMAL_PRECISION: int = 60
getcontext().prec = DEFAULT_DECIMAL_PRECISION


def fmt_dec(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

      Decimal('1')      -> '1.000000000000000000E+0'
      Decimal('123456') -> '1.234560000000000000E+5'
    """
    return format(x, f".{places}E")


def fmt_price(p: Dec, places: int = PRICE_DISPLAY_PLACES) -> str:
    """Fixed-point price string with `places` fractional digits (truncated)."""
    if not isinstance(p, Dec):
        raise AmountDomainError("fmt_price(): expected Dec")
    d = p.to_decimal()
    q = Decimal(1).scaleb(-places)
    return str(d.quantize(q, rounding=ROUND_DOWN))


def coin_to_decimal(c: Coin, scale: int) -> Decimal:
    """Whole-unit Decimal view of a coin given its asset scale (display only)."""
    if not isinstance(c, Coin):
        raise AmountDomainError("coin_to_decimal(): expected Coin")
    return to_human(c.amount, scale).to_decimal()


def dec_to_float(x: Dec) -> float:
    """Float view of a Dec for charting; the only sanctioned float conversion."""
    if not isinstance(x, Dec):
        raise AmountDomainError("dec_to_float(): expected Dec")
    return x.to_float()


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "fmt_dec",
    "fmt_price",
    "coin_to_decimal",
    "dec_to_float",
]
