"""
Amount primitives: integer coin amounts and the Dec fixed-point decimal.

- Coin amounts are plain Python ints in the smallest unit (arbitrary precision,
  no overflow under repeated multiplication of reserve-sized magnitudes).
- Dec: signed integer magnitude with an implicit scale of 10^DEC_PRECISION.
- Rounding semantics: every inexact step (mul, quo, truncate_int) truncates
  toward zero. There is no banker's rounding and no float anywhere in here.
- Decimal/float views exist only for display (see `fmt.py`).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from .constants import DEC_PRECISION, DEC_MULTIPLIER
from .exc import AmountDomainError, DivisionByZero

# Debug printing control
DEBUG_DEC = False

def _dbg(msg: str) -> None:
    if DEBUG_DEC:
        print(f"[DEC] {msg}")


# ----------------------------
# Integer rounding helpers (centralised)
# ----------------------------

def quo_trunc(a: int, b: int) -> int:
    """Integer quotient a/b truncated toward zero (unlike `//`, which floors)."""
    if b == 0:
        raise DivisionByZero("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def decimal_scale(decimals: int) -> int:
    """Return 10**decimals, the integer scale of an asset with `decimals` digits."""
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise AmountDomainError(f"decimals must be int, got {type(decimals).__name__}")
    if decimals < 0:
        raise AmountDomainError(f"decimals must be >= 0, got {decimals}")
    return 10 ** decimals


def _require_int(x, what: str) -> int:
    if isinstance(x, bool) or not isinstance(x, int):
        raise AmountDomainError(f"{what} must be int, got {type(x).__name__}")
    return x


# ----------------------------
# Dec (signed fixed-point)
# ----------------------------

@dataclass(frozen=True, order=True)
class Dec:
    """Fixed-point decimal: value * 10^-DEC_PRECISION (signed domain)."""
    value: int

    def __post_init__(self):
        _require_int(self.value, "Dec value")

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "Dec":
        return Dec(0)

    @staticmethod
    def one() -> "Dec":
        return Dec(DEC_MULTIPLIER)

    @classmethod
    def from_int(cls, i: int) -> "Dec":
        return cls(_require_int(i, "Dec.from_int input") * DEC_MULTIPLIER)

    @classmethod
    def from_ratio(cls, num: int, den: int) -> "Dec":
        """Exact num/den truncated to DEC_PRECISION digits."""
        _require_int(num, "numerator")
        _require_int(den, "denominator")
        return cls(quo_trunc(num * DEC_MULTIPLIER, den))

    @classmethod
    def from_str(cls, s: str) -> "Dec":
        """Parse a plain decimal string such as '-12.5' or '800000000'.

        More than DEC_PRECISION fractional digits, exponents and non-finite values
        are rejected rather than rounded.
        """
        if not isinstance(s, str):
            raise AmountDomainError("Dec.from_str expects str")
        text = s.strip()
        try:
            d = Decimal(text)
        except InvalidOperation:
            raise AmountDomainError(f"invalid decimal string: {s!r}") from None
        if not d.is_finite():
            raise AmountDomainError(f"non-finite decimal string: {s!r}")
        if "e" in text.lower():
            raise AmountDomainError(f"exponent notation not accepted: {s!r}")
        tup = d.as_tuple()
        if tup.exponent < -DEC_PRECISION:
            raise AmountDomainError(f"too many decimal places (max {DEC_PRECISION}): {s!r}")
        digits = int("".join(str(x) for x in tup.digits)) if tup.digits else 0
        value = digits * (10 ** (DEC_PRECISION + tup.exponent))
        return cls(-value if tup.sign else value)

    # ------------- conversions -------------

    def truncate_int(self) -> int:
        """Integer part, truncated toward zero."""
        return quo_trunc(self.value, DEC_MULTIPLIER)

    def to_decimal(self) -> Decimal:
        """Exact Decimal view, for logs/printing only."""
        return Decimal(self.value).scaleb(-DEC_PRECISION)

    def to_float(self) -> float:
        """Lossy float view; reporting boundary only."""
        return float(self.to_decimal())

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    def is_negative(self) -> bool:
        return self.value < 0

    # ------------- arithmetic -------------

    def add(self, other: "Dec") -> "Dec":
        return Dec(self.value + _dec(other).value)

    def sub(self, other: "Dec") -> "Dec":
        return Dec(self.value - _dec(other).value)

    def mul(self, other: "Dec") -> "Dec":
        return Dec(quo_trunc(self.value * _dec(other).value, DEC_MULTIPLIER))

    def quo(self, other: "Dec") -> "Dec":
        den = _dec(other).value
        if den == 0:
            raise DivisionByZero(f"Dec division by zero ({self} / 0)")
        q = quo_trunc(self.value * DEC_MULTIPLIER, den)
        _dbg(f"quo: {self.value} / {den} -> {q}")
        return Dec(q)

    def mul_int(self, i: int) -> "Dec":
        return Dec(self.value * _require_int(i, "scalar"))

    def quo_int(self, i: int) -> "Dec":
        if _require_int(i, "scalar") == 0:
            raise DivisionByZero(f"Dec division by zero scalar ({self} / 0)")
        return Dec(quo_trunc(self.value, i))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = quo

    def __neg__(self) -> "Dec":
        return Dec(-self.value)

    def __abs__(self) -> "Dec":
        return Dec(abs(self.value))

    # ------------- display -------------

    def __str__(self) -> str:
        sign = "-" if self.value < 0 else ""
        whole, frac = divmod(abs(self.value), DEC_MULTIPLIER)
        return f"{sign}{whole}.{frac:0{DEC_PRECISION}d}"


def _dec(x) -> Dec:
    if not isinstance(x, Dec):
        raise AmountDomainError(f"Dec arithmetic requires Dec operands, got {type(x).__name__}")
    return x


# Numeric-like accepted by Dec bridges
DecLike = Union[Dec, int, str]

def to_dec(x: DecLike) -> Dec:
    """Normalise int/str/Dec to Dec. Floats are refused."""
    if isinstance(x, Dec):
        return x
    if isinstance(x, str):
        return Dec.from_str(x)
    return Dec.from_int(x)


def to_human(amount: int, scale: int) -> Dec:
    """Raw integer amount -> Dec quantity in whole units of the asset."""
    _require_int(amount, "amount")
    if _require_int(scale, "scale") <= 0:
        raise AmountDomainError(f"scale must be > 0, got {scale}")
    return Dec.from_int(amount).quo_int(scale)


__all__ = [
    "DEBUG_DEC",
    "Dec",
    "DecLike",
    "to_dec",
    "to_human",
    "quo_trunc",
    "decimal_scale",
]
