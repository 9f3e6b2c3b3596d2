"""
Core datatypes shared by Account and Pool.

These datatypes are intentionally minimal and immutable so that pool and
account bookkeeping can replace values instead of mutating them in place.

Notes:
- Coin amounts are integers in the denomination's smallest unit (no implicit
  decimal point). The decimal scale lives on the Pool, not on the Coin.
- PoolSnapshot is the read model handed to reporting; it never aliases pool state.
"""

from __future__ import annotations

from dataclasses import dataclass

from .amounts import Dec
from .constants import DENOM_PATTERN
from .exc import AmountDomainError, InvalidDenom


# ---------------------------------------------------------------------------
# Denom validation
# ---------------------------------------------------------------------------

def validate_denom(denom: str) -> str:
    """Return `denom` unchanged or raise AmountDomainError if it is malformed."""
    if not isinstance(denom, str) or not DENOM_PATTERN.match(denom):
        raise AmountDomainError(f"invalid denom: {denom!r}")
    return denom


# ---------------------------------------------------------------------------
# Coin
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Coin:
    """Immutable (denom, amount) pair with amount >= 0 in smallest units."""

    denom: str
    amount: int

    def __post_init__(self):
        validate_denom(self.denom)
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise AmountDomainError(f"Coin amount must be int, got {type(self.amount).__name__}")
        if self.amount < 0:
            raise AmountDomainError(f"negative coin amount: {self.amount}{self.denom}")

    @classmethod
    def zero(cls, denom: str) -> "Coin":
        return cls(denom, 0)

    def is_zero(self) -> bool:
        return self.amount == 0

    def _same_denom(self, other: "Coin") -> None:
        if not isinstance(other, Coin):
            raise AmountDomainError("Coin arithmetic requires Coin operands")
        if other.denom != self.denom:
            raise InvalidDenom(other.denom, self.denom)

    def add(self, other: "Coin") -> "Coin":
        self._same_denom(other)
        return Coin(self.denom, self.amount + other.amount)

    def sub(self, other: "Coin") -> "Coin":
        self._same_denom(other)
        if other.amount > self.amount:
            raise AmountDomainError(f"coin subtraction underflow: {self} - {other}")
        return Coin(self.denom, self.amount - other.amount)

    __add__ = add
    __sub__ = sub

    def with_amount(self, amount: int) -> "Coin":
        return Coin(self.denom, amount)

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


# ---------------------------------------------------------------------------
# Pool snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PoolSnapshot:
    """Committed pool state as seen by reporting.

    Fields:
    - base / quote: reserves in smallest units.
    - base_scale / quote_scale: 10^decimals of each side.
    - price: quote-per-base price normalised for decimals (Dec).
    - k: the pool constant.
    """

    base: Coin
    quote: Coin
    base_scale: int
    quote_scale: int
    price: Dec
    k: int

    def product(self) -> int:
        return self.base.amount * self.quote.amount


__all__ = [
    "validate_denom",
    "Coin",
    "PoolSnapshot",
]
