# Top-level API for amm_pool (integer-domain).
"""
Top-level API for amm_pool (integer-domain).

This module exposes the stable interface of the constant-product pool simulator:
  - Pool: two reserves, the constant `k`, deposit/buy/sell/price
  - Account: denom -> Coin balances mutated by Pool trades
  - PoolHistory: reporting-side time series and chart

Core data types (Coin, Dec) are integer-domain; Dec truncates toward zero.
"""

from __future__ import annotations


from .account import Account
from .pool import Pool
from .reporting import PoolHistory, HistorySample

from .core import (
    Coin,
    Dec,
    PoolSnapshot,
    decimal_scale,
    to_human,
    PoolError,
    DivisionByZero,
    InvalidDenom,
    InsufficientFunds,
    InvalidConfiguration,
    AmountDomainError,
    InvariantViolation,
)

__all__ = [
    # simulation building blocks
    "Pool",
    "Account",
    "PoolHistory",
    "HistorySample",
    # core integer-domain types
    "Coin",
    "Dec",
    "PoolSnapshot",
    "decimal_scale",
    "to_human",
    # errors
    "PoolError",
    "DivisionByZero",
    "InvalidDenom",
    "InsufficientFunds",
    "InvalidConfiguration",
    "AmountDomainError",
    "InvariantViolation",
]
