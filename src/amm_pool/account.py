"""
Account: a holder of balances in several denominations.

The account only holds and reports funds. Trades mutate it through
`credit`/`debit` while holding the pool lock; the driver funds it once at
construction.
"""
from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Dict, Iterable, Union

from .core import Coin, validate_denom
from .core.exc import AmountDomainError, InsufficientFunds, InvalidConfiguration

# --- Debug utilities (toggleable) ---
DEBUG_ACCOUNT = False

def _dbg(msg: str) -> None:
    if DEBUG_ACCOUNT:
        print(f"[ACCOUNT] {msg}")


Funding = Union[Mapping[str, Coin], Iterable[Coin]]


class Account:
    """Address plus a denom -> Coin balance map; every balance stays >= 0."""

    def __init__(self, address: str, balances: Funding = ()) -> None:
        if not isinstance(address, str) or not address:
            raise InvalidConfiguration("account address must be a non-empty string")
        self.address = address
        self._lock = threading.RLock()
        self._balances: Dict[str, Coin] = {}
        if isinstance(balances, Mapping):
            items = []
            for denom, coin in balances.items():
                if not isinstance(coin, Coin) or coin.denom != denom:
                    raise InvalidConfiguration(f"balance for {denom!r} must be a Coin of that denom")
                items.append(coin)
        else:
            items = list(balances)
        for coin in items:
            if not isinstance(coin, Coin):
                raise InvalidConfiguration(f"account funding must be Coin, got {type(coin).__name__}")
            prev = self._balances.get(coin.denom)
            self._balances[coin.denom] = coin if prev is None else prev + coin

    # --- read side ---

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def balance(self, denom: str) -> int:
        with self._lock:
            coin = self._balances.get(denom)
            return 0 if coin is None else coin.amount

    def can_afford(self, coin: Coin) -> bool:
        return coin.amount <= self.balance(coin.denom)

    def report(self) -> Dict[str, int]:
        """Snapshot of denom -> amount; later mutations do not show through."""
        with self._lock:
            return {denom: coin.amount for denom, coin in self._balances.items()}

    # --- write side ---

    def credit(self, denom: str, amount: int) -> None:
        validate_denom(denom)
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise AmountDomainError(f"credit amount must be a non-negative int, got {amount!r}")
        with self._lock:
            prev = self._balances.get(denom, Coin.zero(denom))
            self._balances[denom] = prev.with_amount(prev.amount + amount)
            _dbg(f"{self.address}: credit {amount}{denom} -> {self._balances[denom]}")

    def debit(self, denom: str, amount: int) -> None:
        validate_denom(denom)
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise AmountDomainError(f"debit amount must be a non-negative int, got {amount!r}")
        with self._lock:
            available = self.balance(denom)
            if amount > available:
                raise InsufficientFunds(denom, amount, available)
            prev = self._balances.get(denom, Coin.zero(denom))
            self._balances[denom] = prev.with_amount(available - amount)
            _dbg(f"{self.address}: debit {amount}{denom} -> {self._balances[denom]}")

    # --- display ---

    def describe(self) -> str:
        with self._lock:
            funds = " ".join(f"{denom}:{coin}" for denom, coin in self._balances.items())
        return f"Account: {self.address}, funds={funds}"

    __str__ = describe

    def __repr__(self) -> str:
        return f"Account(address={self.address!r}, balances={self.report()!r})"


__all__ = [
    "DEBUG_ACCOUNT",
    "Account",
]
