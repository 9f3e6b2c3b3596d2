"""
Constant-product pool (base/quote): **pool math only**.

The pool owns two reserves and the constant `k`. Trades against an Account
keep `base * quote` within one truncation step of `k`; deposits keep the
reserve ratio and leave `k` untouched ("non-profit" deposit).

All reserve and `k` arithmetic is integer/Dec; quotients truncate toward zero.
Every precondition is checked before the first mutation, so a failing call
leaves both the pool and the account exactly as they were.
"""
from __future__ import annotations

import threading
from typing import List, Optional, Tuple

from .account import Account
from .core import Coin, Dec, PoolSnapshot, decimal_scale
from .core.exc import (
    AmountDomainError,
    InsufficientFunds,
    InvalidConfiguration,
    InvalidDenom,
    InvariantViolation,
)

# --- Debug utilities (toggleable) ---
DEBUG_POOL = False

def _dbg(msg: str) -> None:
    if DEBUG_POOL:
        print(f"[POOL] {msg}")


class Pool:
    """Pool(base, quote) with constant product `k`.

    Orientation: `buy` pays quote in and base out; `sell` pays base in and quote
    out. Reserves are Coins in smallest units; `base_scale`/`quote_scale` are
    10^decimals and are used only for the normalised price.
    """

    def __init__(self,
                 base_fund: Coin,
                 quote_fund: Coin,
                 base_decimals: int,
                 quote_decimals: int,
                 k: Optional[int] = None) -> None:
        if not isinstance(base_fund, Coin) or not isinstance(quote_fund, Coin):
            raise InvalidConfiguration("pool reserves must be Coin instances")
        if base_fund.amount <= 0 or quote_fund.amount <= 0:
            raise InvalidConfiguration(
                f"pool reserves must be positive (base={base_fund}, quote={quote_fund})")
        if base_fund.denom == quote_fund.denom:
            raise InvalidConfiguration(f"base and quote denoms must differ ({base_fund.denom})")
        try:
            self.base_scale = decimal_scale(base_decimals)
            self.quote_scale = decimal_scale(quote_decimals)
        except AmountDomainError as e:
            raise InvalidConfiguration(str(e)) from e
        if k is None:
            k = base_fund.amount * quote_fund.amount
        if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
            raise InvalidConfiguration(f"k must be a positive int, got {k!r}")

        self.base_decimals = base_decimals
        self.quote_decimals = quote_decimals
        self.k = k
        self._base = base_fund
        self._quote = quote_fund
        self._lock = threading.RLock()
        _dbg(f"init: base={base_fund} quote={quote_fund} k={k} drift={self.invariant_drift()}")

    # --- read side ---

    @property
    def base_reserve(self) -> Coin:
        with self._lock:
            return self._base

    @property
    def quote_reserve(self) -> Coin:
        with self._lock:
            return self._quote

    @property
    def base_denom(self) -> str:
        return self._base.denom

    @property
    def quote_denom(self) -> str:
        return self._quote.denom

    def price(self) -> Dec:
        """Quote-per-base price normalised for each asset's decimals.

        Evaluated as quote * base_scale / quote_scale / base in Dec.
        """
        with self._lock:
            base, quote = self._base.amount, self._quote.amount
        return (Dec.from_int(quote)
                .mul(Dec.from_int(self.base_scale))
                .quo(Dec.from_int(self.quote_scale))
                .quo(Dec.from_int(base)))

    def invariant_drift(self) -> int:
        """k - base*quote. Without deposits this stays in [0, reserve paid into) after every trade."""
        with self._lock:
            return self.k - self._base.amount * self._quote.amount

    def snapshot(self) -> PoolSnapshot:
        with self._lock:
            return PoolSnapshot(
                base=self._base,
                quote=self._quote,
                base_scale=self.base_scale,
                quote_scale=self.quote_scale,
                price=self.price(),
                k=self.k,
            )

    # --- trade planning (no mutation) ---

    def _check_side(self, coin: Coin, denom: str) -> None:
        if not isinstance(coin, Coin):
            raise AmountDomainError(f"expected Coin, got {type(coin).__name__}")
        if coin.denom != denom:
            raise InvalidDenom(coin.denom, denom)

    def _plan_swap(self, reserve_in: int, reserve_out: int, amount_in: int) -> Tuple[int, int, int]:
        """Return (new_in, new_out, sent_out) for paying `amount_in` into the pool."""
        new_in = reserve_in + amount_in
        new_out = Dec.from_int(self.k).quo(Dec.from_int(new_in)).truncate_int()
        if new_out > reserve_out:
            raise InvariantViolation(
                f"trade would grow the paid-out reserve ({reserve_out} -> {new_out}); k={self.k} is inconsistent")
        if new_out <= 0:
            raise InvariantViolation(f"trade of {amount_in} would drain the paid-out reserve")
        return new_in, new_out, reserve_out - new_out

    def quote_buy(self, bid_fund: Coin) -> Coin:
        """Base coin a `buy(bid_fund)` would pay out right now (read-only)."""
        with self._lock:
            self._check_side(bid_fund, self._quote.denom)
            _, _, sent = self._plan_swap(self._quote.amount, self._base.amount, bid_fund.amount)
            return Coin(self._base.denom, sent)

    def quote_sell(self, ask_fund: Coin) -> Coin:
        """Quote coin a `sell(ask_fund)` would pay out right now (read-only)."""
        with self._lock:
            self._check_side(ask_fund, self._base.denom)
            _, _, sent = self._plan_swap(self._base.amount, self._quote.amount, ask_fund.amount)
            return Coin(self._quote.denom, sent)

    # --- operations ---

    def deposit(self, base_funds: Coin, quote_funds: Coin) -> List[Coin]:
        """Add liquidity at the current reserve ratio; return exactly one refund coin.

        The side that would overshoot the ratio is trimmed and the excess is
        refunded. `k` is not recomputed.
        """
        with self._lock:
            self._check_side(base_funds, self._base.denom)
            self._check_side(quote_funds, self._quote.denom)
            base, quote = self._base.amount, self._quote.amount

            # base_funds / (base / quote), kept exact until the final truncation
            expected_quote = (Dec.from_int(base_funds.amount)
                              .mul(Dec.from_int(quote))
                              .quo(Dec.from_int(base))
                              .truncate_int())
            if expected_quote <= quote_funds.amount:
                refund = Coin(self._quote.denom, quote_funds.amount - expected_quote)
                self._base = self._base + base_funds
                self._quote = self._quote.with_amount(quote + expected_quote)
                _dbg(f"deposit: accept {base_funds} + {expected_quote}{self._quote.denom}, refund {refund}")
                return [refund]

            # (base / quote) * quote_funds
            expected_base = (Dec.from_int(quote_funds.amount)
                             .mul(Dec.from_int(base))
                             .quo(Dec.from_int(quote))
                             .truncate_int())
            refund = Coin(self._base.denom, base_funds.amount - expected_base)
            self._quote = self._quote + quote_funds
            self._base = self._base.with_amount(base + expected_base)
            _dbg(f"deposit: accept {expected_base}{self._base.denom} + {quote_funds}, refund {refund}")
            return [refund]

    def buy(self, bid_fund: Coin, account: Account) -> Coin:
        """Spend `bid_fund` (quote denom) from `account` for base; return the base paid out.

        The payout is recomputed from `k`, which deposits do not raise. After a
        deposit base*quote exceeds `k`, so even a zero-amount buy pays out the
        deposited excess.
        """
        with self._lock, account.lock:
            self._check_side(bid_fund, self._quote.denom)
            available = account.balance(bid_fund.denom)
            if bid_fund.amount > available:
                raise InsufficientFunds(bid_fund.denom, bid_fund.amount, available)
            new_quote, new_base, sent_base = self._plan_swap(
                self._quote.amount, self._base.amount, bid_fund.amount)

            account.debit(bid_fund.denom, bid_fund.amount)
            account.credit(self._base.denom, sent_base)
            self._base = self._base.with_amount(new_base)
            self._quote = self._quote.with_amount(new_quote)
            _dbg(f"buy: {bid_fund} -> {sent_base}{self._base.denom}; drift={self.invariant_drift()}")
            return Coin(self._base.denom, sent_base)

    def sell(self, ask_fund: Coin, account: Account) -> Coin:
        """Spend `ask_fund` (base denom) from `account` for quote; return the quote paid out.

        Mirror image of `buy`: base grows by the ask, quote is recomputed from `k`.
        """
        with self._lock, account.lock:
            self._check_side(ask_fund, self._base.denom)
            available = account.balance(ask_fund.denom)
            if ask_fund.amount > available:
                raise InsufficientFunds(ask_fund.denom, ask_fund.amount, available)
            new_base, new_quote, sent_quote = self._plan_swap(
                self._base.amount, self._quote.amount, ask_fund.amount)

            account.debit(ask_fund.denom, ask_fund.amount)
            account.credit(self._quote.denom, sent_quote)
            self._base = self._base.with_amount(new_base)
            self._quote = self._quote.with_amount(new_quote)
            _dbg(f"sell: {ask_fund} -> {sent_quote}{self._quote.denom}; drift={self.invariant_drift()}")
            return Coin(self._quote.denom, sent_quote)

    # --- display ---

    def describe(self) -> str:
        with self._lock:
            base, quote = self._base, self._quote
            price = self.price()
        return (f"Pool: asset: {base.denom}:{base.amount} {quote.denom}:{quote.amount}, "
                f"price($):{price}")

    __str__ = describe

    def __repr__(self) -> str:
        return (f"Pool(base={self._base!s}, quote={self._quote!s}, "
                f"base_decimals={self.base_decimals}, quote_decimals={self.quote_decimals}, k={self.k})")


__all__ = [
    "DEBUG_POOL",
    "Pool",
]
