from __future__ import annotations
from typing import Callable, Optional

import pytest

# Import project primitives
from amm_pool import Account, Coin, Pool


DENOM_INJ = "inj"
DENOM_USDT = "usdt"


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

def state_of(pool: Pool, account: Optional[Account] = None):
    """Comparable view of pool (and account) state for no-mutation checks."""
    pool_state = (pool.base_reserve, pool.quote_reserve, pool.k)
    if account is None:
        return pool_state
    return pool_state, account.report()


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def demo_pool() -> Pool:
    """100 inj (18 decimals) / 800 usdt (6 decimals), k = base * quote = 8e28."""
    return Pool(
        Coin(DENOM_INJ, 100 * 10**18),
        Coin(DENOM_USDT, 800 * 10**6),
        18,
        6,
        80_000_000_000_000_000_000_000_000_000,
    )


@pytest.fixture()
def large_pool() -> Pool:
    """100000 inj / 800 usdt with k = 100000*800*10^24."""
    return Pool(
        Coin(DENOM_INJ, 100000 * 10**18),
        Coin(DENOM_USDT, 800 * 10**6),
        18,
        6,
        100000 * 800 * 10**24,
    )


@pytest.fixture()
def trader() -> Account:
    """10 inj and 1000 usdt."""
    return Account("0x1", [
        Coin(DENOM_INJ, 10 * 10**18),
        Coin(DENOM_USDT, 1000 * 10**6),
    ])


@pytest.fixture()
def pool_factory() -> Callable[..., Pool]:
    def factory(base: int = 1000, quote: int = 1000, base_decimals: int = 0,
                quote_decimals: int = 0, k: Optional[int] = None,
                base_denom: str = "aaa", quote_denom: str = "bbb") -> Pool:
        return Pool(Coin(base_denom, base), Coin(quote_denom, quote), base_decimals, quote_decimals, k)
    return factory
