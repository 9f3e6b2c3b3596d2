import pytest

from amm_pool.core import Coin, Dec, PoolSnapshot, validate_denom
from amm_pool.core.exc import AmountDomainError, InvalidDenom


# -----------------------------
# Denoms
# -----------------------------

@pytest.mark.parametrize("denom", ["inj", "usdt", "ibc/27394FB092D2ECCD", "factory/inj1abc/sub", "a.b-c_d:e"])
def test_valid_denoms(denom):
    assert validate_denom(denom) == denom


@pytest.mark.parametrize("denom", ["", "ab", "1abc", "in j", "x" * 129, None])
def test_invalid_denoms(denom):
    print(f"[denom] {denom!r} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        validate_denom(denom)


# -----------------------------
# Coin
# -----------------------------

@pytest.mark.parametrize("amount", [-1, 1.0, True, "5"])
def test_coin_rejects_bad_amounts(amount):
    with pytest.raises(AmountDomainError):
        Coin("inj", amount)


def test_coin_add_sub_same_denom():
    a = Coin("inj", 100)
    b = Coin("inj", 40)
    assert a + b == Coin("inj", 140)
    assert a - b == Coin("inj", 60)
    assert (a - a).is_zero()


def test_coin_denom_mismatch_raises_invalid_denom():
    with pytest.raises(InvalidDenom) as ei:
        Coin("inj", 1) + Coin("usdt", 1)
    assert ei.value.denom == "usdt"
    assert ei.value.expected == "inj"


def test_coin_sub_underflow_raises():
    with pytest.raises(AmountDomainError):
        Coin("inj", 1) - Coin("inj", 2)


def test_coin_is_immutable_and_prints_like_sdk():
    c = Coin("inj", 100)
    with pytest.raises(AttributeError):
        c.amount = 5  # frozen dataclass
    assert str(c) == "100inj"
    assert c.with_amount(7) == Coin("inj", 7)
    assert Coin.zero("usdt") == Coin("usdt", 0)


# -----------------------------
# PoolSnapshot
# -----------------------------

def test_snapshot_product():
    snap = PoolSnapshot(Coin("inj", 10), Coin("usdt", 8), 1, 1, Dec.from_str("0.8"), 80)
    assert snap.product() == 80
