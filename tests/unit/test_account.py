import pytest

from amm_pool import Account, Coin
from amm_pool.core.exc import AmountDomainError, InsufficientFunds, InvalidConfiguration


def test_account_from_coin_list_merges_duplicates():
    acc = Account("0x1", [Coin("inj", 5), Coin("usdt", 7), Coin("inj", 3)])
    assert acc.report() == {"inj": 8, "usdt": 7}


def test_account_from_mapping():
    acc = Account("0x1", {"inj": Coin("inj", 5)})
    assert acc.balance("inj") == 5
    assert acc.balance("usdt") == 0


def test_account_mapping_key_must_match_denom():
    with pytest.raises(InvalidConfiguration):
        Account("0x1", {"usdt": Coin("inj", 5)})


@pytest.mark.parametrize("address", ["", None])
def test_account_requires_address(address):
    with pytest.raises(InvalidConfiguration):
        Account(address, [])


def test_credit_creates_and_increments():
    acc = Account("0x1")
    acc.credit("inj", 10)
    acc.credit("inj", 5)
    assert acc.report() == {"inj": 15}


def test_credit_rejects_negative():
    acc = Account("0x1")
    with pytest.raises(AmountDomainError):
        acc.credit("inj", -1)


def test_debit_checks_balance_before_mutating():
    acc = Account("0x1", [Coin("usdt", 5)])
    with pytest.raises(InsufficientFunds) as ei:
        acc.debit("usdt", 6)
    print("[debit-insufficient]", ei.value)
    assert ei.value.requested == 6
    assert ei.value.available == 5
    assert acc.report() == {"usdt": 5}


def test_debit_missing_denom_is_zero_balance():
    acc = Account("0x1", [Coin("usdt", 5)])
    with pytest.raises(InsufficientFunds) as ei:
        acc.debit("inj", 1)
    assert ei.value.available == 0
    assert acc.report() == {"usdt": 5}


def test_debit_exact_balance_leaves_zero():
    acc = Account("0x1", [Coin("usdt", 5)])
    acc.debit("usdt", 5)
    assert acc.balance("usdt") == 0
    assert acc.can_afford(Coin("usdt", 0))
    assert not acc.can_afford(Coin("usdt", 1))


def test_report_is_a_snapshot():
    acc = Account("0x1", [Coin("usdt", 5)])
    snap = acc.report()
    snap["usdt"] = 999
    acc.credit("usdt", 1)
    assert snap == {"usdt": 999}
    assert acc.report() == {"usdt": 6}


def test_describe_matches_print_format():
    acc = Account("0x1", [Coin("inj", 10), Coin("usdt", 5)])
    assert acc.describe() == "Account: 0x1, funds=inj:10inj usdt:5usdt"
    assert str(acc) == acc.describe()
