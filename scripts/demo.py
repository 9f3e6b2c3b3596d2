"""Demo: repeated buys against an inj/usdt constant-product pool.

Scenario:
- Account 0x1 holds 10 inj and 1000 usdt.
- Pool holds 100 inj (18 decimals) and 800 usdt (6 decimals), k = 8e28.
- The account buys inj with a fixed usdt bid `--steps` times; account and pool
  are printed after every buy and the reserve history can be charted.
"""
from __future__ import annotations

from typing import List, Optional
import argparse
import sys

from amm_pool import Account, Coin, Pool, PoolError, PoolHistory
from amm_pool.core import fmt_price

DENOM_INJ = "inj"
DENOM_USDT = "usdt"


def build_scenario() -> tuple[Account, Pool]:
    account = Account("0x1", [
        Coin(DENOM_INJ, 10_000_000_000_000_000_000),
        Coin(DENOM_USDT, 1_000_000_000),
    ])
    pool = Pool(
        Coin(DENOM_INJ, 100_000_000_000_000_000_000),
        Coin(DENOM_USDT, 800_000_000),
        18,
        6,
        80_000_000_000_000_000_000_000_000_000,
    )
    return account, pool


def run(steps: int, bid: int, *, quiet: bool = False) -> tuple[Account, Pool, PoolHistory]:
    account, pool = build_scenario()
    start_price = pool.price()
    history = PoolHistory.for_pool(pool)
    print(account)
    print(pool)

    for i in range(1, steps + 1):
        if not quiet:
            print(f"buy {i}-th")
        try:
            pool.buy(Coin(pool.quote_denom, bid), account)
        except PoolError as e:
            print(f"stopped at buy {i}: {e}")
            break
        history.record(pool, str(i))
        if not quiet:
            print(account)
            print(pool)
            print("-------")

    if quiet:
        print(account)
        print(pool)
    print(f"price: {fmt_price(start_price)} -> {fmt_price(pool.price())}")
    return account, pool, history


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Constant-product pool buy simulation")
    parser.add_argument("--steps", type=int, default=1000, help="Number of buys to perform")
    parser.add_argument("--bid", type=int, default=1_000_000, help="usdt bid per buy, in smallest units")
    parser.add_argument("--plot", type=str, default=None, help="Write the reserve chart to this image path")
    parser.add_argument("--quiet", action="store_true", help="Only print the initial and final state")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.steps < 0 or args.bid < 0:
        print("--steps and --bid must be non-negative", file=sys.stderr)
        return 2
    _, _, history = run(args.steps, args.bid, quiet=args.quiet)
    if args.plot:
        history.plot(args.plot)
        print(f"graph is painted here: {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
