"""
Core exception types for amm_pool.

These are dependency-free and may be imported by all core modules. Every error
is raised before any pool or account state is touched.
"""

__all__ = [
    "PoolError",
    "DivisionByZero",
    "InvalidDenom",
    "InsufficientFunds",
    "InvalidConfiguration",
    "AmountDomainError",
    "InvariantViolation",
]


class PoolError(Exception):
    """Base class for all pool, account and arithmetic errors."""
    pass


class DivisionByZero(PoolError, ZeroDivisionError):
    """Raised when a Dec or integer quotient has a zero divisor."""
    pass


class InvalidDenom(PoolError):
    """Raised when an operation's asset does not match the pool's configured side."""

    def __init__(self, denom, expected):
        super().__init__(f"invalid denom for this pool: {denom} (expected {expected})")
        self.denom = denom
        self.expected = expected


class InsufficientFunds(PoolError):
    """Raised when an account lacks the funds for a debit.

    Attributes
    ----------
    denom : str
        Denomination of the attempted debit.
    requested : int
        Amount the caller tried to debit.
    available : int
        Balance held by the account at the time of the attempt.
    """

    def __init__(self, denom, requested, available):
        super().__init__(
            f"insufficient funds: requested {requested}{denom}, available {available}{denom}"
        )
        self.denom = denom
        self.requested = requested
        self.available = available


class InvalidConfiguration(PoolError):
    """Raised when a pool or account is constructed from degenerate inputs."""
    pass


class AmountDomainError(PoolError):
    """Raised when inputs violate the non-negative domain or basic preconditions."""
    pass


class InvariantViolation(PoolError):
    """Raised when a trade would break reserve positivity or produce a negative transfer."""
    pass
