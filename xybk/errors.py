"""Pair error classes.

Every rejection the pricing engine can produce has its own type so callers
can branch on the kind of failure. None of them are transient: retrying the
same call with the same inputs fails the same way.
"""


class PairError(Exception):
    """Base error for pair operations."""

    pass


class InvalidBoostError(PairError):
    """Boost factor must be an integer >= 1."""

    pass


class InvalidFeeError(PairError):
    """Swap fee must be in range [0, 10000] basis points."""

    pass


class AssetMismatchError(PairError):
    """Token does not belong to the pair, or the pair tokens are not distinct."""

    pass


class ChainMismatchError(AssetMismatchError):
    """Tokens live on different chains."""

    pass


class InsufficientReservesError(PairError):
    """A reserve is empty, or the requested amount is not available."""

    pass


class InsufficientInputAmountError(PairError):
    """Computed output (or minted liquidity) is zero."""

    pass


class TradeNotSupportedError(PairError):
    """The pair's trade state does not allow selling this token."""

    pass


class MissingKLastError(PairError, ValueError):
    """Protocol fee accounting needs k_last as of the last liquidity event."""

    pass


__all__ = [
    "PairError",
    "InvalidBoostError",
    "InvalidFeeError",
    "AssetMismatchError",
    "ChainMismatchError",
    "InsufficientReservesError",
    "InsufficientInputAmountError",
    "TradeNotSupportedError",
    "MissingKLastError",
]
