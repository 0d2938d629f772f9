"""Factory functions for creating test pairs.

Usage:
    from tests.helpers import make_pair

    pair = make_pair(DAI, 100 * ONE_TOKEN, USDC, 100 * ONE_TOKEN)
"""

from xybk.amm.pair import CurveMode, Pair, TradeState
from xybk.models.token import Token, TokenAmount


def make_pair(
    token_a: Token,
    reserve_a: int | str,
    token_b: Token,
    reserve_b: int | str,
    boost0: int | None = None,
    boost1: int | None = None,
    fee_bps: int = 30,
    trade_state: TradeState = TradeState.SELL_ALL,
) -> Pair:
    """Create a pair with sensible defaults.

    Passing boosts makes the pair boosted (xybk); without them it is a
    constant product pair with boosts (1, 1).
    """
    curve = CurveMode.CONSTANT_PRODUCT if boost0 is None else CurveMode.BOOSTED
    return Pair(
        TokenAmount(token_a, int(reserve_a)),
        TokenAmount(token_b, int(reserve_b)),
        curve=curve,
        fee_bps=fee_bps,
        boost0=boost0 if boost0 is not None else 1,
        boost1=boost1 if boost1 is not None else (boost0 if boost0 is not None else 1),
        trade_state=trade_state,
    )


def within(actual: int, expected: int, tolerance: int = 5) -> bool:
    """Check that actual is within +/- tolerance units of expected."""
    return abs(actual - expected) <= tolerance


__all__ = ["make_pair", "within"]
