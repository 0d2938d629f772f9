"""Pair state, swap quoting and liquidity accounting."""

from xybk.amm.base import AMM, SwapResult
from xybk.amm.liquidity import get_liquidity_minted, get_liquidity_value
from xybk.amm.pair import CurveMode, Pair, TradeState
from xybk.amm.parsing import parse_pair_snapshot
from xybk.amm.xybk import XybkAMM, xybk_amm

__all__ = [
    # Base classes
    "AMM",
    "SwapResult",
    # Pair state
    "Pair",
    "CurveMode",
    "TradeState",
    "parse_pair_snapshot",
    # Quoting
    "XybkAMM",
    "xybk_amm",
    # Liquidity
    "get_liquidity_minted",
    "get_liquidity_value",
]
