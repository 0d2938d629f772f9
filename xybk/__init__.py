"""xybk - exact-integer pricing for constant product and boosted pairs."""

from xybk.amm import CurveMode, Pair, SwapResult, TradeState, xybk_amm
from xybk.config import DEFAULT_PAIR_CONFIG, PairConfig
from xybk.math import compute_sqrt_k, isqrt
from xybk.models import Price, Token, TokenAmount

__version__ = "0.1.0"
__all__ = [
    "Pair",
    "CurveMode",
    "TradeState",
    "SwapResult",
    "xybk_amm",
    "PairConfig",
    "DEFAULT_PAIR_CONFIG",
    "compute_sqrt_k",
    "isqrt",
    "Token",
    "TokenAmount",
    "Price",
    "__version__",
]
