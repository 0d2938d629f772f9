"""Exact integer math for pair pricing.

- isqrt: floor square root over unbounded integers
- compute_sqrt_k: equilibrium point of the boosted (xybk) invariant
"""

from xybk.math.invariant import active_boost, artificial_liquidity_term, compute_sqrt_k
from xybk.math.sqrt import isqrt

__all__ = [
    "isqrt",
    "active_boost",
    "artificial_liquidity_term",
    "compute_sqrt_k",
]
