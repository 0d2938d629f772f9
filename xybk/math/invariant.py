"""Boosted (xybk) invariant solver.

The boosted curve treats a pair with real reserves (r0, r1) as a constant
product pool over virtual reserves shifted by an artificial liquidity term:

    (r0 + (b - 1) * sqrtK) * (r1 + (b - 1) * sqrtK) = (b * sqrtK) ** 2

where b is the boost of the side currently holding the larger reserve. At
the equilibrium point (sqrtK, sqrtK) the virtual and real price agree, and
liquidity is concentrated around it by a factor of b.

Solving the quadratic for sqrtK with beta = b - 1:

    term = beta * (r0 + r1) / (2 * (2 * beta + 1))
    sqrtK = term + sqrt(term ** 2 + r0 * r1 / (2 * beta + 1))

Each division floors. Reserves are scaled by SQRT_K_PRECISION before solving
so the floors land ten digits below the result; the remaining drift versus
the exact rational root is a few units and deployed pairs depend on it, so
the order of operations here must not change.
"""

from __future__ import annotations

from xybk.constants import CONSTANT_PRODUCT_SQRT_K, SQRT_K_PRECISION
from xybk.math.sqrt import isqrt
from xybk.safe_int import S


def active_boost(reserve0: int, reserve1: int, boost0: int, boost1: int) -> int:
    """Boost applied at the current reserves.

    boost0 governs while reserve0 is strictly larger; otherwise (ties
    included) boost1 does.
    """
    return boost0 if reserve0 > reserve1 else boost1


def compute_sqrt_k(reserve0: int, reserve1: int, boost0: int, boost1: int) -> int:
    """Compute the equilibrium quantity sqrtK of a boosted pair.

    With an active boost of 1 the pair prices as constant product and sqrtK
    is the sentinel CONSTANT_PRODUCT_SQRT_K, as deployed pairs store it.

    Args:
        reserve0: Raw reserve of token0
        reserve1: Raw reserve of token1
        boost0: Boost used while reserve0 > reserve1
        boost1: Boost used otherwise

    Returns:
        sqrtK as an integer (floored)
    """
    boost = active_boost(reserve0, reserve1, boost0, boost1)
    if boost == 1:
        return CONSTANT_PRODUCT_SQRT_K

    amount0 = S(reserve0) * SQRT_K_PRECISION
    amount1 = S(reserve1) * SQRT_K_PRECISION

    term = (S(boost - 1) * (amount0 + amount1)) // (boost * 4 - 2)
    radicand = (amount0 * amount1) // (boost * 2 - 1) + term**2

    return ((S(isqrt(radicand.value)) + term) // SQRT_K_PRECISION).value


def artificial_liquidity_term(boost: int, sqrt_k: int) -> int:
    """Virtual liquidity (boost - 1) * sqrtK added to both reserves."""
    return (S(boost - 1) * sqrt_k).value


__all__ = ["active_boost", "compute_sqrt_k", "artificial_liquidity_term"]
