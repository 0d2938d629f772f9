"""Floor square root over arbitrary-precision integers."""

from __future__ import annotations


def isqrt(n: int) -> int:
    """Return the largest integer r such that r * r <= n.

    Binary search between 1 and (n >> 5) + 8. The upper seed is loose but
    never below the true root: sqrt(n) - n / 32 peaks at 8 (for n = 256).

    Args:
        n: Non-negative integer of any size

    Returns:
        floor(sqrt(n))

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"isqrt requires a non-negative integer, got {n}")

    lo = 1
    hi = (n >> 5) + 8
    while hi >= lo:
        mid = (lo + hi) >> 1
        if mid * mid > n:
            hi = mid - 1
        else:
            lo = mid + 1
    return lo - 1


__all__ = ["isqrt"]
