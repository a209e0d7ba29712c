"""Maximum subarray sum and fast exponentiation."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["max_subarray_sum", "power"]


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one number")
    return best


def power(x, n: int):
    """Return ``x`` raised to a non-negative integer ``n`` by repeated squaring."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    result = 1
    while n > 0:
        if n % 2:
            result *= x
            n -= 1
        else:
            n //= 2
            x *= x
    return result