"""Integer puzzles: bit counts, digits, permutations and geometry."""

from __future__ import annotations

import math
from collections import Counter
from itertools import islice
from typing import Iterator, Sequence

_WORD_MASK = 0xFFFFFFFF


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n`` taken as a 32-bit two's-complement word."""
    return bin(n & _WORD_MASK).count("1")


def can_win_nim(n: int) -> bool:
    """Tell whether the first player wins Nim with ``n`` stones, taking 1-3."""
    return n % 4 != 0


def hamming_distance(x: int, y: int) -> int:
    """Count the bit positions where two 32-bit words differ."""
    return hamming_weight(x ^ y)


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Return the chance of ending with at most ``n`` points.

    Points are drawn uniformly from 1 to ``max_pts`` while the total is
    below ``k``.
    """
    if k == 0 or n >= k + max_pts:
        return 1.0
    dp = [0.0] * (n + 1)
    dp[0] = 1.0
    window = 1.0
    result = 0.0
    for i in range(1, n + 1):
        dp[i] = window / max_pts
        if i < k:
            window += dp[i]
        else:
            result += dp[i]
        if i >= max_pts:
            window -= dp[i - max_pts]
    return result


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign."""
    sign = -1 if x < 0 else 1
    return sign * int(str(abs(x))[::-1])


def is_palindrome(x: int) -> bool:
    """Tell whether ``x`` reads the same forwards and backwards in decimal."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def _next_permutation(chars: list[str]) -> None:
    """Rearrange ``chars`` into the next permutation, wrapping to the first."""
    pivot = len(chars) - 2
    while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        swap = len(chars) - 1
        while chars[swap] <= chars[pivot]:
            swap -= 1
        chars[pivot], chars[swap] = chars[swap], chars[pivot]
    chars[pivot + 1 :] = reversed(chars[pivot + 1 :])


def _permutation_cycle(chars: list[str]) -> Iterator[str]:
    current = list(chars)
    while True:
        yield "".join(current)
        _next_permutation(current)


def get_permutation(n: int, k: int) -> str:
    """Return the ``k``-th permutation, in lexicographic order, of "12...n".

    Counting wraps around to the first permutation after the last one.
    """
    start = list("".join(str(i) for i in range(1, n + 1)))
    return next(islice(_permutation_cycle(start), max(k - 1, 0), None))


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Return the most points lying on one straight line.

    Coincident points are counted as lying on a vertical line through the
    point being examined.
    """
    if len(points) < 2:
        return len(points)
    best = 0
    for i, (xi, yi) in enumerate(points):
        slopes: Counter[float] = Counter()
        for j, (xj, yj) in enumerate(points):
            if i == j:
                continue
            dx = xj - xi
            slopes[math.inf if dx == 0 else (yj - yi) / dx] += 1
        best = max(best, max(slopes.values(), default=0) + 1)
    return best