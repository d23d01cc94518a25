"""Sliding-window and two-pointer problems over sequences and strings."""

from __future__ import annotations

from typing import Iterator, Sequence

_VOWELS = frozenset("aeiou")


def _zero_limited_windows(nums: Sequence[int], max_zeros: int) -> Iterator[tuple[int, int]]:
    """Yield (left, right) for the widest window ending at each right edge
    that holds at most ``max_zeros`` zeros."""
    left = 0
    zeros = 0
    for right, num in enumerate(nums):
        if num == 0:
            zeros += 1
        while zeros > max_zeros:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        yield left, right


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones possible after flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    return max(
        (right - left + 1 for left, right in _zero_limited_windows(nums, k)),
        default=0,
    )


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the longest run of ones after deleting exactly one element."""
    return max(
        (right - left for left, right in _zero_limited_windows(nums, 1)),
        default=0,
    )


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest average of a contiguous block of ``k`` elements."""
    if not 0 < k <= len(nums):
        raise ValueError("k must lie between 1 and the number of elements")
    window = sum(nums[:k])
    best = window
    for incoming, outgoing in zip(nums[k:], nums):
        window += incoming - outgoing
        best = max(best, window)
    return best / k


def max_vowels(s: str, k: int) -> int:
    """Return the most lowercase vowels found in any substring of length ``k``."""
    if k < 0:
        raise ValueError("k must not be negative")
    best = 0
    current = 0
    for i, char in enumerate(s):
        if char in _VOWELS:
            current += 1
        if i >= k and s[i - k] in _VOWELS:
            current -= 1
        best = max(best, current)
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    best = 0
    start = 0
    for end, char in enumerate(s):
        if char in last_seen:
            start = max(start, last_seen[char] + 1)
        last_seen[char] = end
        best = max(best, end - start + 1)
    return best