"""Problems over lists of integers and integer grids."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from itertools import accumulate
from typing import Sequence


def height_checker(heights: Sequence[int]) -> int:
    """Count positions where ``heights`` differs from its sorted order."""
    return sum(a != b for a, b in zip(heights, sorted(heights)))


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    result = [1] * len(nums)
    prefix = 1
    for i, num in enumerate(nums):
        result[i] = prefix
        prefix *= num
    suffix = 1
    for i in reversed(range(len(nums))):
        result[i] *= suffix
        suffix *= nums[i]
    return result


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    last_non_zero = 0
    for i, num in enumerate(nums):
        if num != 0:
            nums[last_non_zero], nums[i] = nums[i], nums[last_non_zero]
            last_non_zero += 1


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Tell whether some i < j < k has nums[i] < nums[j] < nums[k]."""
    first = second = math.inf
    for num in nums:
        if num <= first:
            first = num
        elif num <= second:
            second = num
        else:
            return True
    return False


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Return the fewest intervals to drop so the rest do not overlap."""
    count = 0
    end = -math.inf
    for start, stop in sorted(intervals, key=lambda interval: interval[1]):
        if start < end:
            count += 1
        else:
            end = stop
    return count


def find_min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Return the fewest vertical arrows that burst every balloon."""
    if not points:
        return 0
    ordered = sorted(points, key=lambda point: point[1])
    arrows = 1
    end = ordered[0][1]
    for start, stop in ordered:
        if start > end:
            arrows += 1
            end = stop
    return arrows


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit with no two in adjacent plots."""
    bed = list(flowerbed)
    last = len(bed) - 1
    count = 0
    for i, plot in enumerate(bed):
        if (
            plot == 0
            and (i == 0 or bed[i - 1] == 0)
            and (i == last or bed[i + 1] == 0)
        ):
            bed[i] = 1
            count += 1
    return count >= n


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums match, or -1."""
    total = sum(nums)
    left = 0
    for i, num in enumerate(nums):
        if left == total - left - num:
            return i
        left += num
    return -1


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids left after all collisions."""
    survivors: list[int] = []
    for asteroid in asteroids:
        destroyed = False
        while survivors and survivors[-1] > 0 and asteroid < 0:
            if survivors[-1] < -asteroid:
                survivors.pop()
                continue
            if survivors[-1] == -asteroid:
                survivors.pop()
            destroyed = True
            break
        if not destroyed:
            survivors.append(asteroid)
    return survivors


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Return, for each day, how many days until a warmer one (0 if none)."""
    result = [0] * len(temperatures)
    pending: list[int] = []
    for i, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            idx = pending.pop()
            result[idx] = i - idx
        pending.append(i)
    return result


def unique_occurrences(arr: Sequence[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(set(counts)) == len(counts)


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Tell for each kid whether the extra candies give them the most."""
    if not candies:
        raise ValueError("kids_with_candies needs at least one kid")
    most = max(candies)
    return [candy + extra_candies >= most for candy in candies]


def max_operations(nums: Sequence[int], k: int) -> int:
    """Count pairings summing to ``k`` from element frequencies.

    Every element after the first contributes the smaller of its own count
    and the count of its complement.
    """
    freq = Counter(nums)
    return sum(
        min(freq[num], freq[k - num])
        for num in nums[1:]
        if freq[num] > 0 and freq[k - num] > 0
    )


def largest_altitude(gain: Sequence[int]) -> int:
    """Return the highest altitude reached, starting from 0."""
    return max(accumulate(gain, initial=0))


def find_difference(nums1: Sequence[int], nums2: Sequence[int]) -> list[list[int]]:
    """Return the distinct values only in ``nums1`` and only in ``nums2``."""
    set1, set2 = set(nums1), set(nums2)
    return [sorted(set1 - set2), sorted(set2 - set1)]


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Count (row, column) pairs of a square grid holding the same values."""
    rows = [list(row) for row in grid]
    columns = [list(column) for column in zip(*grid)]
    return sum(row == column for row in rows for column in columns)


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted lists."""
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        raise ValueError("the median of no values is undefined")
    half, odd = divmod(len(merged), 2)
    if odd:
        return float(merged[half])
    return (merged[half - 1] + merged[half]) / 2.0


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as its decimal digits, most significant first."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]


def find_diagonal_order(mat: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of the matrix in zigzag diagonal order."""
    if not mat or not mat[0]:
        return []
    m, n = len(mat), len(mat[0])
    result: list[int] = []
    for d in range(m + n - 1):
        rows = range(max(0, d - n + 1), min(d, m - 1) + 1)
        diagonal = [mat[r][d - r] for r in rows]
        if d % 2 == 0:
            diagonal.reverse()
        result.extend(diagonal)
    return result


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of two elements adding up to ``target``, or []."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return [seen[complement], i]
        seen[num] = i
    return []