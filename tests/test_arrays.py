import math
import statistics

import pytest

from algokata.arrays import (
    asteroid_collision,
    can_place_flowers,
    daily_temperatures,
    equal_pairs,
    erase_overlap_intervals,
    find_diagonal_order,
    find_difference,
    find_median_sorted_arrays,
    find_min_arrow_shots,
    height_checker,
    increasing_triplet,
    kids_with_candies,
    largest_altitude,
    max_operations,
    move_zeroes,
    pivot_index,
    plus_one,
    product_except_self,
    two_sum,
    unique_occurrences,
)


def test_height_checker_worked_example():
    assert height_checker([1, 1, 4, 2, 1, 3]) == 3


def test_height_checker_sorted_input_is_zero():
    heights = sorted([5, 1, 4, 2, 2, 9])
    assert height_checker(heights) == 0


def test_height_checker_does_not_mutate():
    heights = [3, 1, 2]
    height_checker(heights)
    assert heights == [3, 1, 2]


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [2, 5, 7, 3], [-1, 1, 3, -3]])
def test_product_except_self_times_self_is_total(nums):
    result = product_except_self(nums)
    total = math.prod(nums)
    assert [r * x for r, x in zip(result, nums)] == [total] * len(nums)


def test_product_except_self_with_zero():
    nums = [0, 4, 5]
    result = product_except_self(nums)
    assert result[0] == math.prod(nums[1:])
    assert result[1:] == [0, 0]


def test_move_zeroes_in_place():
    nums = [0, 1, 0, 3, 12]
    original = list(nums)
    assert move_zeroes(nums) is None
    non_zero = [x for x in original if x != 0]
    assert nums == non_zero + [0] * (len(original) - len(non_zero))


def test_increasing_triplet():
    assert increasing_triplet([1, 2, 3, 4, 5]) is True
    assert increasing_triplet([5, 4, 3, 2, 1]) is False
    assert increasing_triplet([2, 1, 5, 0, 4, 6]) is True
    assert increasing_triplet([]) is False


def test_erase_overlap_disjoint_needs_none():
    assert erase_overlap_intervals([[1, 2], [2, 3], [3, 4]]) == 0


def test_erase_overlap_identical_keeps_one():
    intervals = [[1, 2]] * 4
    assert erase_overlap_intervals(intervals) == len(intervals) - 1


def test_erase_overlap_does_not_mutate():
    intervals = [[1, 2], [2, 3], [3, 4], [1, 3]]
    before = [list(i) for i in intervals]
    erase_overlap_intervals(intervals)
    assert intervals == before


def test_find_min_arrow_shots():
    assert find_min_arrow_shots([]) == 0
    disjoint = [[1, 2], [3, 4], [5, 6], [7, 8]]
    assert find_min_arrow_shots(disjoint) == len(disjoint)
    shared = [[1, 5], [2, 6], [4, 9]]
    assert find_min_arrow_shots(shared) == 1
    assert find_min_arrow_shots([[1, 2], [2, 3]]) == 1


def test_can_place_flowers():
    bed = [1, 0, 0, 0, 1]
    assert can_place_flowers(bed, 1) is True
    assert can_place_flowers(bed, 2) is False
    assert bed == [1, 0, 0, 0, 1]
    assert can_place_flowers([], 0) is True


def test_pivot_index_worked_example():
    nums = [1, 7, 3, 6, 5, 6]
    i = pivot_index(nums)
    assert i == 3
    assert sum(nums[:i]) == sum(nums[i + 1 :])


def test_pivot_index_missing_and_leftmost():
    assert pivot_index([1, 2, 3]) == -1
    assert pivot_index([2, 1, -1]) == 0


def test_asteroid_collision():
    assert asteroid_collision([5, 10, -5]) == [5, 10]
    assert asteroid_collision([8, -8]) == []
    assert asteroid_collision([10, 2, -5]) == [10]
    assert asteroid_collision([-2, -1, 1, 2]) == [-2, -1, 1, 2]


def test_daily_temperatures_invariants():
    temps = [73, 74, 75, 71, 69, 72, 76, 73]
    result = daily_temperatures(temps)
    assert len(result) == len(temps)
    for i, wait in enumerate(result):
        if wait:
            assert temps[i + wait] > temps[i]
            assert all(t <= temps[i] for t in temps[i + 1 : i + wait])
        else:
            assert all(t <= temps[i] for t in temps[i + 1 :])


def test_daily_temperatures_never_warmer():
    temps = [90, 80, 80, 70]
    assert daily_temperatures(temps) == [0] * len(temps)


def test_unique_occurrences():
    assert unique_occurrences([1, 2, 2, 1, 1, 3]) is True
    assert unique_occurrences([1, 2]) is False


def test_kids_with_candies():
    assert kids_with_candies([2, 3, 5, 1, 3], 3) == [True, True, True, False, True]
    with pytest.raises(ValueError):
        kids_with_candies([], 3)


def test_max_operations_counts_from_frequencies():
    assert max_operations([1, 2, 3, 4], 5) == 3


def test_max_operations_without_pairs():
    assert max_operations([7], 14) == 0
    assert max_operations([1, 1, 1], 10) == 0


def test_largest_altitude():
    assert largest_altitude([-4, -3, -2]) == 0
    gain = [1, 2, 3]
    assert largest_altitude(gain) == sum(gain)
    assert largest_altitude([]) == 0


def test_find_difference():
    assert find_difference([1, 2, 3], [2, 4, 6]) == [[1, 3], [4, 6]]
    assert find_difference([1, 1, 2], [2, 2, 1]) == [[], []]


def test_equal_pairs():
    assert equal_pairs([[1, 2, 3], [4, 5, 6], [1, 2, 3]]) == 0
    symmetric = [[1, 2], [2, 3]]
    assert equal_pairs(symmetric) == len(symmetric)


@pytest.mark.parametrize(
    "nums1, nums2", [([1, 3], [2]), ([1, 2], [3, 4]), ([], [5]), ([0, 0], [0, 0])]
)
def test_median_matches_statistics(nums1, nums2):
    assert find_median_sorted_arrays(nums1, nums2) == statistics.median(nums1 + nums2)


def test_median_of_nothing_raises():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


@pytest.mark.parametrize(
    "digits", [[1, 2, 3], [4, 3, 2, 1], [9], [9, 9, 9], [0], [1, 9, 9], [9, 8, 9]]
)
def test_plus_one_adds_one(digits):
    result = plus_one(digits)
    value = int("".join(map(str, digits)))
    assert int("".join(map(str, result))) == value + 1
    assert all(0 <= d <= 9 for d in result)


def test_plus_one_carries_into_new_digit():
    assert plus_one([9, 9, 9]) == [1, 0, 0, 0]


@pytest.mark.parametrize("m, n", [(3, 3), (2, 4), (4, 2), (1, 5), (5, 1)])
def test_diagonal_order_walks_zigzag(m, n):
    mat = [[(r, c) for c in range(n)] for r in range(m)]
    order = find_diagonal_order(mat)
    assert sorted(order) == sorted(cell for row in mat for cell in row)
    assert order[0] == (0, 0)
    assert order[-1] == (m - 1, n - 1)
    for (r1, c1), (r2, c2) in zip(order, order[1:]):
        d1, d2 = r1 + c1, r2 + c2
        assert d2 in (d1, d1 + 1)
        if d1 == d2:
            step = -1 if d1 % 2 == 0 else 1
            assert r2 - r1 == step


def test_diagonal_order_empty():
    assert find_diagonal_order([]) == []
    assert find_diagonal_order([[]]) == []


def test_two_sum():
    nums = [2, 7, 11, 15]
    i, j = two_sum(nums, 9)
    assert i < j
    assert nums[i] + nums[j] == 9
    assert two_sum([1, 2], 10) == []