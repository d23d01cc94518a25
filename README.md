# algokata

A collection of classic algorithm exercises written as plain Python functions
and small classes. It has no dependencies beyond the standard library.

## Installation

```
pip install algokata
```

## Modules

### `algokata.arrays`

Problems over lists of integers and integer grids:
`height_checker`, `product_except_self`, `move_zeroes` (rearranges the list
in place and returns `None`), `increasing_triplet`, `erase_overlap_intervals`,
`find_min_arrow_shots`, `can_place_flowers` (works on a copy of the bed),
`pivot_index` (returns `-1` when there is none), `asteroid_collision`,
`daily_temperatures`, `unique_occurrences`, `kids_with_candies`,
`max_operations`, `largest_altitude`, `find_difference` (returns both
differences sorted), `equal_pairs`, `find_median_sorted_arrays`, `plus_one`
(returns a new list), `find_diagonal_order` and `two_sum` (returns `[]` when
no pair exists).

`max_operations` counts from element frequencies: every element after the
first adds the smaller of its own count and its complement's count.

### `algokata.strings`

`reverse_words`, `reverse_vowels`, `is_subsequence`, `decode_string`,
`compress` (run-length encodes a list of characters in place and returns the
encoded length), `predict_party_victory` (returns `"Radiant"` or `"Dire"`),
`gcd_of_strings`, `close_strings`, `merge_alternately`, `remove_stars`,
`longest_palindrome` (the rightmost of several longest palindromes wins),
`convert` (zigzag), `is_match` (whole-string matching with `.` and `*`) and
`roman_to_int` (unknown characters count as 0).

### `algokata.windows`

Sliding-window and two-pointer problems: `longest_ones`, `longest_subarray`,
`max_area`, `find_max_average`, `max_vowels` (lowercase vowels only) and
`length_of_longest_substring`.

### `algokata.linked_lists`

A `ListNode` dataclass (iterating over a node yields the values from it to
the end), the helpers `from_values` and `to_values`, and `delete_node`,
`reverse_list`, `odd_even_list`, `delete_middle`, `pair_sum` and
`add_two_numbers`. All but `add_two_numbers` relink the given nodes.

### `algokata.trees`

A `TreeNode` dataclass with `largest_values`, `max_depth`, `leaf_similar`
and `good_nodes`.

### `algokata.numbers`

`hamming_weight` and `hamming_distance` (on 32-bit two's-complement words),
`can_win_nim`, `new21_game`, `reverse_integer`, `is_palindrome`,
`get_permutation` (counting wraps to the first permutation after the last)
and `max_points`.

### `algokata.sampling`

`Rand10`, whose `rand10` is built from two `rand7` draws by rejection, and
`CirclePointGenerator`, whose `rand_point` returns `[x, y]` uniformly from
inside a circle. Both take an optional `random.Random` instance so results
can be reproduced.

### `algokata.streams`

Online classes fed one value at a time: `StockSpanner.next(price)` returns
the price's span, and `RecentCounter.ping(t)` returns how many pings fall in
`[t - 3000, t]`.

## Errors

Where an input has no meaningful answer, a `ValueError` is raised:
`good_nodes` on an empty tree, `kids_with_candies` with no kids,
`find_median_sorted_arrays` with two empty lists, `find_max_average` when
`k` is not between 1 and the length, `longest_ones` and `max_vowels` with a
negative `k`, `convert` with fewer than one row, `is_match` with a pattern
starting with `*`, and `decode_string` with an unbalanced `]`.

## Examples

```python
from algokata.arrays import two_sum
from algokata.strings import decode_string
from algokata.linked_lists import from_values, reverse_list, to_values
from algokata.streams import RecentCounter

two_sum([2, 7, 11, 15], 9)          # [0, 1]
decode_string("3[a2[c]]")           # "accaccacc"
to_values(reverse_list(from_values([1, 2, 3])))  # [3, 2, 1]

counter = RecentCounter()
[counter.ping(t) for t in (1, 100, 3001, 3002)]  # [1, 2, 3, 3]
```

```python
import random
from algokata.sampling import CirclePointGenerator

gen = CirclePointGenerator(1.0, 0.0, 0.0, random.Random(42))
x, y = gen.rand_point()
```

## What it does not do

The package is a library only: it has no command-line program and prints
nothing. Call the functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```