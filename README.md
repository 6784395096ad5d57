# drillbook

A small collection of classic algorithm exercises: integer puzzles, a string
check, hash-based lookups, in-place list manipulation, majority voting and the
maximum-sum subarray. It is meant for study and for checking your own answers.
It has no dependencies.

## Installation

```
pip install drillbook
```

## Modules

### `drillbook.integers`

- `reverse_integer(x)`: reverses the decimal digits of `x`, keeping its sign;
  returns 0 if the result does not fit in a signed 32-bit integer.
- `is_palindrome_number(x)`: whether `x` reads the same both ways in base 10
  (negative numbers never do).
- `is_armstrong(n)`: whether `n` equals the sum of its digits each raised to
  the number of digits.
- `fib_recursive(n)`, `fib_iterative(n)`: the `n`-th Fibonacci number, by plain
  recursion (exponential time) or in linear time. A negative `n` raises
  `ValueError`.

### `drillbook.text`

- `is_palindrome(s)`: whether `s` is a palindrome once everything except ASCII
  letters and digits is dropped and case is ignored.

### `drillbook.hashing`

- `two_sum(nums, target)`: indices `[i, j]`, `i < j`, of two values summing to
  `target`, or `[]` if there are none.
- `intersection(nums1, nums2)`: the distinct values found in both inputs, in
  ascending order.
- `subarray_sum(nums, k)`: how many non-empty contiguous subarrays sum to `k`.

### `drillbook.arrays`

These change the list they are given, in place:

- `remove_duplicates(nums)`: compacts the distinct values of a sorted list to
  its front and returns their count `k`; elements past `k` are left as they were.
- `rotate(nums, k)`: rotates right by `k` steps (`k` is taken modulo the
  length); an empty list raises `ValueError`.
- `move_zeroes(nums)`: moves every zero to the end, keeping the order of the rest.
- `merge(nums1, m, nums2, n)`: merges sorted `nums2[:n]` into sorted
  `nums1[:m]`, filling `nums1[:m + n]`. Raises `ValueError` if `m` or `n` is
  negative or either list is too short.
- `sort_colors_counting(nums)`: sorts 0s, 1s and 2s by counting; any other value
  is counted as a 2.
- `sort_colors(nums)`: sorts 0s, 1s and 2s in one Dutch-flag pass; other values
  are kept and gathered at the end.

These only read the list:

- `missing_number(nums)`: the one value of `0..len(nums)` absent from `nums`.
- `check_sorted_rotated(nums)`: whether `nums` is a non-decreasing list rotated
  by some amount.
- `find_max_consecutive_ones(nums)`: the length of the longest run of 1s.

### `drillbook.majority`

- `majority_element_counting(nums)`: the value occurring more than
  `len(nums) // 2` times, or 0 if there is none.
- `majority_element(nums)`: the majority value by Boyer-Moore voting. The
  result is not verified, so it is only meaningful when a majority exists. An
  empty input raises `ValueError`.

### `drillbook.subarrays`

- `max_subarray_brute(nums)`: the largest sum of a non-empty contiguous
  subarray, trying every start.
- `max_subarray(nums)`: the same in linear time (Kadane's algorithm).
- `max_subarray_span(nums)`: a `Span` named tuple `(total, start, end)` with the
  best sum and its inclusive indices; among equal sums the one ending first wins.

All three raise `ValueError` on an empty input.

## Examples

```python
from drillbook.integers import reverse_integer, is_armstrong
from drillbook.text import is_palindrome
from drillbook.hashing import two_sum
from drillbook.arrays import rotate, merge
from drillbook.subarrays import max_subarray_span

reverse_integer(123)                             # 321
reverse_integer(1534236469)                      # 0, the result would overflow 32 bits
is_armstrong(153)                                # True
is_palindrome("A man, a plan, a canal: Panama")  # True
two_sum([2, 7, 11, 15], 9)                       # [0, 1]

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)
nums                       # [5, 6, 7, 1, 2, 3, 4]

nums1 = [1, 2, 3, 0, 0, 0]
merge(nums1, 3, [2, 5, 6], 3)
nums1                      # [1, 2, 2, 3, 5, 6]

max_subarray_span([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # Span(total=6, start=3, end=6)
```

## What it does not do

There is no command-line program and nothing reads from standard input: the
functions are meant to be imported and called from your own code or tests.

## Running the tests

```
pip install drillbook[test]
pytest
```