"""Exercises on lists of integers: searching, counting and rearranging."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import chain, groupby, islice
from operator import itemgetter, xor
from typing import NamedTuple


class Extremes(NamedTuple):
    """Smallest and largest value, each with the index of its last occurrence."""

    minimum: int
    min_index: int
    maximum: int
    max_index: int


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("values must not be empty")


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with ``values`` in ascending order, sorted by bubble sort."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
    return result


def biggest_difference(values: Iterable[int]) -> int:
    """Largest ``later - earlier`` over pairs where the later value is bigger; else 0."""
    best = 0
    lowest: int | None = None
    for value in values:
        if lowest is None or value < lowest:
            lowest = value
        best = max(best, value - lowest)
    return best


def longest_run(values: Iterable[int]) -> tuple[int, int]:
    """The value and length of the longest run of equal neighbours.

    On a tie the earliest run wins.
    """
    best: tuple[int, int] | None = None
    for value, group in groupby(values):
        length = sum(1 for _ in group)
        if best is None or length > best[1]:
            best = (value, length)
    if best is None:
        raise ValueError("values must not be empty")
    return best


def find_missing(values: Sequence[int]) -> int:
    """The number absent from ``values``, which hold 0..len(values) but one."""
    size = len(values)
    return size * (size + 1) // 2 - sum(values)


def find_unpaired(values: Iterable[int]) -> int:
    """The value that occurs an odd number of times when all others are paired."""
    return reduce(xor, values, 0)


def find_unpaired_sorted(values: Sequence[int]) -> int | None:
    """Binary search a sorted list of pairs for its single unpaired value.

    Returns None when every value is paired.
    """

    def same(i: int, j: int) -> bool:
        return 0 <= j < len(values) and values[i] == values[j]

    first, last = 0, len(values) - 1
    while first <= last:
        middle = (first + last) // 2
        if middle % 2 == 0:
            partner, other = middle + 1, middle - 1
        else:
            partner, other = middle - 1, middle + 1
        if same(middle, partner):
            first = middle + 1
        elif same(middle, other):
            last = middle - 1
        else:
            return values[middle]
    return None


def longest_run_of(values: Iterable[int], target: int) -> int:
    """Length of the longest unbroken run of ``target``; 0 when it is absent."""
    return max(
        (sum(1 for _ in group) for value, group in groupby(values) if value == target),
        default=0,
    )


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """The smallest and largest of ``values``."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in iterator:
        smallest = min(smallest, value)
        largest = max(largest, value)
    return smallest, largest


def merge_alternating(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Interleave two lists, then append what is left of the longer one."""
    shared = min(len(first), len(second))
    merged = list(chain.from_iterable(zip(first, second)))
    merged.extend(first[shared:])
    merged.extend(second[shared:])
    return merged


def find_duplicate(values: Sequence[int]) -> int:
    """The repeated number in a list holding 1..n plus one duplicate."""
    if len(values) < 2:
        raise ValueError("values must hold at least two numbers")
    size = len(values) - 1
    return sum(values) - size * (size + 1) // 2


def most_frequent_small(values: Sequence[int]) -> int:
    """Most frequent value in -128..127; the smallest such value on a tie."""
    _require_values(values)
    out_of_range = [value for value in values if not -128 <= value <= 127]
    if out_of_range:
        raise ValueError(f"values must lie in -128..127, got {out_of_range[0]}")
    counts = Counter(values)
    return min(counts, key=lambda value: (-counts[value], value))


def most_repeated_digit_run(digits: Iterable[int]) -> tuple[int, int]:
    """The digit and length of the longest run of equal neighbouring digits."""
    digits = list(digits)
    for digit in digits:
        if not 0 <= digit <= 9:
            raise ValueError(f"expected a single digit, got {digit}")
    return longest_run(digits)


def most_repeated(values: Sequence[int]) -> tuple[int, int]:
    """The most frequent value and its count; the first to appear wins a tie."""
    _require_values(values)
    return max(Counter(values).items(), key=itemgetter(1))


def remove_adjacent_duplicates(values: Iterable[int]) -> list[int]:
    """Collapse each run of equal neighbours to one value."""
    return [value for value, _ in groupby(values)]


def prefix_before(values: Sequence[int], target: int) -> list[int]:
    """The values before the first occurrence of ``target``."""
    try:
        index = list(values).index(target)
    except ValueError:
        raise ValueError(f"{target} is not in values") from None
    return list(values[:index])


def numbers_between(a: int, b: int) -> list[int]:
    """The integers strictly between ``a`` and ``b``, ascending, in either order."""
    low, high = sorted((a, b))
    return list(range(low + 1, high))


def reverse_list(values: Iterable[int]) -> list[int]:
    """A new list with ``values`` in reverse order."""
    return list(values)[::-1]


def last_index(values: Sequence[int], target: int) -> int | None:
    """Index of the last occurrence of ``target``, or None."""
    return next(
        (index for index in range(len(values) - 1, -1, -1) if values[index] == target),
        None,
    )


def search_min_max(values: Sequence[int]) -> Extremes:
    """Smallest and largest value, each with the index where it last occurs."""
    _require_values(values)
    minimum = maximum = values[0]
    min_index = max_index = 0
    for index, value in enumerate(values):
        if value >= maximum:
            maximum, max_index = value, index
        if value <= minimum:
            minimum, min_index = value, index
    return Extremes(minimum, min_index, maximum, max_index)


def second_largest(values: Iterable[int]) -> int:
    """The second value in descending order; duplicates of the maximum count."""
    top = heapq.nlargest(2, values)
    if len(top) < 2:
        raise ValueError("values must hold at least two numbers")
    return top[1]


def nth_largest(values: Iterable[int], n: int) -> int:
    """The ``n``-th largest distinct value, or the smallest when there are fewer."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    distinct = sorted(set(values), reverse=True)
    if not distinct:
        raise ValueError("values must not be empty")
    return distinct[min(n, len(distinct)) - 1]


def swap_after_zeros(values: Sequence[int]) -> list[int]:
    """Swap the three values after the first zero with the three after the second."""
    result = list(values)
    zeros = list(islice((i for i, value in enumerate(result) if value == 0), 2))
    if len(zeros) < 2:
        raise ValueError("values must hold at least two zeros")
    first, second = zeros
    if second + 3 >= len(result):
        raise ValueError("three values must follow the second zero")
    for offset in range(1, 4):
        a, b = second + offset, first + offset
        result[a], result[b] = result[b], result[a]
    return result


def swap_prefixes(
    first: Sequence[int], second: Sequence[int]
) -> tuple[list[int], list[int]]:
    """Exchange the leading elements of two lists, as many as the shorter holds."""
    shared = min(len(first), len(second))
    return (
        list(second[:shared]) + list(first[shared:]),
        list(first[:shared]) + list(second[shared:]),
    )