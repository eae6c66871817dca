"""Integer and arithmetic exercises."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

PI = 3.1416

# Closed loops drawn by each decimal digit.
_HOLES = {"0": 1, "4": 1, "6": 1, "9": 1, "8": 2}


def _require_non_negative(value: int, name: str = "n") -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def count_holes(n: int) -> int:
    """Count the closed loops drawn by the decimal digits of ``n``."""
    _require_non_negative(n)
    return sum(_HOLES.get(digit, 0) for digit in str(n))


def sum_between(a: int, b: int) -> int:
    """Sum the integers strictly between ``a`` and ``b``, in either order."""
    low, high = sorted((a, b))
    return sum(range(low + 1, high))


def remainder(dividend: int, divisor: int) -> int:
    """Remainder found by repeated subtraction of a positive divisor."""
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")
    if dividend < divisor:
        return dividend
    return dividend % divisor


def is_power_of_two(n: int) -> bool:
    """True when ``n`` is 1, 2, 4, 8, ..."""
    return n > 0 and n & (n - 1) == 0


def is_perfect_square(n: int) -> bool:
    """True when ``n`` is the square of a non-negative integer."""
    return n >= 0 and math.isqrt(n) ** 2 == n


def is_power_of_three(n: int) -> bool:
    """True for 3, 9, 27, ...; 3 to the power zero does not count."""
    while n > 3 and n % 3 == 0:
        n //= 3
    return n == 3


def largest_proper_divisor(n: int) -> int | None:
    """The largest divisor of ``n`` between 2 and ``n // 2``, or None."""
    return next((i for i in range(n // 2, 1, -1) if n % i == 0), None)


def is_prime(n: int) -> bool:
    """True when no divisor between 2 and ``n // 2`` exists.

    Numbers below 4 have no such divisor, so they are reported as prime.
    """
    return largest_proper_divisor(n) is None


def proper_divisors(n: int) -> list[int]:
    """The divisors of ``n`` from ``n // 2`` down to 2."""
    return [i for i in range(n // 2, 1, -1) if n % i == 0]


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of a non-negative integer."""
    _require_non_negative(n)
    reversed_value = 0
    while n > 0:
        n, digit = divmod(n, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of a non-negative integer."""
    _require_non_negative(n)
    return sum(int(digit) for digit in str(n))


def power(base: int, exponent: int) -> int:
    """``base`` multiplied by itself ``exponent`` times; 1 when exponent <= 0."""
    return base**exponent if exponent > 0 else 1


def multiply(a: int, b: int) -> int:
    """Multiply two integers by shifting and adding."""
    negative = (a < 0) != (b < 0)
    a, b = abs(a), abs(b)
    product = 0
    shift = 0
    while a:
        if a & 1:
            product += b << shift
        a >>= 1
        shift += 1
    return -product if negative else product


def sum_series(start: int, end: int) -> int:
    """Sum of the arithmetic series ``start, start + 1, ..., end``."""
    return (end - start + 1) * (start + end) // 2


def circle_area(radius: float) -> float:
    """Area of a circle, using 3.1416 for pi."""
    return PI * radius * radius


def circle_circumference(radius: float) -> float:
    """Circumference of a circle, using 3.1416 for pi."""
    return PI * 2 * radius


def fibonacci(n: int) -> int:
    """The value reached after ``n`` steps from the pair (0, 1): 1, 1, 2, 3, 5, ..."""
    _require_non_negative(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current


def fibonacci_sum(n: int) -> int:
    """Sum of ``fibonacci(k)`` for ``k`` below ``n``."""
    _require_non_negative(n)
    return sum(fibonacci(k) for k in range(n))


def catalan_numbers(n: int) -> list[int]:
    """The first ``n`` Catalan numbers."""
    if n <= 0:
        return []
    numbers = [1, 1]
    while len(numbers) < n:
        numbers.append(sum(x * y for x, y in zip(numbers, reversed(numbers))))
    return numbers[:n]


def generate_primes(count: int) -> list[int]:
    """The first ``count`` prime numbers."""
    primes: list[int] = []
    candidate = 2
    while len(primes) < count:
        if all(candidate % prime for prime in primes):
            primes.append(candidate)
        candidate += 1
    return primes


def max_xor(low: int, high: int) -> int:
    """Largest ``i ^ j`` over ``low <= i <= j <= high``; 0 for an empty range."""
    pairs = (i ^ j for i in range(low, high + 1) for j in range(i, high + 1))
    return max(pairs, default=0)


def running_even_sums(numbers: Iterable[int]) -> Iterator[int]:
    """Yield the running sum of even inputs after each input.

    Stops after two odd numbers in a row.
    """
    total = 0
    odd_streak = 0
    for number in numbers:
        if number % 2:
            odd_streak += 1
        else:
            total += number
            odd_streak = 0
        yield total
        if odd_streak >= 2:
            return