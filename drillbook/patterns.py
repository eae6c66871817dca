"""Star patterns drawn as text."""

from __future__ import annotations

from collections.abc import Callable, Iterable


def _draw(rows: int, columns: Iterable[int], filled: Callable[[int, int], bool]) -> str:
    columns = list(columns)
    return "\n".join(
        "".join("*" if filled(i, j) else " " for j in columns)
        for i in range(1, rows + 1)
    )


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"number of lines must not be negative, got {n}")


def pattern_1(n: int) -> str:
    """Right-aligned triangle shrinking from ``n`` stars to one."""
    _check(n)
    return _draw(n, range(n, 0, -1), lambda i, j: j >= i)


def pattern_2(n: int) -> str:
    """Left-aligned triangle growing from one star to ``n``."""
    _check(n)
    return _draw(n, range(1, n + 1), lambda i, j: j <= i)


def pattern_3(n: int) -> str:
    """An X whose arms are ``n`` stars long."""
    _check(n)
    size = 2 * n - 1
    return _draw(size, range(1, size + 1), lambda i, j: i == j or i == 2 * n - j)


def pattern_4(n: int) -> str:
    """A pyramid of ``n`` rows."""
    _check(n)
    return _draw(n, range(1, 2 * n + 2), lambda i, j: n - i + 1 <= j <= n + i - 1)


def pattern_5(n: int) -> str:
    """A diamond ``2n - 1`` rows high."""
    _check(n)

    def filled(i: int, j: int) -> bool:
        k = i if i <= n else 2 * n - i
        return n - k + 1 <= j <= n + k - 1

    size = 2 * n - 1
    return _draw(size, range(1, size + 1), filled)


PATTERNS: dict[int, Callable[[int], str]] = {
    1: pattern_1,
    2: pattern_2,
    3: pattern_3,
    4: pattern_4,
    5: pattern_5,
}


def pattern(number: int, n: int) -> str:
    """Draw pattern ``number`` (1 to 5) with ``n`` lines."""
    try:
        draw = PATTERNS[number]
    except KeyError:
        raise ValueError(f"no pattern {number}; choose 1 to {len(PATTERNS)}") from None
    return draw(n)