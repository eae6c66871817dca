"""Every way of paying an amount out in bank notes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

DENOMINATIONS = (200, 100, 50, 20, 10, 5, 1)


@dataclass(frozen=True)
class Withdrawal:
    """Note counts, one per entry of ``DENOMINATIONS``."""

    counts: tuple[int, ...]

    def __post_init__(self) -> None:
        counts = tuple(self.counts)
        if len(counts) != len(DENOMINATIONS):
            raise ValueError(
                f"expected {len(DENOMINATIONS)} counts, got {len(counts)}"
            )
        if any(count < 0 for count in counts):
            raise ValueError("note counts must not be negative")
        object.__setattr__(self, "counts", counts)

    def total(self) -> int:
        """The amount these notes add up to."""
        return sum(count * value for count, value in zip(self.counts, DENOMINATIONS))

    @property
    def notes(self) -> dict[int, int]:
        """Denomination to count, for the denominations used."""
        return {
            value: count
            for value, count in zip(DENOMINATIONS, self.counts)
            if count
        }


def _combinations(remaining: int, values: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
    value, rest = values[0], values[1:]
    if not rest:
        if remaining % value == 0:
            yield (remaining // value,)
        return
    for count in range(remaining // value + 1):
        for tail in _combinations(remaining - count * value, rest):
            yield (count, *tail)


def enumerate_withdrawals(amount: int) -> Iterator[Withdrawal]:
    """Yield every way to pay ``amount``, fewest large notes first."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    for counts in _combinations(amount, DENOMINATIONS):
        yield Withdrawal(counts)


def count_withdrawals(amount: int) -> int:
    """Number of distinct ways to pay ``amount``."""
    return sum(1 for _ in enumerate_withdrawals(amount))


def format_withdrawal(withdrawal: Withdrawal) -> str:
    """One line listing the notes used, smallest denomination first."""
    parts = [
        f"{count:5d} * [{value:<3}]"
        for value, count in zip(reversed(DENOMINATIONS), reversed(withdrawal.counts))
        if count
    ]
    return "  +".join(parts)