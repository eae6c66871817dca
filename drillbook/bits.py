"""Bit manipulation exercises on 32-bit and 8-bit integers."""

from __future__ import annotations

import string

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_SIGN_BIT = 1 << (_WORD_BITS - 1)


def _to_int32(value: int) -> int:
    value &= _WORD_MASK
    return value - (1 << _WORD_BITS) if value & _SIGN_BIT else value


def _check_bit(bit: int) -> None:
    if not 0 <= bit < _WORD_BITS:
        raise ValueError(f"bit must be in 0..{_WORD_BITS - 1}, got {bit}")


def set_bit(n: int, bit: int) -> int:
    """Return ``n`` with ``bit`` set, as a signed 32-bit value."""
    _check_bit(bit)
    return _to_int32(n | (1 << bit))


def clear_bit(n: int, bit: int) -> int:
    """Return ``n`` with ``bit`` cleared, as a signed 32-bit value."""
    _check_bit(bit)
    return _to_int32(n & ~(1 << bit))


def toggle_bit(n: int, bit: int) -> int:
    """Return ``n`` with ``bit`` flipped, as a signed 32-bit value."""
    _check_bit(bit)
    return _to_int32(n ^ (1 << bit))


def binary_string(n: int) -> str:
    """Binary digits of ``n`` as a 32-bit word, without leading zeros."""
    return format(n & _WORD_MASK, "b")


def count_ones(n: int) -> int:
    """Number of set bits in ``n`` taken as an unsigned 32-bit value."""
    return format(n & _WORD_MASK, "b").count("1")


def max_zero_gap(n: int) -> int:
    """Longest run of zero bits enclosed by one bits; 0 when ``n <= 0``."""
    if n <= 0:
        return 0
    bits = format(n, "b").rstrip("0")
    return max(len(run) for run in bits.split("1"))


def reverse_bits(n: int) -> int:
    """Reverse the eight low bits of ``n``, giving a signed 8-bit value."""
    reversed_byte = int(format(n & 0xFF, "08b")[::-1], 2)
    return reversed_byte - 256 if reversed_byte >= 128 else reversed_byte


def is_even(n: int) -> bool:
    """True when the lowest bit of ``n`` is clear."""
    return n & 1 == 0


def swap_case(c: str) -> str:
    """Swap the case of one ASCII letter."""
    if len(c) != 1 or c not in string.ascii_letters:
        raise ValueError(f"expected a single ASCII letter, got {c!r}")
    return c.swapcase()