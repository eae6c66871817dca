"""Exercises on text: searching, reversing, converting and parsing."""

from __future__ import annotations

import re
from enum import Enum

_INTEGER = re.compile(r"-?[0-9]+")
_COUNT = re.compile(r"[0-9]+")
_SIDES = re.compile(r"[0-9]+(?: [0-9]+)*")


class TriangleType(str, Enum):
    """The verdicts ``triangle_type`` can give."""

    EQUILATERAL = "Equilateral triangle"
    ISOSCELES = "Isosceles triangle"
    SCALENE = "Scalene triangle"
    NOT_TRIANGLE = "Not triangle"
    NOT_VALID = "Not valid"


def is_mirror(text: str) -> bool:
    """True when ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def unique_chars(text: str) -> str:
    """Keep the first occurrence of each character, in order."""
    return "".join(dict.fromkeys(text))


def find_index(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1."""
    return text.find(pattern)


def find_replace(text: str, pattern: str, replacement: str) -> str:
    """Replace the first occurrence of ``pattern``; unchanged when absent."""
    index = find_index(text, pattern)
    if index == -1:
        return text
    return text[:index] + replacement + text[index + len(pattern):]


def int_to_str(n: int) -> str:
    """Decimal digits of ``n``, with a leading minus sign when negative."""
    if n == 0:
        return "0"
    magnitude = abs(n)
    digits: list[str] = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    sign = "-" if n < 0 else ""
    return sign + "".join(reversed(digits))


def str_to_int(text: str) -> int:
    """Parse an optionally negative string of decimal digits."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    negative = text.startswith("-")
    value = 0
    for char in text.lstrip("-"):
        value = value * 10 + (ord(char) - ord("0"))
    return -value if negative else value


def float_to_str(value: float, precision: int) -> str:
    """Write ``value`` with ``precision`` decimals, truncating the rest."""
    if precision < 0:
        raise ValueError(f"precision must not be negative, got {precision}")
    negative = value < 0
    magnitude = abs(value)
    whole = int(magnitude)
    fraction = magnitude - whole
    decimals: list[str] = []
    for _ in range(precision):
        fraction *= 10
        digit = int(fraction)
        decimals.append(str(digit))
        fraction -= digit
    text = int_to_str(whole)
    if decimals:
        text += "." + "".join(decimals)
    return "-" + text if negative else text


def repeat_words(spec: str) -> list[str]:
    """Expand ``"word,count,word,count,..."`` into each word repeated count times."""
    if not spec:
        return []
    parts = spec.split(",")
    if len(parts) % 2:
        raise ValueError("spec must hold word,count pairs")
    lines: list[str] = []
    for word, count in zip(parts[::2], parts[1::2]):
        if not _COUNT.fullmatch(count):
            raise ValueError(f"count must be a non-negative integer, got {count!r}")
        lines.extend([word] * str_to_int(count))
    return lines


def reverse_words(text: str) -> str:
    """Reverse the order of the space-separated words in ``text``."""
    return " ".join(reversed(text.split(" ")))


def reverse_string(text: str) -> str:
    """``text`` written backwards."""
    return text[::-1]


def triangle_type(text: str) -> TriangleType:
    """Classify the triangle whose three sides are given as ``"a b c"``."""
    if not _SIDES.fullmatch(text):
        return TriangleType.NOT_VALID
    sides = [str_to_int(part) for part in text.split(" ")]
    if len(sides) != 3:
        return TriangleType.NOT_VALID
    a, b, c = sides
    if not (a + b > c and a + c > b and b + c > a):
        return TriangleType.NOT_TRIANGLE
    if a == b == c:
        return TriangleType.EQUILATERAL
    if a == b or a == c or b == c:
        return TriangleType.ISOSCELES
    return TriangleType.SCALENE