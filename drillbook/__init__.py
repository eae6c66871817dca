"""Classic programming drills: numbers, bits, arrays, strings, matrices, patterns, notes and a clinic register."""

__version__ = "0.1.0"