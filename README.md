# drillbook

A collection of small, well-known programming drills as a plain Python
library: number puzzles, bit manipulation, array and string exercises,
matrix helpers, star patterns, an ATM note-combination counter and a
tiny in-memory clinic reservation model. It has no dependencies outside
the standard library.

## Installation

```
pip install drillbook
```

To run the test suite:

```
pip install "drillbook[test]"
pytest
```

## Modules

- `drillbook.numbers`: hole counting in digits, sums between numbers and
  of series, remainders by subtraction, power-of-two/three and perfect
  square checks, divisors and primes, reversed numbers, digit sums,
  powers, shift-and-add multiplication, circle area and circumference
  (with pi as 3.1416), Fibonacci and Catalan numbers, maximum XOR and
  `running_even_sums`, a generator of running sums of even inputs.
- `drillbook.bits`: `set_bit`, `clear_bit` and `toggle_bit` on signed
  32-bit values, `binary_string`, `count_ones`, `max_zero_gap`,
  `reverse_bits` on a signed byte, `is_even` and `swap_case`.
- `drillbook.arrays`: bubble sort, runs, missing, duplicate and unpaired
  values, merging, most frequent values, searching (`search_min_max`
  returns an `Extremes` tuple), second and n-th largest values, prefix
  swapping.
- `drillbook.strings`: mirror checks, unique characters, find and
  replace, integer and float formatting and parsing, word repetition,
  reversing words and strings, and `triangle_type`, which returns a
  `TriangleType` member.
- `drillbook.matrix`: `matrix_multiply`, `format_matrix`, `zigzag` and
  `diagonals`.
- `drillbook.patterns`: five star patterns drawn as text (`pattern_1` to
  `pattern_5`, or `pattern(number, n)`).
- `drillbook.atm`: every way to pay an amount with 200, 100, 50, 20, 10,
  5 and 1 notes (`Withdrawal`, `enumerate_withdrawals`,
  `count_withdrawals`, `format_withdrawal`).
- `drillbook.clinic`: `Clinic` and `Patient` for registering patients and
  booking one of five afternoon slots (`slot_time` names them).

## Examples

```python
from drillbook.numbers import reverse_number, is_prime, catalan_numbers
from drillbook.bits import set_bit, binary_string
from drillbook.arrays import reverse_list

reverse_number(1234)     # 4321
is_prime(7)              # True
catalan_numbers(5)       # [1, 1, 2, 5, 14]
set_bit(0, 3)            # 8
binary_string(5)         # "101"
reverse_list([1, 2, 3])  # [3, 2, 1]
```

```python
from drillbook.clinic import Clinic

clinic = Clinic()
clinic.add_patient(1, "Alice", 30, "f")
clinic.add_slot(1, 1)       # True: books the first free slot
clinic.reservation_count()  # 1
```

## Command line

The `drillbook` command runs one drill per call:

```
drillbook bits set 5 1        # >>> 7
drillbook bits clear 7 0      # >>> 6
drillbook bits toggle 5 0     # >>> 4
drillbook bits read 10        # >>> 1010
drillbook pattern 3 4         # pattern 3 with 4 lines; 6 draws all five
drillbook atm 20              # every combination, then the count
```

Invalid input, such as an unknown pattern number or a bit outside
0..31, is reported on standard error with exit status 1.

## Limitations

The clinic register lives in memory only: nothing is saved between runs,
and the command line does not offer the clinic, which is used from
Python alone. The command line takes its input as arguments; it has no
interactive menu.