"""Command line entry: bit operations, star patterns and note counting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from drillbook import atm, bits, patterns

_ALL_PATTERNS = 6


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drillbook", description="Small drills.")
    commands = parser.add_subparsers(dest="command", required=True)

    bits_parser = commands.add_parser("bits", help="set, clear, toggle or read a bit")
    operations = bits_parser.add_subparsers(dest="operation", required=True)
    for name in ("set", "clear", "toggle"):
        sub = operations.add_parser(name)
        sub.add_argument("number", type=int)
        sub.add_argument("bit", type=int)
    read = operations.add_parser("read")
    read.add_argument("number", type=int)

    pattern_parser = commands.add_parser("pattern", help="draw a star pattern")
    pattern_parser.add_argument(
        "choice", type=int, help=f"pattern 1 to 5, or {_ALL_PATTERNS} for all"
    )
    pattern_parser.add_argument("lines", type=int)

    atm_parser = commands.add_parser("atm", help="list every way to pay an amount")
    atm_parser.add_argument("amount", type=int)
    return parser


def _run_bits(args: argparse.Namespace) -> str:
    operations = {
        "set": bits.set_bit,
        "clear": bits.clear_bit,
        "toggle": bits.toggle_bit,
    }
    if args.operation == "read":
        return f">>> {bits.binary_string(args.number)}"
    return f">>> {operations[args.operation](args.number, args.bit)}"


def _run_pattern(args: argparse.Namespace) -> str:
    if args.choice == _ALL_PATTERNS:
        numbers = sorted(patterns.PATTERNS)
    elif args.choice in patterns.PATTERNS:
        numbers = [args.choice]
    else:
        raise ValueError(">>> Wrong choice.. Try again!")
    return "\n".join(patterns.pattern(number, args.lines) + "\n" for number in numbers)


def _run_atm(args: argparse.Namespace) -> str:
    lines = [atm.format_withdrawal(w) for w in atm.enumerate_withdrawals(args.amount)]
    lines.append(f"All possibilities of {args.amount} = {len(lines)}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the exit status."""
    args = _build_parser().parse_args(argv)
    handlers = {"bits": _run_bits, "pattern": _run_pattern, "atm": _run_atm}
    try:
        output = handlers[args.command](args)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())