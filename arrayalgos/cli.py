"""Command line entry point for the array algorithms."""

import argparse
import sys
from collections.abc import Sequence

from arrayalgos.intervals import merge_intervals
from arrayalgos.pascal import pascal_triangle
from arrayalgos.repeat_missing import (
    find_repeating_missing,
    find_repeating_missing_math,
)
from arrayalgos.stock import max_profit
from arrayalgos.subarray import kadane, max_suffix_sum


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arrayalgos", description="Run classic array algorithms."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    repeat = commands.add_parser(
        "repeat-missing", help="find the repeated and the missing number"
    )
    repeat.add_argument("numbers", nargs="+", type=int)
    repeat.add_argument(
        "--math", action="store_true", help="use sums of values and squares"
    )

    subarray = commands.add_parser(
        "max-subarray", help="find the maximum-sum contiguous subarray"
    )
    subarray.add_argument("numbers", nargs="+", type=int)
    subarray.add_argument(
        "--suffix",
        action="store_true",
        help="only report the best sum of a suffix",
    )

    intervals = commands.add_parser(
        "merge-intervals", help="merge overlapping intervals given as start end pairs"
    )
    intervals.add_argument("bounds", nargs="+", type=int)

    pascal = commands.add_parser("pascal", help="print rows of Pascal's triangle")
    pascal.add_argument("rows", type=int)

    stock = commands.add_parser("stock", help="best profit from one buy and sell")
    stock.add_argument("prices", nargs="+", type=int)

    return parser


def _format_intervals(intervals: Sequence[tuple[int, int]]) -> str:
    return " ".join(f"[{start}, {end}]" for start, end in intervals)


def _run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.command == "repeat-missing":
        finder = find_repeating_missing_math if args.math else find_repeating_missing
        repeating, missing = finder(args.numbers)
        print(f"The repeating number A is: {repeating}")
        print(f"The missing number B is: {missing}")
    elif args.command == "max-subarray":
        if args.suffix:
            print(f"Maximum subarray sum is: {max_suffix_sum(args.numbers)}")
        else:
            best = kadane(args.numbers)
            print(f"Maximum subarray sum is: {best.total}")
            body = "".join(f" {value} " for value in best.elements(args.numbers))
            print(f"Subarray with maximum sum is: [{body}]")
    elif args.command == "merge-intervals":
        if len(args.bounds) % 2:
            parser.error("merge-intervals needs an even number of bounds")
        pairs = list(zip(args.bounds[::2], args.bounds[1::2]))
        print(f"Merged Intervals: {_format_intervals(merge_intervals(pairs))}")
    elif args.command == "pascal":
        rows = pascal_triangle(args.rows)
        print("Pascal's Triangle:")
        for row in rows:
            print(" ".join(map(str, row)))
    elif args.command == "stock":
        print(f"Maximum profit that can be achieved: {max_profit(args.prices)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen algorithm; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        _run(args, parser)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())