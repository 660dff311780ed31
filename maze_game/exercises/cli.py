"""
Command line for the number exercises.

Usage:
  maze-exercises longest-run            # type numbers, -1 to finish
  maze-exercises longest-run 1 2 3 1 5
  maze-exercises stats                  # type numbers, 0 to finish
  maze-exercises stats 4 9 2
"""

import argparse
import sys
from typing import Iterable, Optional

from rich.console import Console

from .number_scans import longest_increasing_run, read_until, summarize

RUN_SENTINEL = -1
STATS_SENTINEL = 0


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Number stream exercises")
    sub = p.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("longest-run", help="longest strictly increasing run")
    run_p.add_argument("numbers", nargs="*", type=int, help="numbers to scan (prompted if omitted)")

    stats_p = sub.add_parser("stats", help="average and second largest number")
    stats_p.add_argument("numbers", nargs="*", type=int, help="numbers to scan (prompted if omitted)")

    return p.parse_args(argv)


def _numbers(args: argparse.Namespace, console: Console, sentinel: int, prompt: str) -> Iterable[int]:
    if args.numbers:
        return args.numbers
    return read_until(sentinel, lambda: console.input(prompt))


def main(argv: Optional[list[str]] = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    console = console or Console(highlight=False)

    if args.command == "longest-run":
        values = _numbers(args, console, RUN_SENTINEL, "Enter a number (Enter -1 to EXIT): ")
        length = longest_increasing_run(values)
        console.print(f"The length of the longest strictly increasing run is: {length}")
        return 0

    values = _numbers(args, console, STATS_SENTINEL, "Enter a number (Enter 0 to QUIT): ")
    summary = summarize(values)
    if summary.average is None:
        console.print("No numbers entered.")
        return 0

    console.print(f"Average of numbers is: {summary.average:.2f}")
    if summary.second_largest is None:
        console.print("Fewer than two distinct numbers entered, so there is no second largest.")
    else:
        console.print(f"Second largest number is: {summary.second_largest}")
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
