"""
Single-pass scans over a stream of integers.

- longest_increasing_run: length of the longest strictly increasing run of
  consecutive values
- summarize: count, average, largest and second-largest value
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

logger = logging.getLogger(__name__)


def longest_increasing_run(values: Iterable[int]) -> int:
    """Length of the longest run where each value exceeds the previous one."""
    best = 0
    current = 0
    prev: Optional[int] = None

    for value in values:
        if prev is not None and value > prev:
            current += 1
        else:
            current = 1
        best = max(best, current)
        prev = value

    return best


@dataclass
class NumberSummary:
    """Summary statistics of a number stream."""

    count: int
    average: Optional[float]
    largest: Optional[int]
    second_largest: Optional[int]


def summarize(values: Iterable[int]) -> NumberSummary:
    """
    Average plus largest and second-largest value in one pass.

    The second largest is the greatest value strictly below the largest, so
    repeats of the maximum do not count.
    """
    count = 0
    total = 0
    largest: Optional[int] = None
    second: Optional[int] = None

    for value in values:
        count += 1
        total += value

        if largest is None or value > largest:
            second = largest
            largest = value
        elif value < largest and (second is None or value > second):
            second = value

    return NumberSummary(
        count=count,
        average=total / count if count else None,
        largest=largest,
        second_largest=second,
    )


def read_until(sentinel: int, reader: Callable[[], str]) -> Iterator[int]:
    """
    Yield integers from reader until sentinel (or end of input).

    Tokens that are not integers are logged and skipped.
    """
    while True:
        try:
            raw = reader()
        except EOFError:
            return

        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Ignoring non-integer input: {raw!r}")
            continue

        if value == sentinel:
            return
        yield value
