"""Find the greatest element of a sequence under a custom ordering."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

EMPTY = "find_max() arg is an empty sequence"


def find_max(items: Iterable[T], less: Callable[[T, T], bool]) -> T:
    """Return the first element that no later element exceeds under less.

    Raises ValueError when items is empty.
    """
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError(EMPTY) from None
    for item in iterator:
        if less(best, item):
            best = item
    return best