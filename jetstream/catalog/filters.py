"""
catalog.filters
~~~~~~~~~~~~~~~
Favourites filter chips.

Each chip owns a fixed *positional* slice of the flat favourites list. The
slices are placeholders for real attribute filters and say nothing about the
movies they select.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FilterRange:
    name: str
    start: int
    end: int            # inclusive

    def indices(self) -> range:
        return range(self.start, self.end + 1)

    def __contains__(self, index: int) -> bool:
        return self.start <= index <= self.end


MOVIES          = FilterRange("Movies", 0, 9)
TV_SHOWS        = FilterRange("TV Shows", 10, 17)
ADDED_LAST_WEEK = FilterRange("Added Last Week", 18, 23)
AVAILABLE_IN_4K = FilterRange("Available in 4K", 24, 28)

FAVOURITE_FILTERS = (MOVIES, TV_SHOWS, ADDED_LAST_WEEK, AVAILABLE_IN_4K)


def filter_by_ranges(items: Sequence[T], selected: Iterable[FilterRange]) -> List[T]:
    """Return the items at the positions covered by *selected*.

    Order follows the input list; overlapping ranges do not duplicate.
    An empty selection returns every item. Positions past the end are ignored.
    """
    ranges = list(selected)
    if not ranges:
        return list(items)
    return [item for i, item in enumerate(items) if any(i in r for r in ranges)]
