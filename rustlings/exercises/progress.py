"""Counting exercises by their progress."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises with the given progress, one value at a time."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count across several maps, one value at a time."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the exercises with the given progress across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)