"""Single-pass min/max folds over non-empty integer sequences."""

from collections.abc import Sequence
from typing import NamedTuple

from intkern.core.errors import EmptySequenceError


class CheckedFold(NamedTuple):
    """Result of a checked min or max fold.

    ``empty`` is True when the input had no elements, in which case
    ``value`` is 0. It is not a success flag; use ``ok`` for that reading.
    """

    value: int
    empty: bool

    @property
    def ok(self) -> bool:
        return not self.empty


class CheckedMinMax(NamedTuple):
    """Result of a checked combined min/max fold; ``(0, 0, True)`` if empty."""

    min: int
    max: int
    empty: bool

    @property
    def ok(self) -> bool:
        return not self.empty


EMPTY_FOLD = CheckedFold(0, True)
EMPTY_MIN_MAX = CheckedMinMax(0, 0, True)


def fold_min(values: Sequence[int], operation: str = "fold_min") -> int:
    if not values:
        raise EmptySequenceError(operation)
    result = values[0]
    for value in values[1:]:
        if value < result:
            result = value
    return result


def fold_max(values: Sequence[int], operation: str = "fold_max") -> int:
    if not values:
        raise EmptySequenceError(operation)
    result = values[0]
    for value in values[1:]:
        if value > result:
            result = value
    return result


def fold_min_max(
    values: Sequence[int], operation: str = "fold_min_max"
) -> tuple[int, int]:
    if not values:
        raise EmptySequenceError(operation)
    low = high = values[0]
    for value in values[1:]:
        if value < low:
            low = value
        elif value > high:
            high = value
    return low, high
