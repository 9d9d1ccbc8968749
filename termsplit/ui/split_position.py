"""
Split positions and occupancy vectors.

1. Every split sits in a position whose type is SplitPosition.
2. A panel owns an OccupancyVector counting the splits in each position.
   At most one split may sit in any position other than ``default``.
3. Given occupancy ``o1`` and a split in position ``p1``, its next position
   is ``p2 = next_position(o1, p1)``.
4. Moving that split is ``o2 = toggle_positions(o1, p1, p2)``.

Every function here is pure: vectors are tuples and each transition returns
a new one.

Example usage:
    from termsplit.ui.split_position import (
        SplitPosition, initial_split, next_position, toggle_positions,
    )

    occupancy = initial_split()
    target = next_position(occupancy, SplitPosition.default)
    occupancy = toggle_positions(occupancy, SplitPosition.default, target)
"""

from enum import IntEnum
from typing import List, Sequence, Tuple

from termsplit.config.constants import DEFAULT_ROTATION_CLASSES, SPLIT_POSITION_COUNT
from termsplit.exceptions import SlotOverflowError, SlotUnderflowError


class SplitPosition(IntEnum):
    """Layout slots, in cardinal order so modular arithmetic applies."""

    default = 0
    right = 1
    bottom = 2
    left = 3


# Number of splits in each position, indexed by SplitPosition
OccupancyVector = Tuple[int, int, int, int]


def initial_split() -> OccupancyVector:
    """One split in the default position, none elsewhere."""
    return (1, 0, 0, 0)


def is_occupied(occupancy: Sequence[int], position: int) -> bool:
    return occupancy[position] > 0


def next_position(occupancy: Sequence[int], position: int) -> SplitPosition:
    """Find where a split in ``position`` should rotate to.

    Walks forward from the following position, wrapping around, and stops at
    the first free position. ``default`` accepts any number of splits, so the
    walk always ends there at the latest and inspects at most
    SPLIT_POSITION_COUNT candidates.
    """
    candidate = (position + 1) % SPLIT_POSITION_COUNT

    while candidate != SplitPosition.default and is_occupied(occupancy, candidate):
        candidate = (candidate + 1) % SPLIT_POSITION_COUNT
    return SplitPosition(candidate)


def _check_overflow(occupancy: Sequence[int], position: int) -> None:
    if position != SplitPosition.default and occupancy[position] > 1:
        raise SlotOverflowError(
            occupancy=tuple(occupancy), position=SplitPosition(position).name
        )


def _check_underflow(occupancy: Sequence[int], position: int) -> None:
    if occupancy[position] < 0:
        raise SlotUnderflowError(
            occupancy=tuple(occupancy), position=SplitPosition(position).name
        )


def incr_position(
    occupancy: Sequence[int], position: int, *, strict: bool = True
) -> OccupancyVector:
    """Add one split to ``position``.

    Raises:
        SlotOverflowError: if strict and ``position`` is a non-default
            position that is already occupied
    """
    result = list(occupancy)
    result[position] += 1
    if strict:
        _check_overflow(result, position)
    return tuple(result)  # type: ignore[return-value]


def decr_position(
    occupancy: Sequence[int], position: int, *, strict: bool = True
) -> OccupancyVector:
    """Remove one split from ``position``.

    Raises:
        SlotUnderflowError: if strict and ``position`` is empty
    """
    result = list(occupancy)
    result[position] -= 1
    if strict:
        _check_underflow(result, position)
    return tuple(result)  # type: ignore[return-value]


def is_full(occupancy: Sequence[int]) -> bool:
    """Whether every position, default included, holds a split."""
    return all(is_occupied(occupancy, position) for position in SplitPosition)


def has_default(occupancy: Sequence[int]) -> bool:
    return occupancy[SplitPosition.default] > 0


def toggle_positions(
    occupancy: Sequence[int],
    position_before: int,
    position_after: int,
    *,
    strict: bool = True,
) -> OccupancyVector:
    """Move one split between positions. Ex: bottom split -> left split.

    Both counts change on the same copy, so no half-moved vector escapes.

    Raises:
        SlotUnderflowError: if strict and ``position_before`` is empty
        SlotOverflowError: if strict and ``position_after`` is a non-default
            position that is already occupied
    """
    if strict and occupancy[position_before] < 1:
        # Checked on the input so a same-position move cannot hide it
        raise SlotUnderflowError(
            occupancy=tuple(occupancy), position=SplitPosition(position_before).name
        )
    result = list(occupancy)
    result[position_before] -= 1
    result[position_after] += 1
    if strict:
        _check_overflow(result, position_after)
    return tuple(result)  # type: ignore[return-value]


def occupied_positions(occupancy: Sequence[int]) -> List[SplitPosition]:
    """Positions holding at least one split, in cardinal order."""
    return [position for position in SplitPosition if is_occupied(occupancy, position)]


def is_valid_vector(occupancy: Sequence[int]) -> bool:
    """Whether ``occupancy`` has one count per position, none negative and
    none above one outside the default position."""
    if len(occupancy) != SPLIT_POSITION_COUNT:
        return False
    if any(count < 0 for count in occupancy):
        return False
    return all(
        occupancy[position] <= 1
        for position in SplitPosition
        if position != SplitPosition.default
    )


def rotation_class(
    position: int, rotation_classes: Sequence[str] = DEFAULT_ROTATION_CLASSES
) -> str:
    """CSS class rotating a split's header icon to face ``position``."""
    return rotation_classes[position]
