"""
Per-panel split layout state.

A SplitLayout is created with its panel, owns that panel's occupancy vector
and replaces it on every split add, remove or move. Observers register
callbacks with ``subscribe`` and receive a SplitLayoutChange after each
successful transition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from termsplit.config.ui_config import is_strict
from termsplit.exceptions import LayoutFullError, SplitContractError

from .split_position import (
    OccupancyVector,
    SplitPosition,
    decr_position,
    has_default,
    incr_position,
    initial_split,
    is_full,
    next_position,
    toggle_positions,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitLayoutChange:
    """One transition of a panel's occupancy.

    Attributes:
        panel_id: Panel whose layout changed
        before: Occupancy before the transition
        after: Occupancy after the transition
        position_before: Position a split left (None when a split was added)
        position_after: Position a split entered (None when a split was removed)
    """

    panel_id: str
    before: OccupancyVector
    after: OccupancyVector
    position_before: Optional[SplitPosition] = None
    position_after: Optional[SplitPosition] = None


SplitLayoutListener = Callable[[SplitLayoutChange], None]


class SplitLayout:
    """Occupancy state for the splits of a single panel."""

    def __init__(self, panel_id: str, *, strict: Optional[bool] = None) -> None:
        self.panel_id = panel_id
        self.strict = is_strict() if strict is None else strict
        self._occupancy: OccupancyVector = initial_split()
        self._listeners: List[SplitLayoutListener] = []

    def __repr__(self) -> str:
        return f"SplitLayout(panel_id={self.panel_id!r}, occupancy={self._occupancy!r})"

    @property
    def occupancy(self) -> OccupancyVector:
        return self._occupancy

    def subscribe(self, listener: SplitLayoutListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def can_split(self) -> bool:
        return not is_full(self._occupancy)

    def has_default(self) -> bool:
        return has_default(self._occupancy)

    def add_split(self) -> SplitPosition:
        """Place a new split in the first free position after default.

        Falls back to the default position when every other one is taken.

        Raises:
            LayoutFullError: if every position is occupied
        """
        if not self.can_split():
            raise LayoutFullError(panel_id=self.panel_id, occupancy=self._occupancy)

        position = next_position(self._occupancy, SplitPosition.default)
        self._apply(
            lambda o: incr_position(o, position, strict=self.strict),
            position_after=position,
        )
        return position

    def remove_split(self, position: SplitPosition) -> OccupancyVector:
        """Drop the split sitting in ``position``."""
        position = SplitPosition(position)
        return self._apply(
            lambda o: decr_position(o, position, strict=self.strict),
            position_before=position,
        )

    def move_split(
        self, position_before: SplitPosition, position_after: SplitPosition
    ) -> OccupancyVector:
        """Move a split from ``position_before`` to ``position_after``."""
        position_before = SplitPosition(position_before)
        position_after = SplitPosition(position_after)
        return self._apply(
            lambda o: toggle_positions(
                o, position_before, position_after, strict=self.strict
            ),
            position_before=position_before,
            position_after=position_after,
        )

    def rotate_split(self, position: SplitPosition) -> SplitPosition:
        """Move the split in ``position`` to its next free position."""
        target = next_position(self._occupancy, position)
        self.move_split(position, target)
        return target

    def reset(self) -> None:
        """Return to a single split in the default position."""
        before = self._occupancy
        self._occupancy = initial_split()
        self._notify(SplitLayoutChange(self.panel_id, before, self._occupancy))

    def _apply(
        self,
        transition: Callable[[OccupancyVector], OccupancyVector],
        position_before: Optional[SplitPosition] = None,
        position_after: Optional[SplitPosition] = None,
    ) -> OccupancyVector:
        before = self._occupancy
        try:
            after = transition(before)
        except SplitContractError as e:
            logger.warning(f"Rejected split transition on panel {self.panel_id}: {e}")
            raise

        self._occupancy = after
        logger.debug(
            f"Panel {self.panel_id}: {before} -> {after} "
            f"({_name(position_before)} -> {_name(position_after)})"
        )
        self._notify(
            SplitLayoutChange(self.panel_id, before, after, position_before, position_after)
        )
        return after

    def _notify(self, change: SplitLayoutChange) -> None:
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(change)


def _name(position: Optional[SplitPosition]) -> str:
    return position.name if position is not None else "-"
