"""
Split Messages - notifications about split layout changes.

Widgets hosting a SplitLayout post these so that headers, tab strips and
other observers can react without holding a reference to the layout.
"""

from typing import Optional

from textual.message import Message

from .split_layout import SplitLayoutChange
from .split_position import OccupancyVector, SplitPosition


class SplitMessage(Message):
    """
    Base class for split layout messages.

    Attributes:
        panel_id: ID of the panel whose splits changed
    """

    def __init__(self, panel_id: str = "") -> None:
        super().__init__()
        self.panel_id = panel_id


class SplitLayoutChanged(SplitMessage):
    """
    Sent after a split was added, removed or moved.

    Attributes:
        panel_id: ID of the panel whose layout changed
        before: Occupancy before the change
        after: Occupancy after the change
        position_before: Position a split left (None for an added split)
        position_after: Position a split entered (None for a removed split)
    """

    def __init__(
        self,
        panel_id: str,
        before: OccupancyVector,
        after: OccupancyVector,
        position_before: Optional[SplitPosition] = None,
        position_after: Optional[SplitPosition] = None,
    ) -> None:
        super().__init__(panel_id)
        self.before = before
        self.after = after
        self.position_before = position_before
        self.position_after = position_after

    @classmethod
    def from_change(cls, change: SplitLayoutChange) -> "SplitLayoutChanged":
        return cls(
            change.panel_id,
            change.before,
            change.after,
            change.position_before,
            change.position_after,
        )


class SplitLayoutRejected(SplitMessage):
    """
    Sent when a requested split action could not be applied.

    Attributes:
        panel_id: ID of the panel the action targeted
        reason: Human-readable reason
    """

    def __init__(self, panel_id: str, reason: str) -> None:
        super().__init__(panel_id)
        self.reason = reason
