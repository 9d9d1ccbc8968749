"""UI package for termsplit.

Components:

- split_position: slot enumeration and pure occupancy-vector operations
- split_layout: per-panel layout state with change callbacks
- split_messages: Textual messages announcing layout changes
- split_layout_mixin: actions wiring a Textual view to a split layout
"""

from .split_layout import SplitLayout, SplitLayoutChange
from .split_position import (
    OccupancyVector,
    SplitPosition,
    decr_position,
    has_default,
    incr_position,
    initial_split,
    is_full,
    is_occupied,
    next_position,
    toggle_positions,
)

__all__ = [
    # Engine
    "OccupancyVector",
    "SplitPosition",
    "decr_position",
    "has_default",
    "incr_position",
    "initial_split",
    "is_full",
    "is_occupied",
    "next_position",
    "toggle_positions",
    # Layout state
    "SplitLayout",
    "SplitLayoutChange",
]
