"""Mixin giving a Textual view ownership of a panel's split layout.

Each view that uses this mixin must define:
- _split_panel_id: ID of the panel whose splits the view manages

Bind the actions to keys in the view, e.g.:
    BINDINGS = [
        ("ctrl+n", "new_split", "New split"),
        ("ctrl+r", "rotate_split", "Rotate split"),
        ("ctrl+w", "close_split", "Close split"),
    ]
"""

from __future__ import annotations

import logging

from termsplit.config.ui_config import get_rotation_classes
from termsplit.exceptions import LayoutFullError, TermsplitError

from .split_layout import SplitLayout, SplitLayoutChange
from .split_messages import SplitLayoutChanged, SplitLayoutRejected
from .split_position import SplitPosition, is_occupied, occupied_positions, rotation_class

logger = logging.getLogger(__name__)


class SplitLayoutMixin:
    """Mixin that drives a SplitLayout from user actions."""

    _split_panel_id: str = ""

    _split_layout: SplitLayout | None = None
    _focused_split: SplitPosition = SplitPosition.default

    @property
    def split_layout(self) -> SplitLayout:
        if self._split_layout is None:
            self._split_layout = SplitLayout(self._split_panel_id)
            self._split_layout.subscribe(self._on_split_layout_change)
        return self._split_layout

    def _on_split_layout_change(self, change: SplitLayoutChange) -> None:
        post_message = getattr(self, "post_message", None)
        if post_message is not None:
            post_message(SplitLayoutChanged.from_change(change))

    def _reject_split_action(self, reason: str) -> None:
        logger.warning(f"Split action on panel {self._split_panel_id} rejected: {reason}")
        post_message = getattr(self, "post_message", None)
        if post_message is not None:
            post_message(SplitLayoutRejected(self._split_panel_id, reason))
        notify = getattr(self, "notify", None)
        if notify is not None:
            notify(reason, severity="warning")

    def split_rotation_class(self, position: SplitPosition | None = None) -> str:
        """Icon rotation class for ``position`` (the focused split by default).

        Raises:
            ConfigurationError: if the configured rotation table is malformed
        """
        if position is None:
            position = self._focused_split
        return rotation_class(position, get_rotation_classes())

    def action_new_split(self) -> None:
        """Open a new split in the next free position and focus it."""
        try:
            self._focused_split = self.split_layout.add_split()
        except LayoutFullError:
            self._reject_split_action("No room for another split")
        except TermsplitError as e:
            self._reject_split_action(e.message)

    def action_rotate_split(self) -> None:
        """Move the focused split to its next free position."""
        try:
            self._focused_split = self.split_layout.rotate_split(self._focused_split)
        except TermsplitError as e:
            self._reject_split_action(e.message)

    def action_close_split(self) -> None:
        """Close the focused split; the last remaining split stays open."""
        try:
            layout = self.split_layout
            if sum(layout.occupancy) <= 1:
                self._reject_split_action("Cannot close the last split")
                return
            occupancy = layout.remove_split(self._focused_split)
        except TermsplitError as e:
            self._reject_split_action(e.message)
            return

        if not is_occupied(occupancy, self._focused_split):
            if layout.has_default():
                self._focused_split = SplitPosition.default
            else:
                self._focused_split = occupied_positions(occupancy)[0]
