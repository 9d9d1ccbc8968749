"""Tests for the per-panel SplitLayout state."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from termsplit.exceptions import LayoutFullError, SlotOverflowError, SlotUnderflowError
from termsplit.ui.split_layout import SplitLayout, SplitLayoutChange
from termsplit.ui.split_position import SplitPosition


class TestSplitLayoutLifecycle:
    def test_starts_with_single_default_split(self):
        layout = SplitLayout("tab-1")
        assert layout.occupancy == (1, 0, 0, 0)
        assert layout.has_default()
        assert layout.can_split()

    def test_layouts_do_not_share_state(self):
        first = SplitLayout("tab-1")
        second = SplitLayout("tab-2")
        first.add_split()
        assert first.occupancy == (1, 1, 0, 0)
        assert second.occupancy == (1, 0, 0, 0)

    def test_reset(self):
        layout = SplitLayout("tab-1")
        layout.add_split()
        layout.add_split()
        layout.reset()
        assert layout.occupancy == (1, 0, 0, 0)

    def test_repr(self):
        assert repr(SplitLayout("tab-1")) == "SplitLayout(panel_id='tab-1', occupancy=(1, 0, 0, 0))"


class TestAddSplit:
    def test_fills_positions_in_order(self):
        layout = SplitLayout("tab-1")
        assert layout.add_split() is SplitPosition.right
        assert layout.add_split() is SplitPosition.bottom
        assert layout.add_split() is SplitPosition.left
        assert layout.occupancy == (1, 1, 1, 1)
        assert not layout.can_split()

    def test_full_layout_raises(self):
        layout = SplitLayout("tab-1")
        for _ in range(3):
            layout.add_split()
        with pytest.raises(LayoutFullError, match="No free position") as exc_info:
            layout.add_split()
        assert exc_info.value.context["panel_id"] == "tab-1"
        assert layout.occupancy == (1, 1, 1, 1)

    def test_falls_back_to_default_when_only_default_is_free(self):
        layout = SplitLayout("tab-1")
        for _ in range(3):
            layout.add_split()
        layout.remove_split(SplitPosition.default)
        assert layout.add_split() is SplitPosition.default
        assert layout.occupancy == (1, 1, 1, 1)


class TestRemoveAndMove:
    def test_remove_split(self):
        layout = SplitLayout("tab-1")
        layout.add_split()
        assert layout.remove_split(SplitPosition.right) == (1, 0, 0, 0)

    def test_remove_default_clears_has_default(self):
        layout = SplitLayout("tab-1")
        layout.add_split()
        layout.remove_split(SplitPosition.default)
        assert not layout.has_default()

    def test_remove_empty_slot_raises_and_keeps_state(self):
        layout = SplitLayout("tab-1")
        with pytest.raises(SlotUnderflowError):
            layout.remove_split(SplitPosition.left)
        assert layout.occupancy == (1, 0, 0, 0)

    def test_move_split(self):
        layout = SplitLayout("tab-1")
        layout.add_split()
        assert layout.move_split(SplitPosition.right, SplitPosition.left) == (1, 0, 0, 1)

    def test_move_into_occupied_slot_raises(self):
        layout = SplitLayout("tab-1")
        layout.add_split()
        layout.add_split()
        with pytest.raises(SlotOverflowError):
            layout.move_split(SplitPosition.right, SplitPosition.bottom)
        assert layout.occupancy == (1, 1, 1, 0)

    def test_non_strict_layout_allows_violation(self):
        layout = SplitLayout("tab-1", strict=False)
        layout.add_split()
        layout.add_split()
        assert layout.move_split(SplitPosition.right, SplitPosition.bottom) == (1, 0, 2, 0)

    def test_accepts_plain_ints(self):
        layout = SplitLayout("tab-1")
        layout.add_split()
        layout.move_split(1, 3)
        assert layout.occupancy == (1, 0, 0, 1)


class TestRotateSplit:
    def test_rotate_to_next_free(self):
        layout = SplitLayout("tab-1")
        layout.add_split()
        layout.add_split()
        assert layout.rotate_split(SplitPosition.right) is SplitPosition.left
        assert layout.occupancy == (1, 0, 1, 1)

    def test_rotate_wraps_to_default(self):
        layout = SplitLayout("tab-1")
        for _ in range(3):
            layout.add_split()
        assert layout.rotate_split(SplitPosition.left) is SplitPosition.default
        assert layout.occupancy == (2, 1, 1, 0)

    def test_rotate_default_when_others_taken_stays(self):
        layout = SplitLayout("tab-1")
        for _ in range(3):
            layout.add_split()
        assert layout.rotate_split(SplitPosition.default) is SplitPosition.default
        assert layout.occupancy == (1, 1, 1, 1)


class TestListeners:
    def test_listener_receives_change(self):
        layout = SplitLayout("tab-1")
        listener = MagicMock()
        layout.subscribe(listener)

        layout.add_split()

        listener.assert_called_once_with(
            SplitLayoutChange(
                panel_id="tab-1",
                before=(1, 0, 0, 0),
                after=(1, 1, 0, 0),
                position_before=None,
                position_after=SplitPosition.right,
            )
        )

    def test_move_reports_both_positions(self):
        layout = SplitLayout("tab-1")
        layout.add_split()
        changes = []
        layout.subscribe(changes.append)

        layout.rotate_split(SplitPosition.right)

        assert len(changes) == 1
        assert changes[0].position_before is SplitPosition.right
        assert changes[0].position_after is SplitPosition.bottom
        assert changes[0].after == (1, 0, 1, 0)

    def test_unsubscribe(self):
        layout = SplitLayout("tab-1")
        listener = MagicMock()
        unsubscribe = layout.subscribe(listener)
        unsubscribe()
        unsubscribe()

        layout.add_split()
        listener.assert_not_called()

    def test_rejected_transition_is_not_reported(self):
        layout = SplitLayout("tab-1")
        listener = MagicMock()
        layout.subscribe(listener)

        with pytest.raises(SlotUnderflowError):
            layout.remove_split(SplitPosition.bottom)
        listener.assert_not_called()

    def test_listener_errors_propagate(self):
        layout = SplitLayout("tab-1")
        layout.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        with pytest.raises(RuntimeError, match="boom"):
            layout.add_split()


class TestConfigAndLogging:
    def test_strict_from_config(self, isolated_ui_config):
        isolated_ui_config.write_text(json.dumps({"split_layout": {"strict": False}}))
        assert SplitLayout("tab-1").strict is False

    def test_strict_by_default(self):
        assert SplitLayout("tab-1").strict is True

    def test_explicit_strict_wins(self, isolated_ui_config):
        isolated_ui_config.write_text(json.dumps({"split_layout": {"strict": False}}))
        assert SplitLayout("tab-1", strict=True).strict is True

    def test_transition_logged(self, caplog):
        layout = SplitLayout("tab-1")
        with caplog.at_level(logging.DEBUG, logger="termsplit.ui.split_layout"):
            layout.add_split()
        assert "Panel tab-1: (1, 0, 0, 0) -> (1, 1, 0, 0) (- -> right)" in caplog.text

    def test_rejection_logged(self, caplog):
        layout = SplitLayout("tab-1")
        with caplog.at_level(logging.WARNING, logger="termsplit.ui.split_layout"):
            with pytest.raises(SlotUnderflowError):
                layout.remove_split(SplitPosition.left)
        assert "Rejected split transition on panel tab-1" in caplog.text
