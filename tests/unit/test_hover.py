"""Unit tests for the hover state machine."""

from unittest.mock import MagicMock, call

import pytest

from charnet.hover import (
    CURSOR_DEFAULT,
    CURSOR_POINTER,
    EventLog,
    HoverController,
    HoverEventType,
    HoverListener,
    HoverState,
)
from charnet.presentation import lighten


@pytest.fixture
def controller(mock_listener: HoverListener) -> HoverController:
    return HoverController(listener=mock_listener, highlight_scale=1.3, highlight_lighten=0.3)


class TestHoverTransitions:
    """One test per state transition."""

    def test_idle_to_hovering(self, controller: HoverController, mock_listener: MagicMock, body_factory) -> None:
        """Test a hit from Idle highlights and shows the tooltip."""
        body = body_factory(0, (0, 0, 0), name="Valjean", color=0x0078D4)

        assert controller.update(body, 120, 80) is True

        assert controller.state == HoverState.HOVERING
        assert controller.hovered is body
        assert body.color == lighten(0x0078D4, 0.3)
        assert body.scale == pytest.approx(1.3)
        mock_listener.on_highlight_applied.assert_called_once_with(body)
        mock_listener.on_tooltip_show.assert_called_once_with("Valjean", 120, 80)
        mock_listener.on_cursor_change.assert_called_once_with(CURSOR_POINTER)
        mock_listener.on_highlight_reverted.assert_not_called()

    def test_same_body_is_noop(self, controller: HoverController, mock_listener: MagicMock, body_factory) -> None:
        """Test hovering the same body twice highlights it once."""
        body = body_factory(0, (0, 0, 0))

        controller.update(body, 10, 10)
        assert controller.update(body, 12, 11) is False

        mock_listener.on_highlight_applied.assert_called_once_with(body)
        mock_listener.on_tooltip_show.assert_called_once()
        mock_listener.on_highlight_reverted.assert_not_called()
        assert body.scale == pytest.approx(1.3)

    def test_switch_bodies(self, controller: HoverController, mock_listener: MagicMock, body_factory) -> None:
        """Test moving to another body reverts the first and highlights the second."""
        first = body_factory(0, (0, 0, 0), name="A", color=0x107C10)
        second = body_factory(1, (5, 0, 0), name="B", color=0xFF4B4B)

        controller.update(first, 10, 10)
        assert controller.update(second, 20, 20) is True

        assert controller.hovered is second
        assert first.color == 0x107C10
        assert first.scale == 1.0
        assert second.color == lighten(0xFF4B4B, 0.3)
        mock_listener.on_highlight_reverted.assert_called_once_with(first)
        assert mock_listener.on_highlight_applied.call_args_list == [call(first), call(second)]
        assert mock_listener.on_tooltip_show.call_args_list == [call("A", 10, 10), call("B", 20, 20)]
        # Cursor is already a pointer
        mock_listener.on_cursor_change.assert_called_once_with(CURSOR_POINTER)
        mock_listener.on_tooltip_hide.assert_not_called()

    def test_hovering_to_idle(self, controller: HoverController, mock_listener: MagicMock, body_factory) -> None:
        """Test leaving a body reverts it and hides the tooltip."""
        body = body_factory(0, (0, 0, 0))

        controller.update(body, 10, 10)
        assert controller.update(None, 30, 30) is True

        assert controller.state == HoverState.IDLE
        assert controller.hovered is None
        assert not body.is_highlighted
        mock_listener.on_highlight_reverted.assert_called_once_with(body)
        mock_listener.on_tooltip_hide.assert_called_once_with()
        assert mock_listener.on_cursor_change.call_args_list == [call(CURSOR_POINTER), call(CURSOR_DEFAULT)]

    def test_idle_stays_idle(self, controller: HoverController, mock_listener: MagicMock) -> None:
        """Test no hit while Idle emits nothing."""
        assert controller.update(None, 0, 0) is False
        assert controller.state == HoverState.IDLE
        assert mock_listener.method_calls == []


class TestHoverRevert:
    """Tests for restoring original visuals."""

    def test_revert_restores_captured_originals(self, controller: HoverController, body_factory) -> None:
        """Test revert uses creation-time color and scale, not defaults."""
        body = body_factory(0, (0, 0, 0), color=0x123456, scale=2.0)

        controller.update(body, 0, 0)
        assert body.scale == pytest.approx(2.6)
        controller.update(None, 0, 0)

        assert body.color == 0x123456
        assert body.scale == 2.0

    def test_only_one_body_highlighted(self, controller: HoverController, body_factory) -> None:
        """Test at most one body is ever highlighted."""
        bodies = [body_factory(i, (i, 0, 0)) for i in range(4)]
        for picked in [bodies[0], bodies[2], bodies[2], bodies[1], None, bodies[3]]:
            controller.update(picked, 0, 0)
            assert sum(b.is_highlighted for b in bodies) == (0 if picked is None else 1)

    def test_reset(self, controller: HoverController, mock_listener: MagicMock, body_factory) -> None:
        """Test reset behaves like a miss."""
        body = body_factory(0, (0, 0, 0))
        controller.update(body, 0, 0)
        assert controller.reset() is True
        assert controller.state == HoverState.IDLE
        mock_listener.on_tooltip_hide.assert_called_once_with()
        assert controller.reset() is False

    def test_default_listener(self, body_factory) -> None:
        """Test a controller works without a listener."""
        controller = HoverController()
        body = body_factory(0, (0, 0, 0))
        assert controller.update(body, 0, 0) is True
        assert body.is_highlighted

    def test_explicit_zero_factors_kept(self, body_factory) -> None:
        """Test zero highlight factors are used rather than replaced by defaults."""
        controller = HoverController(highlight_scale=0.0, highlight_lighten=0.0)
        assert controller.highlight_scale == 0.0
        assert controller.highlight_lighten == 0.0

        body = body_factory(0, (0, 0, 0), scale=2.0)
        controller.update(body, 0, 0)
        assert body.scale == 0.0
        assert body.color == body.original_color


class TestEventLog:
    """Tests for the recording listener."""

    def test_records_and_drains(self, body_factory) -> None:
        """Test events are flattened in order and cleared on drain."""
        log = EventLog()
        controller = HoverController(listener=log, highlight_scale=1.3, highlight_lighten=0.3)
        body = body_factory(4, (0, 0, 0), name="Cosette", color=0x0078D4)

        controller.update(body, 100, 50)
        events = log.drain()

        assert [e.type for e in events] == [
            HoverEventType.HIGHLIGHT_APPLIED,
            HoverEventType.TOOLTIP_SHOW,
            HoverEventType.CURSOR,
        ]
        assert events[0].node_id == 4
        assert events[0].color == lighten(0x0078D4, 0.3)
        assert events[1].to_dict() == {
            "type": "tooltip_show",
            "node_id": 4,
            "group": 0,
            "text": "Cosette",
            "screen_x": 100,
            "screen_y": 50,
        }
        assert events[2].cursor == CURSOR_POINTER
        assert log.drain() == []

    def test_revert_event_carries_original_visuals(self, body_factory) -> None:
        """Test the revert event reports the restored color and scale."""
        log = EventLog()
        controller = HoverController(listener=log)
        body = body_factory(1, (0, 0, 0), color=0x107C10)

        controller.update(body, 0, 0)
        log.drain()
        controller.update(None, 0, 0)
        revert, hide, cursor = log.drain()

        assert revert.type == HoverEventType.HIGHLIGHT_REVERTED
        assert (revert.color, revert.scale) == (0x107C10, 1.0)
        assert hide.to_dict() == {"type": "tooltip_hide"}
        assert cursor.cursor == CURSOR_DEFAULT
