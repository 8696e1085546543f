"""Hover state machine: highlight, tooltip and cursor transitions."""

import logging
from enum import Enum

from charnet.config import settings
from charnet.models import PickableBody
from charnet.presentation.bodies import lighten

logger = logging.getLogger(__name__)

CURSOR_POINTER = "pointer"
CURSOR_DEFAULT = "default"


class HoverState(str, Enum):
    """Whether a body is currently highlighted."""

    IDLE = "idle"
    HOVERING = "hovering"


class HoverListener:
    """Receives hover side effects. Subclass and override what you need."""

    def on_highlight_applied(self, body: PickableBody) -> None:
        pass

    def on_highlight_reverted(self, body: PickableBody) -> None:
        pass

    def on_tooltip_show(self, text: str, screen_x: float, screen_y: float) -> None:
        pass

    def on_tooltip_hide(self) -> None:
        pass

    def on_cursor_change(self, cursor: str) -> None:
        pass


class HoverController:
    """
    Tracks the single highlighted body.

    Transitions, once per pointer move:
    - Idle + hit             -> Hovering(hit): highlight, tooltip, pointer cursor
    - Hovering(a) + a        -> unchanged (no events)
    - Hovering(a) + b        -> revert a, highlight b, tooltip for b
    - Hovering(a) + nothing  -> Idle: revert a, hide tooltip, default cursor
    - Idle + nothing         -> unchanged
    """

    def __init__(
        self,
        listener: HoverListener | None = None,
        highlight_scale: float | None = None,
        highlight_lighten: float | None = None,
    ) -> None:
        self.listener = listener or HoverListener()
        self.highlight_scale = (
            highlight_scale if highlight_scale is not None else settings.highlight_scale
        )
        self.highlight_lighten = (
            highlight_lighten if highlight_lighten is not None else settings.highlight_lighten
        )
        self._hovered: PickableBody | None = None

    @property
    def hovered(self) -> PickableBody | None:
        return self._hovered

    @property
    def state(self) -> HoverState:
        return HoverState.IDLE if self._hovered is None else HoverState.HOVERING

    def update(self, picked: PickableBody | None, screen_x: float, screen_y: float) -> bool:
        """
        Apply the pick result of one pointer move.

        Args:
            picked: Body under the pointer, or None
            screen_x: Pointer x in pixels (tooltip placement)
            screen_y: Pointer y in pixels

        Returns:
            True if the highlighted body changed
        """
        current = self._hovered
        if picked is current:
            return False

        if current is not None:
            self._revert(current)

        if picked is None:
            self._hovered = None
            self.listener.on_tooltip_hide()
            self.listener.on_cursor_change(CURSOR_DEFAULT)
            logger.debug(f"Hover ended on node {current.node_id}")
            return True

        self._apply(picked)
        self._hovered = picked
        self.listener.on_tooltip_show(picked.name, screen_x, screen_y)
        if current is None:
            self.listener.on_cursor_change(CURSOR_POINTER)
        logger.debug(f"Hovering node {picked.node_id} ({picked.name})")
        return True

    def reset(self) -> bool:
        """Pointer left the view: drop any highlight."""
        return self.update(None, 0.0, 0.0)

    def _apply(self, body: PickableBody) -> None:
        body.color = lighten(body.original_color, self.highlight_lighten)
        body.scale = body.original_scale * self.highlight_scale
        self.listener.on_highlight_applied(body)

    def _revert(self, body: PickableBody) -> None:
        body.color = body.original_color
        body.scale = body.original_scale
        self.listener.on_highlight_reverted(body)
