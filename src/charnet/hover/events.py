"""Recorded hover side effects, for clients that apply them remotely."""

from dataclasses import dataclass
from enum import Enum

from charnet.hover.controller import HoverListener
from charnet.models import PickableBody


class HoverEventType(str, Enum):
    HIGHLIGHT_APPLIED = "highlight_applied"
    HIGHLIGHT_REVERTED = "highlight_reverted"
    TOOLTIP_SHOW = "tooltip_show"
    TOOLTIP_HIDE = "tooltip_hide"
    CURSOR = "cursor"


@dataclass
class HoverEvent:
    """One listener callback, flattened."""

    type: HoverEventType
    node_id: int | None = None
    color: int | None = None  # Body color after the event
    scale: float | None = None  # Body scale after the event
    text: str | None = None
    group: int | None = None
    screen_x: float | None = None
    screen_y: float | None = None
    cursor: str | None = None

    def to_dict(self) -> dict:
        data = {"type": self.type.value}
        for key in ("node_id", "color", "scale", "text", "group", "screen_x", "screen_y", "cursor"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


class EventLog(HoverListener):
    """Listener that records events until drained."""

    def __init__(self) -> None:
        self.events: list[HoverEvent] = []
        self._last_body: PickableBody | None = None

    def on_highlight_applied(self, body: PickableBody) -> None:
        self._last_body = body
        self.events.append(HoverEvent(
            type=HoverEventType.HIGHLIGHT_APPLIED,
            node_id=body.node_id,
            color=body.color,
            scale=body.scale,
        ))

    def on_highlight_reverted(self, body: PickableBody) -> None:
        self.events.append(HoverEvent(
            type=HoverEventType.HIGHLIGHT_REVERTED,
            node_id=body.node_id,
            color=body.color,
            scale=body.scale,
        ))

    def on_tooltip_show(self, text: str, screen_x: float, screen_y: float) -> None:
        # Tooltip always follows a highlight of the same body
        body = self._last_body
        self.events.append(HoverEvent(
            type=HoverEventType.TOOLTIP_SHOW,
            node_id=body.node_id if body else None,
            group=body.group if body else None,
            text=text,
            screen_x=screen_x,
            screen_y=screen_y,
        ))

    def on_tooltip_hide(self) -> None:
        self.events.append(HoverEvent(type=HoverEventType.TOOLTIP_HIDE))

    def on_cursor_change(self, cursor: str) -> None:
        self.events.append(HoverEvent(type=HoverEventType.CURSOR, cursor=cursor))

    def drain(self) -> list[HoverEvent]:
        """Return and clear recorded events."""
        events, self.events = self.events, []
        return events
