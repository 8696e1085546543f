"""Hover highlighting and tooltips."""

from charnet.hover.controller import (
    CURSOR_DEFAULT,
    CURSOR_POINTER,
    HoverController,
    HoverListener,
    HoverState,
)
from charnet.hover.events import EventLog, HoverEvent, HoverEventType

__all__ = [
    "CURSOR_DEFAULT",
    "CURSOR_POINTER",
    "HoverController",
    "HoverListener",
    "HoverState",
    "EventLog",
    "HoverEvent",
    "HoverEventType",
]
