"""Presentation-side helpers: palette and pickable bodies."""

from charnet.presentation.bodies import (
    EDGE_COLOR,
    GROUP_COLORS,
    build_bodies,
    color_for_group,
    lighten,
)

__all__ = [
    "EDGE_COLOR",
    "GROUP_COLORS",
    "build_bodies",
    "color_for_group",
    "lighten",
]
