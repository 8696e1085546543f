"""Colors and pickable bodies for laid-out nodes."""

from charnet.models import Graph, PickableBody

# Fluent design palette, indexed by node group (wraps around)
GROUP_COLORS: list[int] = [
    0x0078D4,  # Blue
    0x107C10,  # Green
    0xFF4B4B,  # Red
    0xFFB900,  # Yellow
    0x5C2D91,  # Purple
    0x00BCF2,  # Light blue
    0x498205,  # Dark green
    0xD13438,  # Dark red
    0xCA5010,  # Orange
    0x8764B8,  # Light purple
    0x038387,  # Teal
    0x8E562E,  # Brown
    0x567C73,  # Sage
    0x486991,  # Steel blue
    0x744DA9,  # Violet
]

EDGE_COLOR = 0xC8C6C4


def color_for_group(group: int) -> int:
    return GROUP_COLORS[group % len(GROUP_COLORS)]


def lighten(color: int, amount: float) -> int:
    """Linearly blend a 0xRRGGBB color toward white by `amount` (0..1)."""
    if not 0.0 <= amount <= 1.0:
        raise ValueError(f"amount must be in [0, 1], got {amount}")
    channels = []
    for shift in (16, 8, 0):
        c = (color >> shift) & 0xFF
        channels.append(round(c + (0xFF - c) * amount))
    r, g, b = channels
    return (r << 16) | (g << 8) | b


def build_bodies(graph: Graph, radius: float = 1.2) -> list[PickableBody]:
    """One body per node, at the node's current position, in node order."""
    return [
        PickableBody(
            node_id=node.id,
            name=node.name,
            group=node.group,
            position=node.position,
            radius=radius,
            original_color=color_for_group(node.group),
            original_scale=1.0,
        )
        for node in graph.nodes
    ]
