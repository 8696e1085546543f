"""Force-directed layout and layout metrics."""

from charnet.layout.force import ForceLayout, LayoutResult
from charnet.layout.metrics import LayoutMetrics, compute_layout_metrics

__all__ = [
    "ForceLayout",
    "LayoutResult",
    "LayoutMetrics",
    "compute_layout_metrics",
]
