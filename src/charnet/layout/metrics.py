"""Layout quality metrics for sanity checks and the stats endpoint."""

import math
from dataclasses import dataclass

from charnet.models import Graph


@dataclass
class LayoutMetrics:
    """Distance statistics of a laid-out graph."""

    node_count: int = 0
    edge_count: int = 0
    mean_edge_length: float | None = None  # Over distinct connected pairs
    mean_unconnected_distance: float | None = None  # Over pairs with no edge
    max_radius: float = 0.0  # Farthest node from the centroid

    @property
    def separation_ratio(self) -> float | None:
        """Unconnected / connected mean distance; > 1 means edges pull nodes together."""
        if not self.mean_edge_length or self.mean_unconnected_distance is None:
            return None
        return self.mean_unconnected_distance / self.mean_edge_length

    def to_dict(self) -> dict:
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "mean_edge_length": self.mean_edge_length,
            "mean_unconnected_distance": self.mean_unconnected_distance,
            "separation_ratio": self.separation_ratio,
            "max_radius": self.max_radius,
        }


def compute_layout_metrics(graph: Graph) -> LayoutMetrics:
    """Compute distance statistics over the current node positions."""
    nodes = graph.nodes
    metrics = LayoutMetrics(node_count=len(nodes), edge_count=len(graph.edges))
    if not nodes:
        return metrics

    connected = graph.edge_pairs()
    edge_total, edge_count = 0.0, 0
    other_total, other_count = 0.0, 0

    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            d = math.dist(nodes[i].position, nodes[j].position)
            if (nodes[i].id, nodes[j].id) in connected:
                edge_total += d
                edge_count += 1
            else:
                other_total += d
                other_count += 1

    if edge_count:
        metrics.mean_edge_length = edge_total / edge_count
    if other_count:
        metrics.mean_unconnected_distance = other_total / other_count

    cx = sum(n.x for n in nodes) / len(nodes)
    cy = sum(n.y for n in nodes) / len(nodes)
    cz = sum(n.z for n in nodes) / len(nodes)
    metrics.max_radius = max(math.dist((cx, cy, cz), n.position) for n in nodes)
    return metrics
