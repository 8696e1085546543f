"""Graph model - characters and their co-occurrence edges."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


class GraphDataError(ValueError):
    """Raised when raw graph data references nodes that do not exist."""


@dataclass
class Node:
    """
    A character in the network.

    Position and velocity persist across layout iterations; the force
    accumulator is reset by the layout engine at the start of each one.
    """

    id: int  # Load-order index, never reassigned
    name: str
    group: int  # Only used for color selection

    # Position
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # Velocity
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0

    # Force accumulator
    fx: float = 0.0
    fy: float = 0.0
    fz: float = 0.0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Node id is immutable once assigned")
        super().__setattr__(name, value)

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict:
        """Convert to dictionary for the API and layout export."""
        return {
            "id": self.id,
            "name": self.name,
            "group": self.group,
            "x": self.x,
            "y": self.y,
            "z": self.z,
        }


@dataclass(frozen=True)
class Edge:
    """An undirected co-occurrence between two nodes, by node id."""

    source: int
    target: int

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass
class Graph:
    """Ordered nodes plus edges. Node order defines node identity."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    @classmethod
    def initialize(
        cls,
        raw_nodes: list[dict],
        raw_links: list[dict],
        rng: random.Random | None = None,
        extent: float = 40.0,
    ) -> "Graph":
        """
        Build a graph from raw records and scatter nodes randomly.

        Each node gets id = its index in raw_nodes and a position drawn
        uniformly (per axis) from a cube of side `extent` centered at the
        origin. Links are resolved to node ids here; any reference outside
        the node range aborts construction.

        Args:
            raw_nodes: Records with "name" and "group"
            raw_links: Records with integer "source" and "target"
            rng: Random generator for initial placement (seed it for
                reproducible layouts)
            extent: Side length of the placement cube

        Returns:
            New Graph with zero velocities

        Raises:
            GraphDataError: If a link references a missing node
        """
        rng = rng or random.Random()
        count = len(raw_nodes)

        # Validate every link before building anything
        edges: list[Edge] = []
        for i, link in enumerate(raw_links):
            source = link.get("source")
            target = link.get("target")
            for end in (source, target):
                if isinstance(end, bool) or not isinstance(end, int) or not 0 <= end < count:
                    raise GraphDataError(
                        f"Link {i} references node {end!r}, "
                        f"but only ids 0..{count - 1} exist"
                    )
            edges.append(Edge(source=source, target=target))

        half = extent / 2
        nodes = []
        for i, raw in enumerate(raw_nodes):
            nodes.append(Node(
                id=i,
                name=str(raw.get("name", "")),
                group=int(raw.get("group", 0)),
                x=rng.uniform(-half, half),
                y=rng.uniform(-half, half),
                z=rng.uniform(-half, half),
            ))

        logger.info(f"Graph initialized: {len(nodes)} nodes, {len(edges)} edges")
        return cls(nodes=nodes, edges=edges)

    def positions(self) -> dict[int, tuple[float, float, float]]:
        """Current position per node id."""
        return {n.id: n.position for n in self.nodes}

    def edge_pairs(self) -> set[tuple[int, int]]:
        """Distinct unordered node pairs joined by at least one edge."""
        return {
            (min(e.source, e.target), max(e.source, e.target))
            for e in self.edges
            if not e.is_self_loop
        }

    def has_edge(self, a: int, b: int) -> bool:
        return (min(a, b), max(a, b)) in self.edge_pairs()

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [{"source": e.source, "target": e.target} for e in self.edges],
        }
