"""Force-directed 3D layout.

Fixed-budget relaxation: inverse-square repulsion between every pair of
nodes, linear spring attraction along edges, damped explicit Euler
integration. Runs to completion in one call; there is no convergence test.
"""

import logging
import time
from dataclasses import dataclass

import numpy as np

from charnet.config import settings
from charnet.models import Graph

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Summary of a completed layout run."""

    iterations: int
    skipped_edges: int  # Zero-length edge evaluations, summed over iterations
    kinetic_energy: float  # Sum of |v|^2 after the last iteration
    elapsed_seconds: float

    def to_dict(self) -> dict:
        return {
            "iterations": self.iterations,
            "skipped_edges": self.skipped_edges,
            "kinetic_energy": self.kinetic_energy,
            "elapsed_seconds": round(self.elapsed_seconds, 4),
        }


class ForceLayout:
    """
    One-shot force-directed layout engine.

    Per iteration:
    1. Reset force accumulators
    2. Repulsion for every unordered pair: F = K_rep / d^2, d = |Δ| + softening
    3. Attraction along every edge: F = K_att * d (zero-length edges skipped)
    4. v = (v + f) * damping; p += v

    Repulsion is O(n^2) per iteration, which is fine for dataset-sized
    graphs (a few hundred nodes).
    """

    def __init__(
        self,
        iterations: int | None = None,
        repulsion: float | None = None,
        attraction: float | None = None,
        damping: float | None = None,
        softening: float | None = None,
    ) -> None:
        self.iterations = iterations if iterations is not None else settings.layout_iterations
        self.repulsion = repulsion if repulsion is not None else settings.layout_repulsion
        self.attraction = attraction if attraction is not None else settings.layout_attraction
        self.damping = damping if damping is not None else settings.layout_damping
        self.softening = softening if softening is not None else settings.layout_softening

        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")

    def run(self, graph: Graph) -> LayoutResult:
        """
        Relax the graph in place.

        Node state is copied into arrays owned by this call, integrated for
        exactly `self.iterations` steps and written back to the nodes.

        Args:
            graph: Initialized graph; positions are the starting point

        Returns:
            LayoutResult with run statistics
        """
        start = time.perf_counter()
        nodes = graph.nodes
        n = len(nodes)

        pos = np.array([[nd.x, nd.y, nd.z] for nd in nodes], dtype=np.float64).reshape(n, 3)
        vel = np.array([[nd.vx, nd.vy, nd.vz] for nd in nodes], dtype=np.float64).reshape(n, 3)
        force = np.zeros((n, 3), dtype=np.float64)

        src = np.array([e.source for e in graph.edges], dtype=np.intp)
        dst = np.array([e.target for e in graph.edges], dtype=np.intp)

        skipped = 0
        for _ in range(self.iterations):
            force[:] = 0.0
            self._apply_repulsion(pos, force)
            skipped += self._apply_attraction(pos, force, src, dst)

            vel += force
            vel *= self.damping
            pos += vel

        for i, nd in enumerate(nodes):
            nd.x, nd.y, nd.z = (float(c) for c in pos[i])
            nd.vx, nd.vy, nd.vz = (float(c) for c in vel[i])
            nd.fx, nd.fy, nd.fz = (float(c) for c in force[i])

        result = LayoutResult(
            iterations=self.iterations,
            skipped_edges=skipped,
            kinetic_energy=float(np.sum(vel * vel)),
            elapsed_seconds=time.perf_counter() - start,
        )
        if skipped:
            logger.debug(f"Skipped {skipped} zero-length edge evaluations")
        logger.info(
            f"Layout finished: {n} nodes, {len(graph.edges)} edges, "
            f"{self.iterations} iterations in {result.elapsed_seconds:.2f}s"
        )
        return result

    def _apply_repulsion(self, pos: np.ndarray, force: np.ndarray) -> None:
        """Pairwise inverse-square repulsion, summed per node."""
        if len(pos) < 2:
            return
        # delta[i, j] = p_i - p_j; the i == j terms are zero vectors
        delta = pos[:, None, :] - pos[None, :, :]
        dist = np.sqrt(np.einsum("ijk,ijk->ij", delta, delta)) + self.softening
        magnitude = self.repulsion / (dist * dist)
        force += np.einsum("ijk,ij->ik", delta, magnitude / dist)

    def _apply_attraction(
        self,
        pos: np.ndarray,
        force: np.ndarray,
        src: np.ndarray,
        dst: np.ndarray,
    ) -> int:
        """Spring attraction along edges. Returns the number of skipped edges."""
        if len(src) == 0:
            return 0
        delta = pos[dst] - pos[src]
        dist = np.linalg.norm(delta, axis=1)

        # Coincident endpoints (including self-loops) have no direction
        live = dist > 0
        magnitude = self.attraction * dist[live]
        pull = delta[live] / dist[live][:, None] * magnitude[:, None]

        # np.add.at accumulates repeated indices, so duplicate edges stack
        np.add.at(force, src[live], pull)
        np.subtract.at(force, dst[live], pull)
        return int(len(src) - np.count_nonzero(live))
