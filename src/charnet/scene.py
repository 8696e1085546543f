"""Scene assembly: dataset -> graph -> layout -> bodies -> hover."""

import logging
import random
from collections import OrderedDict
from dataclasses import dataclass, field, replace

from charnet.config import Settings, settings as default_settings
from charnet.hover import EventLog, HoverController
from charnet.ingestion import Dataset
from charnet.layout import ForceLayout, LayoutMetrics, LayoutResult, compute_layout_metrics
from charnet.models import Graph, PickableBody
from charnet.picking import PerspectiveCamera, SpatialPickResolver, screen_to_ndc
from charnet.presentation import build_bodies

logger = logging.getLogger(__name__)

DEFAULT_VIEWER = "default"


@dataclass
class HoverSession:
    """
    Hover state of one viewer.

    Each session highlights its own copies of the scene bodies, so one
    viewer's highlight never shows up in (or gets reverted for) another.
    """

    bodies: list[PickableBody]
    hover: HoverController
    events: EventLog


@dataclass
class NetworkScene:
    """Owns the laid-out graph, its bodies and the per-viewer hover sessions."""

    graph: Graph
    bodies: list[PickableBody]  # Unhighlighted originals served to new viewers
    layout_result: LayoutResult
    resolver: SpatialPickResolver = field(default_factory=SpatialPickResolver)
    highlight_scale: float | None = None
    highlight_lighten: float | None = None
    max_sessions: int = 256
    sessions: OrderedDict[str, HoverSession] = field(default_factory=OrderedDict)

    def session(self, viewer_id: str = DEFAULT_VIEWER) -> HoverSession:
        """Get the viewer's session, creating it (and evicting the oldest) as needed."""
        existing = self.sessions.get(viewer_id)
        if existing is not None:
            self.sessions.move_to_end(viewer_id)
            return existing

        events = EventLog()
        created = HoverSession(
            bodies=[replace(body) for body in self.bodies],
            hover=HoverController(
                listener=events,
                highlight_scale=self.highlight_scale,
                highlight_lighten=self.highlight_lighten,
            ),
            events=events,
        )
        self.sessions[viewer_id] = created
        while len(self.sessions) > self.max_sessions:
            evicted, _ = self.sessions.popitem(last=False)
            logger.debug(f"Evicted hover session {evicted}")
        return created

    def pointer_move(
        self,
        camera: PerspectiveCamera,
        screen_x: float,
        screen_y: float,
        width: float,
        height: float,
        viewer_id: str = DEFAULT_VIEWER,
    ) -> PickableBody | None:
        """Pick under the pointer and advance the viewer's hover state. Returns the picked body."""
        ndc_x, ndc_y = screen_to_ndc(screen_x, screen_y, width, height)
        ray = camera.ray_from_ndc(ndc_x, ndc_y)
        session = self.session(viewer_id)
        picked = self.resolver.resolve(ray, session.bodies)
        session.hover.update(picked, screen_x, screen_y)
        return picked

    def pointer_leave(self, viewer_id: str = DEFAULT_VIEWER) -> HoverSession | None:
        """Clear the viewer's hover. Unknown viewers have nothing to clear."""
        session = self.sessions.get(viewer_id)
        if session is not None:
            session.hover.reset()
        return session

    def metrics(self) -> LayoutMetrics:
        return compute_layout_metrics(self.graph)


def build_scene(
    dataset: Dataset,
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> NetworkScene:
    """
    Build a ready-to-serve scene.

    The layout runs to completion here, before any body exists.

    Raises:
        GraphDataError: If a link references a missing node
    """
    settings = settings or default_settings
    if rng is None:
        rng = random.Random(settings.layout_seed)

    graph = Graph.initialize(
        dataset.nodes,
        dataset.links,
        rng=rng,
        extent=settings.layout_initial_extent,
    )
    layout = ForceLayout(
        iterations=settings.layout_iterations,
        repulsion=settings.layout_repulsion,
        attraction=settings.layout_attraction,
        damping=settings.layout_damping,
        softening=settings.layout_softening,
    )
    result = layout.run(graph)

    bodies = build_bodies(graph, radius=settings.node_radius)
    logger.info(f"Scene ready with {len(bodies)} bodies")
    return NetworkScene(
        graph=graph,
        bodies=bodies,
        layout_result=result,
        highlight_scale=settings.highlight_scale,
        highlight_lighten=settings.highlight_lighten,
        max_sessions=settings.hover_max_sessions,
    )
