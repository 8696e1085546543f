"""3D graph visualization endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel, Field

from charnet.api.graph_template import GRAPH_HTML
from charnet.config import Settings
from charnet.hover import HoverState
from charnet.picking import PerspectiveCamera
from charnet.presentation import EDGE_COLOR
from charnet.scene import DEFAULT_VIEWER, NetworkScene

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Models
# ============================================================================


class CameraModel(BaseModel):
    """Camera pose as reported by the viewer."""

    position: tuple[float, float, float]
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)
    fov: float = Field(default=75.0, gt=0, lt=180)
    aspect: float = Field(default=1.0, gt=0)

    def to_camera(self) -> PerspectiveCamera:
        return PerspectiveCamera(
            position=self.position,
            target=self.target,
            up=self.up,
            fov=self.fov,
            aspect=self.aspect,
        )


class HoverRequest(BaseModel):
    """One pointer move over the viewport."""

    camera: CameraModel
    screen_x: float
    screen_y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    viewer_id: str = Field(default=DEFAULT_VIEWER, min_length=1, max_length=64)


class HoverLeaveRequest(BaseModel):
    """Pointer left a viewer's viewport."""

    viewer_id: str = Field(default=DEFAULT_VIEWER, min_length=1, max_length=64)


class HoverResponse(BaseModel):
    """Pick result plus the side effects the viewer should apply."""

    node_id: int | None = None
    state: HoverState
    events: list[dict] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    nodes: int
    edges: int
    version: str = "0.1.0"


# ============================================================================
# Endpoints
# ============================================================================
# All handlers are async so scene access stays on the event loop thread.


def get_scene(request: Request) -> NetworkScene:
    """Get scene from app state."""
    return request.app.state.scene


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


FAVICON_SVG = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'>
<circle cx='50' cy='50' r='40' fill='#ffffff' stroke='#0078d4' stroke-width='6'/>
<circle cx='50' cy='50' r='15' fill='#0078d4'/>
<circle cx='30' cy='35' r='8' fill='#107c10'/>
<circle cx='70' cy='35' r='8' fill='#ff4b4b'/>
<line x1='50' y1='50' x2='30' y2='35' stroke='#c8c6c4' stroke-width='2'/>
<line x1='50' y1='50' x2='70' y2='35' stroke='#c8c6c4' stroke-width='2'/>
</svg>"""


@router.get("/favicon.ico")
async def favicon() -> Response:
    """Return SVG favicon."""
    return Response(content=FAVICON_SVG, media_type="image/svg+xml")


@router.get("/", response_class=HTMLResponse)
async def viewer() -> HTMLResponse:
    """Interactive 3D viewer."""
    return HTMLResponse(content=GRAPH_HTML)


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    scene = get_scene(request)
    return HealthResponse(
        status="healthy",
        nodes=len(scene.graph.nodes),
        edges=len(scene.graph.edges),
    )


@router.get("/graph/data")
async def get_graph_data(request: Request) -> dict:
    """Laid-out nodes, links and viewer options.

    Positions are final; the viewer does no simulation of its own.
    """
    scene = get_scene(request)
    app_settings = get_settings(request)
    return {
        "nodes": [body.to_dict() for body in scene.bodies],
        "links": [{"source": e.source, "target": e.target} for e in scene.graph.edges],
        "viewer": {
            "edge_color": EDGE_COLOR,
            "tooltip_offset": [app_settings.tooltip_offset_x, app_settings.tooltip_offset_y],
        },
    }


@router.get("/graph/stats")
async def get_graph_stats(request: Request) -> dict:
    """Layout run summary and distance metrics."""
    scene = get_scene(request)
    return {
        "layout": scene.layout_result.to_dict(),
        "metrics": scene.metrics().to_dict(),
    }


@router.post("/graph/hover", response_model=HoverResponse)
async def hover(request: Request, body: HoverRequest) -> HoverResponse:
    """Resolve the node under the pointer and advance the viewer's hover state."""
    scene = get_scene(request)
    try:
        picked = scene.pointer_move(
            body.camera.to_camera(),
            body.screen_x,
            body.screen_y,
            body.width,
            body.height,
            viewer_id=body.viewer_id,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    session = scene.session(body.viewer_id)
    return HoverResponse(
        node_id=picked.node_id if picked is not None else None,
        state=session.hover.state,
        events=[event.to_dict() for event in session.events.drain()],
    )


@router.post("/graph/hover/leave", response_model=HoverResponse)
async def hover_leave(request: Request, body: HoverLeaveRequest | None = None) -> HoverResponse:
    """Pointer left the viewport."""
    scene = get_scene(request)
    viewer_id = body.viewer_id if body is not None else DEFAULT_VIEWER
    session = scene.pointer_leave(viewer_id)
    if session is None:
        return HoverResponse(node_id=None, state=HoverState.IDLE)
    return HoverResponse(
        node_id=None,
        state=session.hover.state,
        events=[event.to_dict() for event in session.events.drain()],
    )
