"""Screen-to-world picking."""

from charnet.picking.camera import PerspectiveCamera, screen_to_ndc
from charnet.picking.resolver import SpatialPickResolver, ray_sphere_intersection

__all__ = [
    "PerspectiveCamera",
    "screen_to_ndc",
    "SpatialPickResolver",
    "ray_sphere_intersection",
]
