"""Ray picking against node spheres."""

from collections.abc import Sequence

import numpy as np

from charnet.models import PickableBody, Ray, Vector3


def ray_sphere_intersection(ray: Ray, center: Vector3, radius: float) -> float | None:
    """
    Distance along the ray to the first sphere surface in front of the origin.

    Returns the entry distance, or the exit distance when the origin is
    inside the sphere, or None if the ray misses or the sphere is behind.
    """
    if radius <= 0:
        return None
    origin = np.asarray(ray.origin)
    direction = np.asarray(ray.direction)  # Unit length, see Ray

    offset = origin - np.asarray(center, dtype=np.float64)
    b = float(np.dot(direction, offset))
    c = float(np.dot(offset, offset)) - radius * radius
    disc = b * b - c
    if disc < 0:
        return None

    root = disc ** 0.5
    near, far = -b - root, -b + root
    if far < 0:
        return None
    return near if near >= 0 else far


class SpatialPickResolver:
    """
    Finds the body nearest to the ray origin among those the ray hits.

    Stateless; the caller supplies the ray for the current camera and
    pointer. Each body is a sphere of radius `radius * scale`.
    """

    def resolve(self, ray: Ray, bodies: Sequence[PickableBody]) -> PickableBody | None:
        """
        Pick a body.

        Args:
            ray: World-space pick ray
            bodies: Candidate bodies

        Returns:
            Hit body with the smallest ray distance (first in input order on
            exact ties), or None
        """
        best: PickableBody | None = None
        best_t = float("inf")
        for body in bodies:
            t = ray_sphere_intersection(ray, body.position, body.effective_radius)
            if t is not None and t < best_t:
                best, best_t = body, t
        return best

    def resolve_id(self, ray: Ray, bodies: Sequence[PickableBody]) -> int | None:
        body = self.resolve(ray, bodies)
        return body.node_id if body is not None else None
