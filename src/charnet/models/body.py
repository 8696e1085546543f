"""Pickable bodies and rays used for hover resolution."""

import math
from dataclasses import dataclass, field

Vector3 = tuple[float, float, float]


@dataclass
class PickableBody:
    """
    Renderable sphere for one node.

    `original_color` and `original_scale` are captured when the body is
    created and are what a hover revert restores. `color` and `scale` are
    the current visual state.
    """

    node_id: int
    name: str
    group: int
    position: Vector3
    radius: float
    original_color: int  # 0xRRGGBB
    original_scale: float = 1.0

    color: int = field(init=False)
    scale: float = field(init=False)

    def __post_init__(self) -> None:
        self.color = self.original_color
        self.scale = self.original_scale

    @property
    def effective_radius(self) -> float:
        """Radius of the sphere as currently drawn."""
        return self.radius * self.scale

    @property
    def is_highlighted(self) -> bool:
        return self.color != self.original_color or self.scale != self.original_scale

    def to_dict(self) -> dict:
        x, y, z = self.position
        return {
            "id": self.node_id,
            "name": self.name,
            "group": self.group,
            "x": x,
            "y": y,
            "z": z,
            "radius": self.radius,
            "color": self.color,
            "scale": self.scale,
        }


@dataclass(frozen=True)
class Ray:
    """A half-line from `origin` along unit-length `direction`."""

    origin: Vector3
    direction: Vector3

    def __post_init__(self) -> None:
        length = math.sqrt(sum(c * c for c in self.direction))
        if length == 0 or not math.isfinite(length):
            raise ValueError(f"Ray direction must be a finite non-zero vector, got {self.direction}")
        # Frozen dataclass: bypass __setattr__ to store the normalized direction
        object.__setattr__(self, "direction", tuple(c / length for c in self.direction))
        object.__setattr__(self, "origin", tuple(float(c) for c in self.origin))

    def point_at(self, t: float) -> Vector3:
        ox, oy, oz = self.origin
        dx, dy, dz = self.direction
        return (ox + dx * t, oy + dy * t, oz + dz * t)
