"""Pointer coordinates to world-space rays."""

import math
from dataclasses import dataclass

import numpy as np

from charnet.models import Ray, Vector3


def screen_to_ndc(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Convert pixel coordinates (origin top-left) to normalized device coordinates.

    Returns (ndc_x, ndc_y), both in [-1, 1] inside the viewport, y up.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must have positive size, got {width}x{height}")
    return (x / width) * 2 - 1, -(y / height) * 2 + 1


@dataclass
class PerspectiveCamera:
    """Look-at perspective camera. `fov` is the vertical field of view in degrees."""

    position: Vector3 = (50.0, 50.0, 50.0)
    target: Vector3 = (0.0, 0.0, 0.0)
    up: Vector3 = (0.0, 1.0, 0.0)
    fov: float = 75.0
    aspect: float = 1.0

    def basis(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Orthonormal (right, up, forward) vectors of the view."""
        forward = np.asarray(self.target, dtype=np.float64) - np.asarray(self.position, dtype=np.float64)
        norm = np.linalg.norm(forward)
        if norm == 0:
            raise ValueError("Camera position and target coincide")
        forward /= norm

        right = np.cross(forward, np.asarray(self.up, dtype=np.float64))
        norm = np.linalg.norm(right)
        if norm < 1e-12:
            raise ValueError("Camera up vector is parallel to the view direction")
        right /= norm

        true_up = np.cross(right, forward)
        return right, true_up, forward

    def ray_from_ndc(self, ndc_x: float, ndc_y: float) -> Ray:
        """Ray from the camera through the given point on the image plane."""
        if not 0 < self.fov < 180:
            raise ValueError(f"fov must be in (0, 180) degrees, got {self.fov}")
        if self.aspect <= 0:
            raise ValueError(f"aspect must be positive, got {self.aspect}")

        right, up, forward = self.basis()
        half_height = math.tan(math.radians(self.fov) / 2)
        half_width = half_height * self.aspect

        direction = forward + right * (ndc_x * half_width) + up * (ndc_y * half_height)
        return Ray(origin=tuple(self.position), direction=tuple(float(c) for c in direction))
