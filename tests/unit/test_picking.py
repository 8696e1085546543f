"""Unit tests for camera rays and sphere picking."""

import math

import pytest

from charnet.models import Ray
from charnet.picking import (
    PerspectiveCamera,
    SpatialPickResolver,
    ray_sphere_intersection,
    screen_to_ndc,
)


@pytest.fixture
def resolver() -> SpatialPickResolver:
    return SpatialPickResolver()


@pytest.fixture
def x_ray() -> Ray:
    """Ray from the origin along +x."""
    return Ray(origin=(0.0, 0.0, 0.0), direction=(1.0, 0.0, 0.0))


class TestRaySphereIntersection:
    """Tests for ray_sphere_intersection."""

    def test_hit_returns_entry_distance(self) -> None:
        """Test distance to the near surface."""
        ray = Ray(origin=(0, 0, 0), direction=(0, 0, 2))
        assert ray_sphere_intersection(ray, (0, 0, 10), 2.0) == pytest.approx(8.0)

    def test_miss(self, x_ray: Ray) -> None:
        """Test a sphere off the ray is missed."""
        assert ray_sphere_intersection(x_ray, (5, 3, 0), 1.0) is None

    def test_sphere_behind_origin(self, x_ray: Ray) -> None:
        """Test spheres behind the ray origin are ignored."""
        assert ray_sphere_intersection(x_ray, (-5, 0, 0), 1.0) is None

    def test_origin_inside_sphere(self, x_ray: Ray) -> None:
        """Test a ray starting inside a sphere reports the exit distance."""
        assert ray_sphere_intersection(x_ray, (1, 0, 0), 2.0) == pytest.approx(3.0)

    def test_tangent_hit(self, x_ray: Ray) -> None:
        """Test a grazing ray counts as a hit."""
        assert ray_sphere_intersection(x_ray, (5, 1, 0), 1.0) == pytest.approx(5.0)

    def test_zero_radius(self, x_ray: Ray) -> None:
        """Test degenerate spheres are never hit."""
        assert ray_sphere_intersection(x_ray, (5, 0, 0), 0.0) is None


class TestSpatialPickResolver:
    """Tests for SpatialPickResolver."""

    def test_nearest_body_wins(self, resolver: SpatialPickResolver, x_ray: Ray, body_factory) -> None:
        """Test the body at ray distance 5 beats the one at 10."""
        near = body_factory(0, (5.5, 0, 0), radius=0.5)
        far = body_factory(1, (10.5, 0, 0), radius=0.5)
        assert resolver.resolve(x_ray, [far, near]) is near
        assert resolver.resolve(x_ray, [near, far]) is near

    def test_no_hit(self, resolver: SpatialPickResolver, x_ray: Ray, body_factory) -> None:
        """Test None when nothing is on the ray."""
        bodies = [body_factory(0, (0, 5, 0)), body_factory(1, (-5, 0, 0))]
        assert resolver.resolve(x_ray, bodies) is None

    def test_empty_bodies(self, resolver: SpatialPickResolver, x_ray: Ray) -> None:
        """Test None with no candidates."""
        assert resolver.resolve(x_ray, []) is None

    def test_exact_tie_takes_first(self, resolver: SpatialPickResolver, x_ray: Ray, body_factory) -> None:
        """Test equal distances resolve to input order."""
        first = body_factory(0, (5, 0.5, 0))
        second = body_factory(1, (5, -0.5, 0))
        assert resolver.resolve(x_ray, [first, second]) is first

    def test_scale_grows_pick_radius(self, resolver: SpatialPickResolver, body_factory) -> None:
        """Test a highlighted (scaled up) body has a larger pick sphere."""
        ray = Ray(origin=(0, 0, 0), direction=(0, 0, 1))
        body = body_factory(0, (0, 1.4, 5), radius=1.2)
        assert resolver.resolve(ray, [body]) is None
        body.scale = 1.3
        assert resolver.resolve(ray, [body]) is body

    def test_resolve_id(self, resolver: SpatialPickResolver, x_ray: Ray, body_factory) -> None:
        """Test id-only resolution."""
        assert resolver.resolve_id(x_ray, [body_factory(7, (3, 0, 0))]) == 7
        assert resolver.resolve_id(x_ray, []) is None


class TestScreenToNdc:
    """Tests for screen_to_ndc."""

    def test_center(self) -> None:
        assert screen_to_ndc(400, 300, 800, 600) == pytest.approx((0.0, 0.0))

    def test_corners(self) -> None:
        """Test top-left maps to (-1, 1) and bottom-right to (1, -1)."""
        assert screen_to_ndc(0, 0, 800, 600) == pytest.approx((-1.0, 1.0))
        assert screen_to_ndc(800, 600, 800, 600) == pytest.approx((1.0, -1.0))

    def test_invalid_viewport(self) -> None:
        with pytest.raises(ValueError):
            screen_to_ndc(0, 0, 0, 600)


class TestPerspectiveCamera:
    """Tests for PerspectiveCamera rays."""

    def test_center_ray_points_at_target(self) -> None:
        """Test the NDC origin maps to the view direction."""
        camera = PerspectiveCamera(position=(0, 0, 10), target=(0, 0, 0))
        ray = camera.ray_from_ndc(0.0, 0.0)
        assert ray.origin == pytest.approx((0.0, 0.0, 10.0))
        assert ray.direction == pytest.approx((0.0, 0.0, -1.0))

    def test_edge_rays_follow_fov(self) -> None:
        """Test NDC edges map to half the field of view."""
        camera = PerspectiveCamera(position=(0, 0, 10), target=(0, 0, 0), fov=90.0, aspect=1.0)
        s = 1 / math.sqrt(2)
        assert camera.ray_from_ndc(1.0, 0.0).direction == pytest.approx((s, 0.0, -s))
        assert camera.ray_from_ndc(0.0, 1.0).direction == pytest.approx((0.0, s, -s))

    def test_aspect_widens_horizontal(self) -> None:
        """Test aspect scales the horizontal extent."""
        camera = PerspectiveCamera(position=(0, 0, 10), target=(0, 0, 0), fov=90.0, aspect=2.0)
        dx, _, dz = camera.ray_from_ndc(1.0, 0.0).direction
        assert dx / -dz == pytest.approx(2.0)

    def test_picks_body_at_target(self, resolver: SpatialPickResolver, body_factory) -> None:
        """Test the center ray of an oblique camera hits the body it looks at."""
        camera = PerspectiveCamera(position=(50, 50, 50), target=(3, -2, 1))
        body = body_factory(0, (3, -2, 1), radius=1.2)
        assert resolver.resolve(camera.ray_from_ndc(0.0, 0.0), [body]) is body

    def test_degenerate_up_vector(self) -> None:
        """Test looking straight along the up vector raises."""
        camera = PerspectiveCamera(position=(0, 10, 0), target=(0, 0, 0), up=(0, 1, 0))
        with pytest.raises(ValueError):
            camera.ray_from_ndc(0.0, 0.0)

    def test_coincident_target(self) -> None:
        camera = PerspectiveCamera(position=(1, 1, 1), target=(1, 1, 1))
        with pytest.raises(ValueError):
            camera.ray_from_ndc(0.0, 0.0)
