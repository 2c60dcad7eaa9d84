"""Tests for the scene container and nearest-hit query."""

import pytest
import math

from phongtracer.vec3 import Vec3, Point3, Color
from phongtracer.ray import Ray
from phongtracer.shapes import Sphere, Plane
from phongtracer.materials import Material
from phongtracer.lights import Light
from phongtracer.scene import Scene, Intersection, nearest_hit, RAY_EPSILON
from phongtracer.errors import InvalidArgumentError


@pytest.fixture
def material():
    return Material(Color(0.1, 0.1, 0.1), Color(0.5, 0.5, 0.5), Color(1, 1, 1))


class TestNearestHit:
    """Test nearest_hit()."""

    def test_miss_on_empty_scene(self):
        result = nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), [])
        assert result.t == math.inf
        assert result.obj is None
        assert result.point is None
        assert not result.hit

    def test_single_hit(self, material):
        sphere = Sphere(Point3(0, 0, -5), 1.0, material)
        result = nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), [sphere])

        assert result.hit
        assert result.obj is sphere
        assert result.t == pytest.approx(4.0)
        assert result.point == Point3(0, 0, -4)

    def test_closest_wins_regardless_of_order(self, material):
        near = Sphere(Point3(0, 0, -3), 1.0, material)
        far = Sphere(Point3(0, 0, -10), 1.0, material)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))

        assert nearest_hit(ray, [far, near]).obj is near
        assert nearest_hit(ray, [near, far]).obj is near

    def test_sphere_in_front_of_plane(self, material):
        sphere = Sphere(Point3(0, 0, -5), 1.0, material)
        wall = Plane(Point3(0, 0, -20), Vec3(0, 0, 1), material)
        result = nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), [wall, sphere])
        assert result.obj is sphere

    def test_first_object_wins_ties(self, material):
        first = Sphere(Point3(0, 0, -5), 1.0, material)
        second = Sphere(Point3(0, 0, -5), 1.0, material)
        result = nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), [first, second])
        assert result.obj is first

    def test_rejects_t_at_or_below_epsilon(self, material):
        sphere = Sphere(Point3(0, 0, -5), 1.0, material)
        # Origin on the surface, pointing inward: near root is exactly 0
        ray = Ray(Point3(0, 0, -4), Vec3(0, 0, -1))
        assert sphere.intersect(ray) == pytest.approx(0.0)
        assert not nearest_hit(ray, [sphere]).hit

    def test_accepts_t_just_above_epsilon(self, material):
        plane = Plane(Point3(0, 0, -2 * RAY_EPSILON), Vec3(0, 0, 1), material)
        result = nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), [plane])
        assert result.hit
        assert result.t == pytest.approx(2 * RAY_EPSILON)

    def test_behind_objects_ignored(self, material):
        behind = Sphere(Point3(0, 0, 5), 1.0, material)
        assert not nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), [behind]).hit

    def test_exclude(self, material):
        near = Sphere(Point3(0, 0, -3), 1.0, material)
        far = Sphere(Point3(0, 0, -10), 1.0, material)
        result = nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), [near, far], exclude=near)
        assert result.obj is far

    def test_missing_arguments(self, material):
        with pytest.raises(InvalidArgumentError):
            nearest_hit(None, [])
        with pytest.raises(InvalidArgumentError):
            nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), None)


class TestIntersection:
    """Test Intersection defaults."""

    def test_default_is_miss(self):
        result = Intersection()
        assert result.t == math.inf
        assert not result.hit


class TestScene:
    """Test the Scene container."""

    def test_add_preserves_order(self, material):
        scene = Scene()
        a = Sphere(Point3(0, 0, -3), 1.0, material)
        b = Plane(Point3(0, -1, 0), Vec3(0, 1, 0), material)
        scene.add(a)
        scene.add(b)

        assert len(scene) == 2
        assert list(scene) == [a, b]

    def test_add_light(self):
        scene = Scene()
        first = Light(Point3(0, 10, 0))
        second = Light(Point3(5, 5, 5))
        scene.add_light(first)
        scene.add_light(second)
        assert scene.lights == [first, second]

    def test_rejects_non_objects(self):
        scene = Scene()
        with pytest.raises(InvalidArgumentError):
            scene.add("sphere")
        with pytest.raises(InvalidArgumentError):
            scene.add_light((0, 10, 0))

    def test_nearest_hit_method(self, material):
        sphere = Sphere(Point3(0, 0, -5), 1.0, material)
        scene = Scene([sphere])
        result = scene.nearest_hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)))
        assert result.obj is sphere
