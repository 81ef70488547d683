"""Tests for the recursive caster."""

import pytest

from spheretrace import Bulb, Color, Ray, RayTracer, Scene, Sphere, Vector3, cast
from spheretrace.core import raytracer
from spheretrace.core.raytracer import nearest_hit

MISS = Color(0, 0, 1)
SHADE = Color(0.1, 0.1, 0.1)


def rgb(color):
    return tuple(color)


class TestNearestHit:

    def test_nearest_shape_wins_regardless_of_order(self):
        far = Sphere(Vector3(-20, 0, 0), 2, Color(0, 1, 0))
        near = Sphere(Vector3(0, 0, 0), 2, Color(1, 0, 0))
        index, hit = nearest_hit([far, near], Vector3(100, 0, 0), Vector3(-1, 0, 0))
        assert index == 1
        assert hit.point.x == pytest.approx(2)

    def test_first_of_equal_distances_wins(self):
        a = Sphere(Vector3(0, 0, 0), 2, Color(1, 0, 0))
        b = Sphere(Vector3(0, 0, 0), 2, Color(0, 1, 0))
        index, _ = nearest_hit([a, b], Vector3(100, 0, 0), Vector3(-1, 0, 0))
        assert index == 0

    def test_excluded_shapes_are_skipped(self):
        a = Sphere(Vector3(0, 0, 0), 2)
        index, hit = nearest_hit([a], Vector3(100, 0, 0), Vector3(-1, 0, 0), frozenset({0}))
        assert index == -1
        assert hit is None


class TestCast:

    def test_empty_scene_returns_miss_color(self):
        assert cast([], [], Vector3(1, 2, 3), Vector3(0, 1, 0), MISS, SHADE) == MISS

    def test_miss_returns_miss_color(self, red_sphere):
        color = cast([red_sphere], [], Vector3(100, 50, 0), Vector3(-1, 0, 0), MISS, SHADE)
        assert color == MISS

    def test_hit_without_lights_is_ambient(self, red_sphere):
        color = cast([red_sphere], [], Vector3(100, 0, 0), Vector3(-1, 0, 0), MISS, SHADE)
        assert (color.x, color.y, color.z) == pytest.approx((0.1, 0.05, 0.05))

    def test_mirror_blends_with_reflection(self):
        sphere = Sphere(Vector3(0, 0, 0), 5, Color(1.0, 0.5, 0.5), 0.5)
        color = cast([sphere], [], Vector3(100, 0, 0), Vector3(-1, 0, 0), MISS, SHADE)
        # (base * 0.5 + miss * 0.5) * ambient
        assert rgb(color) == pytest.approx((0.05, 0.025, 0.075))

    def test_unblocked_light_adds_to_mask(self, lit_scene):
        color = cast(lit_scene.shapes, lit_scene.lights,
                     Vector3(100, 0, 0), Vector3(-1, 0, 0), MISS, SHADE)
        # mask = 0.1 + 1.0 * 0.5
        assert rgb(color) == pytest.approx((0.6, 0.3, 0.3))

    def test_light_with_zero_power_is_skipped(self, red_sphere):
        # Bulb on the lit side: bulb -> point opposes the normal
        lights = [Bulb(Vector3(20, 0, 0), Color(1, 1, 1))]
        color = cast([red_sphere], lights, Vector3(100, 0, 0), Vector3(-1, 0, 0), MISS, SHADE)
        assert rgb(color) == pytest.approx((0.1, 0.05, 0.05))

    def test_occluded_light_contributes_nothing(self, red_sphere):
        # Hit at (4, 3, 0), normal (0.8, 0.6, 0); bulb behind along that line
        bulb = Bulb(Vector3(-4, -3, 0), Color(0.5, 0.5, 0.5))
        origin, direction = Vector3(100, 3, 0), Vector3(-1, 0, 0)

        lit = cast([red_sphere], [bulb], origin, direction, MISS, SHADE)
        assert rgb(lit) == pytest.approx((0.6, 0.3, 0.3))

        blocker = Sphere(Vector3(20, 15, 0), 2, Color(1, 1, 1))
        shaded = cast([red_sphere, blocker], [bulb], origin, direction, MISS, SHADE)
        assert rgb(shaded) == pytest.approx((0.1, 0.05, 0.05))

    def test_multiple_lights_accumulate(self, red_sphere):
        lights = [Bulb(Vector3(-10, 0, 0), Color(0.2, 0.2, 0.2)),
                  Bulb(Vector3(-30, 0, 0), Color(0.3, 0.3, 0.3))]
        color = cast([red_sphere], lights, Vector3(100, 0, 0), Vector3(-1, 0, 0), MISS, SHADE)
        assert rgb(color) == pytest.approx((0.6, 0.3, 0.3))

    def test_components_are_not_clamped(self, red_sphere):
        lights = [Bulb(Vector3(-10, 0, 0), Color(3, 3, 3))]
        color = cast([red_sphere], lights, Vector3(100, 0, 0), Vector3(-1, 0, 0), MISS, SHADE)
        assert color.x == pytest.approx(3.1)

    def test_full_mirrors_terminate_within_shape_count(self, monkeypatch):
        shapes = [
            Sphere(Vector3(0, 0, 0), 1, Color(1, 1, 1), 1.0),
            Sphere(Vector3(10, 0, 0), 1, Color(1, 1, 1), 1.0),
            Sphere(Vector3(-10, 0, 0), 1, Color(1, 1, 1), 1.0),
        ]
        depth = {'current': 0, 'max': 0}
        original = raytracer.cast

        def counting_cast(*args, **kwargs):
            depth['current'] += 1
            depth['max'] = max(depth['max'], depth['current'])
            try:
                return original(*args, **kwargs)
            finally:
                depth['current'] -= 1

        monkeypatch.setattr(raytracer, 'cast', counting_cast)
        color = raytracer.cast(shapes, [], Vector3(5, 0, 0), Vector3(-1, 0, 0), MISS, SHADE)

        # Top-level call plus at most one recursion per shape
        assert depth['max'] <= len(shapes) + 1
        # Bounces off each sphere once before escaping to the sky
        assert rgb(color) == pytest.approx((0, 0, 0.001))


class TestRayTracer:

    def test_trace_counts_primary_rays(self, lit_scene):
        tracer = RayTracer(lit_scene, MISS, SHADE)
        ray = Ray(Vector3(100, 0, 0), Vector3(-1, 0, 0))
        assert rgb(tracer.trace(ray)) == pytest.approx((0.6, 0.3, 0.3))
        tracer.trace(Ray(Vector3(100, 50, 0), Vector3(-1, 0, 0)))
        assert tracer.rays_cast == 2

        tracer.reset_statistics()
        assert tracer.rays_cast == 0

    def test_accepts_plain_color_tuples(self):
        tracer = RayTracer(Scene(), (1, 0, 0), (0, 0, 0))
        assert tracer.trace(Ray(Vector3(), Vector3(1, 0, 0))) == Color(1, 0, 0)
