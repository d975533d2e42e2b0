"""Unit tests for local shading.

Tests cover:
- Ambient-only lighting
- Diffuse cosine term (including lights behind the surface)
- Specular term and its -1 sentinel
- Clamping of the total intensity
- Multiple lights
"""

import math

import pytest
import taichi as ti


def _shade(world, point, normal, specular, view):
    """Run shade once for a hand-built hit record and return the intensity."""
    from src.raycaster.core.shading import shade
    from src.raycaster.geometry.sphere import HitRecord
    from src.raycaster.materials.material import Material

    result = ti.field(dtype=ti.f32, shape=())

    @ti.kernel
    def test_kernel(
        w: ti.template(),
        p: ti.math.vec3,
        n: ti.math.vec3,
        spec: ti.f32,
        v: ti.math.vec3,
    ):
        hit = HitRecord(
            t=1.0,
            point=p,
            normal=n,
            material=Material(color=ti.math.vec3(1.0, 1.0, 1.0), specular=spec, reflectivity=0.0),
        )
        result[None] = shade(hit, w, v)

    test_kernel(world, ti.math.vec3(*point), ti.math.vec3(*normal), specular, ti.math.vec3(*view))
    return result[None]


def _world(ambient, lights):
    from src.raycaster.scene.lights import AmbientLight, PointLight
    from src.raycaster.scene.world import World

    return World(
        ambient_light=AmbientLight(ambient),
        point_lights=[PointLight(intensity, position) for intensity, position in lights],
    )


# Hit on the front of a sphere centred at (0, 0, -5), seen from the origin
HIT_POINT = (0.0, 0.0, -4.0)
HIT_NORMAL = (0.0, 0.0, 1.0)
VIEW = (0.0, 0.0, 4.0)


class TestAmbient:
    """Tests for the ambient term."""

    def test_ambient_only(self):
        """Test that with no point lights the result is the ambient intensity."""
        world = _world(0.2, [])
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, -1.0, VIEW) - 0.2) < 1e-6

    def test_no_light_is_black(self):
        """Test that a world without any light shades to zero."""
        world = _world(0.0, [])
        assert _shade(world, HIT_POINT, HIT_NORMAL, 10.0, VIEW) == 0.0


class TestDiffuse:
    """Tests for the diffuse term."""

    def test_light_along_normal(self):
        """Test full diffuse contribution for a light straight above the surface."""
        # L = (0, 0, 4) is parallel to N: cosine 1
        world = _world(0.1, [(0.5, (0.0, 0.0, 0.0))])
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, -1.0, VIEW) - 0.6) < 1e-6

    def test_light_at_angle(self):
        """Test that diffuse uses the cosine between N and the unnormalized L."""
        # L = (4, 0, 4): cosine = 1/sqrt(2)
        world = _world(0.0, [(0.5, (4.0, 0.0, 0.0))])
        expected = 0.5 / math.sqrt(2.0)
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, -1.0, VIEW) - expected) < 1e-6

    def test_light_behind_surface_ignored(self):
        """Test that a light behind the surface adds nothing."""
        world = _world(0.1, [(0.5, (0.0, 0.0, -10.0))])
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, -1.0, VIEW) - 0.1) < 1e-6

    def test_multiple_lights_accumulate(self):
        """Test that contributions from several lights add up."""
        world = _world(0.1, [(0.2, (0.0, 0.0, 0.0)), (0.3, (0.0, 0.0, 10.0))])
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, -1.0, VIEW) - 0.6) < 1e-6


class TestSpecular:
    """Tests for the specular term."""

    def test_specular_disabled_by_sentinel(self):
        """Test that specular == -1 skips the highlight."""
        world = _world(0.0, [(0.4, (0.0, 0.0, 0.0))])
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, -1.0, VIEW) - 0.4) < 1e-6

    def test_mirror_direction_highlight(self):
        """Test full specular when the reflected light points at the viewer."""
        # R = reflect((0, 0, 4), N) = (0, 0, 4), parallel to VIEW: cosine 1
        world = _world(0.0, [(0.4, (0.0, 0.0, 0.0))])
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, 10.0, VIEW) - 0.8) < 1e-6

    def test_specular_exponent(self):
        """Test that the highlight cosine is raised to the specular exponent."""
        # L = (4, 0, 4), R = (-4, 0, 4); view along +z: cosine 1/sqrt(2)
        world = _world(0.0, [(0.5, (4.0, 0.0, 0.0))])
        cosine = 1.0 / math.sqrt(2.0)
        expected = 0.5 * cosine + 0.5 * cosine**2
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, 2.0, VIEW) - expected) < 1e-5

    def test_highlight_facing_away_ignored(self):
        """Test that no specular is added when R points away from the viewer."""
        # L = (4, 0, 4), R = (-4, 0, 4); viewer off to the +x side: dot(R, V) < 0
        world = _world(0.0, [(0.5, (4.0, 0.0, 0.0))])
        view = (4.0, 0.0, 0.0)
        expected = 0.5 / math.sqrt(2.0)
        assert abs(_shade(world, HIT_POINT, HIT_NORMAL, 10.0, view) - expected) < 1e-6


class TestClamp:
    """Tests for clamping the total intensity."""

    def test_total_clamped_to_one(self):
        """Test that intensity above 1 is clamped."""
        world = _world(0.5, [(0.8, (0.0, 0.0, 0.0))])
        assert _shade(world, HIT_POINT, HIT_NORMAL, 10.0, VIEW) == pytest.approx(1.0)

    def test_bright_ambient_clamped(self):
        """Test that an ambient intensity above 1 is clamped."""
        world = _world(3.0, [])
        assert _shade(world, HIT_POINT, HIT_NORMAL, -1.0, VIEW) == pytest.approx(1.0)
