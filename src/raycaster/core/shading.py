"""Local Phong-style illumination.

Computes the light intensity reaching a hit point directly from the
world's lights:

    I = ambient
      + sum over point lights of
            I_l * dot(N, L) / (|N| |L|)                    if dot(N, L) > 0
          + I_l * (dot(R, V) / (|R| |V|)) ^ specular      if specular != -1
                                                           and dot(R, V) > 0

where L points from the hit point to the light, R is L reflected about N and
V points from the hit point back to the ray origin. The total is clamped to
[0, 1]. No shadow rays are cast, so every light is assumed visible.
"""

import taichi as ti
import taichi.math as tm

from src.raycaster.core.vector import clamp, dot, length, reflect_ray
from src.raycaster.geometry.sphere import HitRecord
from src.raycaster.materials.material import SPECULAR_DISABLED

# Type alias for 3D vectors
vec3 = tm.vec3


@ti.func
def shade(hit: HitRecord, world: ti.template(), view: vec3) -> ti.f32:
    """Accumulate ambient, diffuse and specular light at a hit point.

    Args:
        hit: A HitRecord with finite t.
        world: The World providing the lights.
        view: Vector from the hit point back to the ray origin. It need not
            be normalized.

    Returns:
        The total intensity clamped to [0, 1].
    """
    p = hit.point
    N = hit.normal
    specular = hit.material.specular

    intensity = world.get_ambient_intensity()

    ti.loop_config(serialize=True)
    for i in range(world.num_point_lights):
        light_intensity = world.get_light_intensity(i)
        L = world.get_light_position(i) - p

        # Diffuse
        n_dot_l = dot(N, L)
        if n_dot_l > 0.0:
            intensity += light_intensity * n_dot_l / (length(N) * length(L))

        # Specular
        if specular != SPECULAR_DISABLED:
            R = reflect_ray(L, N)
            r_dot_v = dot(R, view)
            if r_dot_v > 0.0:
                intensity += light_intensity * ti.pow(
                    r_dot_v / (length(R) * length(view)), specular
                )

    return clamp(intensity, 0.0, 1.0)
