"""Sphere primitive with ray-sphere intersection.

This module provides the HitRecord produced by every intersection routine,
the Sphere dataclass and its intersection function, and the host-side
SphereInfo used to describe spheres when building a world.

A miss is not a separate flag: it is a record whose ``t`` is infinite.
Comparing ``t`` values is therefore enough to pick the closest hit.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.geometry.sphere import Sphere, intersect_sphere
    >>> # Use intersect_sphere within a Taichi kernel:
    >>> # rec = intersect_sphere(sphere, origin, direction, 0.0, INF)
"""

from dataclasses import dataclass

import taichi as ti
import taichi.math as tm

from src.raycaster.core.vector import INF, dot, normalize
from src.raycaster.materials.material import Material, MaterialInfo

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.dataclass
class HitRecord:
    """Record of a ray-primitive intersection.

    Attributes:
        t: The parameter value along the ray where intersection occurred.
            INF means the ray missed.
        point: The 3D point where the ray intersected the surface.
            Only valid if t is finite.
        normal: The surface normal at the intersection point (unit length).
            Only valid if t is finite.
        material: Copy of the hit primitive's material.
    """

    t: ti.f32
    point: vec3
    normal: vec3
    material: Material


@ti.dataclass
class Sphere:
    """A sphere defined by center point, radius and material.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere (positive float).
        material: The sphere's own material.
    """

    center: vec3
    radius: ti.f32
    material: Material


@ti.func
def miss_record() -> HitRecord:
    """Create a HitRecord indicating no intersection."""
    return HitRecord(
        t=INF,
        point=vec3(0.0, 0.0, 0.0),
        normal=vec3(0.0, 0.0, 0.0),
        material=Material(color=vec3(0.0, 0.0, 0.0), specular=-1.0, reflectivity=0.0),
    )


@ti.func
def intersect_sphere(
    sphere: Sphere,
    origin: vec3,
    direction: vec3,
    t_min: ti.f32,
    t_max: ti.f32,
) -> HitRecord:
    """Test for ray-sphere intersection.

    Solves ``|origin + t * direction - center|^2 = radius^2``, i.e.

        a*t^2 + b*t + c = 0

    where:
        a = dot(direction, direction)
        b = 2 * dot(oc, direction)
        c = dot(oc, oc) - radius^2
        oc = origin - center

    The smaller root strictly inside (t_min, t_max) is selected; if it lies
    outside the window the larger root is tried instead. A tangent ray
    (discriminant == 0) yields a single hit.

    Args:
        sphere: The sphere to test intersection against.
        origin: The starting point of the ray.
        direction: The direction vector of the ray (unit length expected,
            see the note on the root formula below).
        t_min: Exclusive lower bound on a valid t.
        t_max: Exclusive upper bound on a valid t.

    Returns:
        A HitRecord with an outward unit normal and a copy of the sphere's
        material, or a record with t == INF on a miss.
    """
    oc = origin - sphere.center

    a = dot(direction, direction)
    b = 2.0 * dot(oc, direction)
    c = dot(oc, oc) - sphere.radius * sphere.radius

    discriminant = b * b - 4.0 * a * c

    rec = miss_record()

    if discriminant >= 0.0:
        sqrt_d = ti.sqrt(discriminant)

        # NOTE: evaluates as ((-b +- sqrt_d) / 2) * a rather than
        # (-b +- sqrt_d) / (2 * a). Both agree only when a == 1.
        t1 = (-b + sqrt_d) / 2.0 * a
        t2 = (-b - sqrt_d) / 2.0 * a
        t_near = ti.min(t1, t2)
        t_far = ti.max(t1, t2)

        # The far root is tried when the near one is outside the window, so a
        # ray starting inside the sphere hits its far side. Taking only the
        # near root would leave such rays unlit.
        t = INF
        if t_near > t_min and t_near < t_max:
            t = t_near
        elif t_far > t_min and t_far < t_max:
            t = t_far

        if t < INF:
            hit_point = origin + t * direction
            rec = HitRecord(
                t=t,
                point=hit_point,
                normal=normalize(hit_point - sphere.center),
                material=sphere.material,
            )

    return rec


@dataclass(frozen=True)
class SphereInfo:
    """Host-side description of a sphere.

    Attributes:
        center: The center of the sphere.
        radius: The radius of the sphere (must be positive).
        material: The sphere's material.

    Raises:
        ValueError: If the radius is not positive.
    """

    center: tuple[float, float, float]
    radius: float
    material: MaterialInfo

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius = {self.radius} must be positive.")
