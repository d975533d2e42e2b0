"""Infinite plane primitive with ray-plane intersection.

A plane is stored in implicit form:

    dot(N, P) + D = 0

where N is the unit normal and D the signed distance from the origin. For
example the ground plane ``y = 0`` is ``N = (0, 1, 0), D = 0`` and the wall
``z = -10`` is ``N = (0, 0, 1), D = 10``.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.geometry.plane import Plane, intersect_plane
    >>> # Use intersect_plane within a Taichi kernel
"""

import math
from dataclasses import dataclass

import taichi as ti
import taichi.math as tm

from src.raycaster.core.vector import INF, dot
from src.raycaster.materials.material import Material, MaterialInfo

from .sphere import HitRecord, miss_record

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

# Allowed deviation of a plane normal's length from 1
NORMAL_TOLERANCE = 1e-4


@ti.dataclass
class Plane:
    """A plane ``dot(normal, P) + D = 0``.

    Attributes:
        normal: Unit normal of the plane (vec3).
        D: Signed distance term.
        material: The plane's own material.
    """

    normal: vec3
    D: ti.f32
    material: Material


@ti.func
def intersect_plane(
    plane: Plane,
    origin: vec3,
    direction: vec3,
    t_min: ti.f32,
    t_max: ti.f32,
) -> HitRecord:
    """Test for ray-plane intersection.

    Substituting the ray into the plane equation gives:
        t = -(D + dot(N, origin)) / dot(N, direction)

    A ray exactly parallel to the plane (dot(N, direction) == 0) never hits,
    even when it lies inside the plane.

    Args:
        plane: The plane to test intersection against.
        origin: The starting point of the ray.
        direction: The direction vector of the ray.
        t_min: Exclusive lower bound on a valid t.
        t_max: Exclusive upper bound on a valid t.

    Returns:
        A HitRecord whose normal is the plane normal, or a record with
        t == INF on a miss.
    """
    rec = miss_record()

    denominator = dot(plane.normal, direction)
    if denominator != 0.0:
        t = -(plane.D + dot(plane.normal, origin)) / denominator
        if t > t_min and t < t_max:
            rec = HitRecord(
                t=t,
                point=origin + t * direction,
                normal=plane.normal,
                material=plane.material,
            )

    return rec


@dataclass(frozen=True)
class PlaneInfo:
    """Host-side description of a plane.

    Attributes:
        normal: Unit normal of the plane.
        D: Signed distance term of ``dot(normal, P) + D = 0``.
        material: The plane's material.

    Raises:
        ValueError: If the normal is not unit length.
    """

    normal: tuple[float, float, float]
    D: float
    material: MaterialInfo

    def __post_init__(self) -> None:
        norm = math.sqrt(sum(component * component for component in self.normal))
        if abs(norm - 1.0) > NORMAL_TOLERANCE:
            raise ValueError(f"Plane normal {self.normal} has length {norm}, expected 1.")
