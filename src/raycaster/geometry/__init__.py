"""Geometry module for shape primitives.

Components:
    sphere: HitRecord, Sphere primitive with ray-sphere intersection
    plane: Infinite plane primitive with ray-plane intersection

All intersection routines are Taichi functions (@ti.func) following the
same pattern:
    rec = intersect_shape(shape, ray_origin, ray_direction, t_min, t_max)

and signal a miss with ``rec.t == INF``. There is no acceleration
structure; scene queries test every primitive.
"""

from .plane import Plane, PlaneInfo, intersect_plane
from .sphere import HitRecord, Sphere, SphereInfo, intersect_sphere, miss_record

__all__ = [
    "HitRecord",
    "miss_record",
    "Sphere",
    "SphereInfo",
    "intersect_sphere",
    "Plane",
    "PlaneInfo",
    "intersect_plane",
]
