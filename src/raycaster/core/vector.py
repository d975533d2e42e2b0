"""Vector utilities for ray casting.

Every other component builds on these helpers. They are Taichi functions so
they can be called from any kernel; the host side uses NumPy for the few
setup computations it needs.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> @ti.kernel
    ... def k() -> ti.f32:
    ...     return length(vec3(3.0, 4.0, 0.0))
    >>> k()
    5.0
"""

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

# Parametric distance used as the "no hit" sentinel
INF = float("inf")


@ti.func
def dot(u: vec3, v: vec3) -> ti.f32:
    """Compute the dot product of two vectors."""
    return u.x * v.x + u.y * v.y + u.z * v.z


@ti.func
def length(u: vec3) -> ti.f32:
    """Compute the Euclidean length of a vector."""
    return ti.sqrt(dot(u, u))


@ti.func
def normalize(u: vec3) -> vec3:
    """Scale a vector to unit length.

    Args:
        u: The input vector.

    Returns:
        ``u / length(u)``. A zero-length vector is returned unchanged
        instead of producing NaNs.
    """
    result = u
    len_u = length(u)
    if len_u > 0.0:
        result = u / len_u
    return result


@ti.func
def reflect_ray(r: vec3, n: vec3) -> vec3:
    """Reflect a vector about a normal.

    Unlike an incident-direction reflection, ``r`` points away from the
    surface (e.g. toward a light), and the result also points away from it:
    ``2 * n * dot(r, n) - r``.

    Args:
        r: The vector to reflect.
        n: The surface normal (should be unit length).

    Returns:
        The mirrored vector.
    """
    return 2.0 * n * dot(r, n) - r


@ti.func
def clamp(n: ti.f32, lo: ti.f32, hi: ti.f32) -> ti.f32:
    """Clamp a scalar to ``[lo, hi]``; values on the boundary pass through."""
    result = n
    if n < lo:
        result = lo
    elif n > hi:
        result = hi
    return result
