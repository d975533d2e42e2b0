"""Core ray casting module.

Components:
    vector: vec3 alias and vector helpers (dot, length, normalize, reflection)
    shading: Local ambient + diffuse + specular lighting
    render: trace_ray and the per-pixel render loop

The render loop is a single Taichi kernel mapping every pixel to one
primary ray. There is no recursion: each ray is shaded from the lights
directly, without shadows or reflections.
"""

from .vector import INF, clamp, dot, length, normalize, reflect_ray, vec3

# Note: shading and render are NOT imported here to avoid circular imports
# with the scene package. Import them directly:
#   from src.raycaster.core.render import Renderer, trace_ray

__all__ = [
    "vec3",
    "INF",
    "dot",
    "length",
    "normalize",
    "reflect_ray",
    "clamp",
]
