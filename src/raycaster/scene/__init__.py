"""Scene module for world storage and ray-scene queries.

Components:
    lights: Point and ambient light descriptions
    world: World container (Taichi fields) and closest-hit queries
    default_scene: Factory for the scene rendered by the example script

Scene data is organized for efficient access from kernels:
    - Structure-of-Arrays layout for geometric and material data
    - Fields sized to the actual number of primitives and lights
"""

from .default_scene import (
    GROUND_MATERIAL,
    SHINY_MATERIAL,
    DefaultSceneParams,
    create_default_world,
)
from .lights import AmbientLight, PointLight
from .world import World, closest_hit

__all__ = [
    # Lights
    "AmbientLight",
    "PointLight",
    # World
    "World",
    "closest_hit",
    # Default scene
    "DefaultSceneParams",
    "create_default_world",
    "SHINY_MATERIAL",
    "GROUND_MATERIAL",
]
