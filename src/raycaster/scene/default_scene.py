"""Default scene configuration.

This module provides the factory for the scene rendered by the example
script: a single shiny sphere above and in front of the camera, lit by one
point light up and to the right plus a faint ambient term.

The scene consists of:
- Sphere at (0, 1, -3), radius 1, color (0.8, 0.5, 0.5), specular 500
- Ambient light 0.09
- Point light 0.6 at (3, 5, 0)
- Optionally a large ground sphere (radius 1000) under the scene

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.scene.default_scene import create_default_world
    >>> world = create_default_world()
    >>> world.num_spheres
    1
"""

from dataclasses import dataclass

from src.raycaster.geometry.sphere import SphereInfo
from src.raycaster.materials.material import MaterialInfo
from src.raycaster.scene.lights import AmbientLight, PointLight
from src.raycaster.scene.world import World


@dataclass(frozen=True)
class DefaultSceneParams:
    """Parameters for the default scene.

    Attributes:
        ambient_intensity: Intensity of the ambient light.
        light_intensity: Intensity of the point light.
        light_position: Position of the point light.
        include_ground: Whether to add the large ground sphere.
    """

    ambient_intensity: float = 0.09
    light_intensity: float = 0.6
    light_position: tuple[float, float, float] = (3.0, 5.0, 0.0)
    include_ground: bool = False


# Shiny, mostly red material of the main sphere
SHINY_MATERIAL = MaterialInfo(color=(0.8, 0.5, 0.5), specular=500.0, reflectivity=0.2)

# Dull gray-green material of the ground
GROUND_MATERIAL = MaterialInfo(color=(0.3, 0.4, 0.4), specular=10.0, reflectivity=0.4)


def create_default_world(params: DefaultSceneParams | None = None) -> World:
    """Create the default scene.

    Taichi must be initialized before calling this, since the World
    allocates fields.

    Args:
        params: Optional scene parameters; defaults to DefaultSceneParams().

    Returns:
        A fully built World.
    """
    if params is None:
        params = DefaultSceneParams()

    spheres = [SphereInfo(center=(0.0, 1.0, -3.0), radius=1.0, material=SHINY_MATERIAL)]
    if params.include_ground:
        spheres.append(
            SphereInfo(center=(0.0, -1000.0, -14.0), radius=1000.0, material=GROUND_MATERIAL)
        )

    return World(
        spheres=spheres,
        planes=[],
        ambient_light=AmbientLight(params.ambient_intensity),
        point_lights=[PointLight(params.light_intensity, params.light_position)],
    )
