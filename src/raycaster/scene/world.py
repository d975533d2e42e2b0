"""World container and closest-hit queries.

The World owns every primitive and light used for a render. It is built
once from host-side descriptions and copied into Taichi fields sized to the
actual collections, using a Structure-of-Arrays layout. Nothing is added or
removed afterwards; build a new World for a different scene.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.geometry import SphereInfo
    >>> from src.raycaster.materials import MaterialInfo
    >>> from src.raycaster.scene.lights import AmbientLight, PointLight
    >>> from src.raycaster.scene.world import World, closest_hit
    >>> world = World(
    ...     spheres=[SphereInfo((0, 1, -3), 1.0, MaterialInfo((0.8, 0.5, 0.5), 500.0, 0.2))],
    ...     ambient_light=AmbientLight(0.09),
    ...     point_lights=[PointLight(0.6, (3, 5, 0))],
    ... )
    >>> # Pass the world to kernels as a ti.template() argument
"""

from collections.abc import Iterable

import taichi as ti
import taichi.math as tm

from src.raycaster.geometry.plane import Plane, PlaneInfo, intersect_plane
from src.raycaster.geometry.sphere import (
    HitRecord,
    Sphere,
    SphereInfo,
    intersect_sphere,
    miss_record,
)
from src.raycaster.materials.material import Material, MaterialInfo
from src.raycaster.scene.lights import AmbientLight, PointLight

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


def _capacity(count: int) -> int:
    # Taichi fields cannot be empty; an empty collection keeps one unused slot.
    return max(count, 1)


@ti.data_oriented
class World:
    """Aggregate of spheres, planes, lights for one render.

    Attributes:
        spheres: The spheres, in insertion order.
        planes: The planes, in insertion order.
        ambient_light: The ambient light.
        point_lights: The point lights, in insertion order.
        num_spheres: Number of spheres.
        num_planes: Number of planes.
        num_point_lights: Number of point lights.
    """

    def __init__(
        self,
        spheres: Iterable[SphereInfo] = (),
        planes: Iterable[PlaneInfo] = (),
        ambient_light: AmbientLight | None = None,
        point_lights: Iterable[PointLight] = (),
    ) -> None:
        self.spheres: tuple[SphereInfo, ...] = tuple(spheres)
        self.planes: tuple[PlaneInfo, ...] = tuple(planes)
        self.ambient_light = ambient_light if ambient_light is not None else AmbientLight()
        self.point_lights: tuple[PointLight, ...] = tuple(point_lights)

        self.num_spheres = len(self.spheres)
        self.num_planes = len(self.planes)
        self.num_point_lights = len(self.point_lights)

        # Sphere storage
        n = _capacity(self.num_spheres)
        self._sphere_centers = ti.Vector.field(3, dtype=ti.f32, shape=n)
        self._sphere_radii = ti.field(dtype=ti.f32, shape=n)
        self._sphere_colors = ti.Vector.field(3, dtype=ti.f32, shape=n)
        self._sphere_speculars = ti.field(dtype=ti.f32, shape=n)
        self._sphere_reflectivities = ti.field(dtype=ti.f32, shape=n)

        # Plane storage
        n = _capacity(self.num_planes)
        self._plane_normals = ti.Vector.field(3, dtype=ti.f32, shape=n)
        self._plane_ds = ti.field(dtype=ti.f32, shape=n)
        self._plane_colors = ti.Vector.field(3, dtype=ti.f32, shape=n)
        self._plane_speculars = ti.field(dtype=ti.f32, shape=n)
        self._plane_reflectivities = ti.field(dtype=ti.f32, shape=n)

        # Light storage
        n = _capacity(self.num_point_lights)
        self._light_intensities = ti.field(dtype=ti.f32, shape=n)
        self._light_positions = ti.Vector.field(3, dtype=ti.f32, shape=n)
        self._ambient_intensity = ti.field(dtype=ti.f32, shape=())

        self._upload()

    def _upload(self) -> None:
        """Copy the host-side descriptions into the Taichi fields."""
        for i, sphere in enumerate(self.spheres):
            self._sphere_centers[i] = list(sphere.center)
            self._sphere_radii[i] = sphere.radius
            self._store_material(
                sphere.material,
                self._sphere_colors,
                self._sphere_speculars,
                self._sphere_reflectivities,
                i,
            )

        for i, plane in enumerate(self.planes):
            self._plane_normals[i] = list(plane.normal)
            self._plane_ds[i] = plane.D
            self._store_material(
                plane.material,
                self._plane_colors,
                self._plane_speculars,
                self._plane_reflectivities,
                i,
            )

        for i, light in enumerate(self.point_lights):
            self._light_intensities[i] = light.intensity
            self._light_positions[i] = list(light.position)

        self._ambient_intensity[None] = self.ambient_light.intensity

    @staticmethod
    def _store_material(material: MaterialInfo, colors, speculars, reflectivities, i: int) -> None:
        colors[i] = list(material.color)
        speculars[i] = material.specular
        reflectivities[i] = material.reflectivity

    @property
    def is_empty(self) -> bool:
        """Whether the world contains no primitives."""
        return self.num_spheres == 0 and self.num_planes == 0

    # =========================================================================
    # Device-side accessors
    # =========================================================================

    @ti.func
    def get_sphere(self, i: ti.i32) -> Sphere:
        """Assemble the i-th sphere, including a copy of its material."""
        return Sphere(
            center=self._sphere_centers[i],
            radius=self._sphere_radii[i],
            material=Material(
                color=self._sphere_colors[i],
                specular=self._sphere_speculars[i],
                reflectivity=self._sphere_reflectivities[i],
            ),
        )

    @ti.func
    def get_plane(self, i: ti.i32) -> Plane:
        """Assemble the i-th plane, including a copy of its material."""
        return Plane(
            normal=self._plane_normals[i],
            D=self._plane_ds[i],
            material=Material(
                color=self._plane_colors[i],
                specular=self._plane_speculars[i],
                reflectivity=self._plane_reflectivities[i],
            ),
        )

    @ti.func
    def get_light_intensity(self, i: ti.i32) -> ti.f32:
        return self._light_intensities[i]

    @ti.func
    def get_light_position(self, i: ti.i32) -> vec3:
        return self._light_positions[i]

    @ti.func
    def get_ambient_intensity(self) -> ti.f32:
        return self._ambient_intensity[None]


@ti.func
def closest_hit(
    world: ti.template(),
    origin: vec3,
    direction: vec3,
    t_min: ti.f32,
    t_max: ti.f32,
) -> HitRecord:
    """Find the closest intersection of a ray with every primitive.

    Tests all spheres, then all planes, keeping the record with the smallest
    t. Only a strictly smaller t replaces the current best, so among equal
    candidates the first one in insertion order wins.

    Args:
        world: The World to query.
        origin: The starting point of the ray.
        direction: The direction vector of the ray.
        t_min: Exclusive lower bound on a valid t.
        t_max: Exclusive upper bound on a valid t.

    Returns:
        The closest HitRecord, or a record with t == INF if nothing was hit
        (including when the world is empty).
    """
    closest = miss_record()

    # Serial loops keep the insertion-order tie-break well defined
    ti.loop_config(serialize=True)
    for i in range(world.num_spheres):
        rec = intersect_sphere(world.get_sphere(i), origin, direction, t_min, t_max)
        if rec.t < closest.t:
            closest = rec

    ti.loop_config(serialize=True)
    for i in range(world.num_planes):
        rec = intersect_plane(world.get_plane(i), origin, direction, t_min, t_max)
        if rec.t < closest.t:
            closest = rec

    return closest
