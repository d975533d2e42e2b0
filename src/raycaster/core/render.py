"""Ray casting render loop.

This module composes the pipeline for every pixel of the output image:

    pixel (x, y) -> viewport point -> primary ray -> closest hit
                 -> local shading -> byte triple in the frame buffer

There is one ray per pixel and no recursion, so a pixel's value depends only
on the immutable World and its own coordinates. The kernel's outer loop is
a data-parallel map over pixels; each iteration writes a disjoint 3-byte
slot of the frame buffer.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.config import RenderConfig
    >>> from src.raycaster.core.render import Renderer
    >>> from src.raycaster.scene.default_scene import create_default_world
    >>> renderer = Renderer(RenderConfig(), create_default_world())
    >>> image = renderer.render()  # (720, 1280, 3) uint8
"""

import logging
import time

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from src.raycaster.camera.projector import Projector
from src.raycaster.config import RenderConfig
from src.raycaster.core.shading import shade
from src.raycaster.core.vector import INF, normalize
from src.raycaster.preview.export import save_image
from src.raycaster.preview.framebuffer import FrameBuffer
from src.raycaster.scene.world import World, closest_hit

# Type alias for 3D vectors
vec3 = tm.vec3

logger = logging.getLogger(__name__)

# Intensity returned for rays that hit nothing (black)
BACKGROUND_INTENSITY = 0.0


@ti.func
def trace_ray(
    world: ti.template(),
    origin: vec3,
    direction: vec3,
    t_min: ti.f32,
    t_max: ti.f32,
) -> ti.f32:
    """Trace a primary ray and return its sample value.

    Finds the closest hit and shades it. Only the red channel of the hit
    material's base color is used, so the result is a single grayscale
    value.

    Args:
        world: The World to trace against.
        origin: The starting point of the ray.
        direction: The direction vector of the ray (unit length).
        t_min: Exclusive lower bound on a valid t.
        t_max: Exclusive upper bound on a valid t.

    Returns:
        The sample value in [0, 1]; BACKGROUND_INTENSITY on a miss.
    """
    col = BACKGROUND_INTENSITY

    hit = closest_hit(world, origin, direction, t_min, t_max)
    if hit.t < INF:
        # Vector from the hit point back to the ray origin
        view = origin - hit.point
        col = hit.material.color.x * shade(hit, world, view)

    return col


@ti.data_oriented
class Renderer:
    """Renders a World into a FrameBuffer.

    Attributes:
        config: The render configuration.
        world: The World being rendered. It must not change during render().
        projector: Projector built from config.
        framebuffer: Output pixel buffer sized from config.
    """

    def __init__(self, config: RenderConfig, world: World) -> None:
        self.config = config
        self.world = world
        self.projector = Projector(config)
        self.framebuffer = FrameBuffer(config.image_width, config.image_height)

        self.width = config.image_width
        self.height = config.image_height
        self.t_min = config.t_min
        self.t_max = config.t_max

        self._camera_origin = ti.Vector.field(3, dtype=ti.f32, shape=())
        self._camera_origin[None] = list(config.camera_origin)

    @ti.kernel
    def _render_kernel(self):
        """Cast one ray per pixel, row-major with the top row first."""
        for y, x in ti.ndrange(self.height, self.width):
            origin = self._camera_origin[None]
            point = self.projector.project(x, y)
            direction = normalize(point - origin)
            intensity = trace_ray(self.world, origin, direction, self.t_min, self.t_max)
            self.framebuffer.put_pixel(x, y, intensity)

    def render(self) -> npt.NDArray[np.uint8]:
        """Render the world.

        Returns:
            The rendered image as a (height, width, 3) uint8 array.
        """
        logger.info(
            "Rendering %dx%d (%d spheres, %d planes, %d point lights)",
            self.width,
            self.height,
            self.world.num_spheres,
            self.world.num_planes,
            self.world.num_point_lights,
        )
        start = time.perf_counter()

        self.framebuffer.clear()
        self._render_kernel()
        ti.sync()

        logger.info("Render finished in %.3fs", time.perf_counter() - start)
        return self.framebuffer.to_numpy()


def render_to_file(world: World, config: RenderConfig | None = None) -> bool:
    """Render a world and write it to ``config.output_path``.

    A failed write is logged but does not raise.

    Args:
        world: The World to render.
        config: Render configuration; defaults to RenderConfig().

    Returns:
        True if the image file was written.
    """
    if config is None:
        config = RenderConfig()

    renderer = Renderer(config, world)
    renderer.render()
    return save_image(renderer.framebuffer, config.output_path)
