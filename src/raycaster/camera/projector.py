"""Viewport projection from pixel coordinates.

The camera sits at its origin looking down -z. A viewport of
``viewport_width x viewport_height`` is centred on the forward axis at
``z = -focal_length``. Pixel (x, y), with row 0 at the top of the image,
maps to:

    u = x / (width - 1)
    v = 1 - y / (height - 1)
    P = lower_left + u * horizontal + v * vertical

so (0, 0) lands on the top-left corner of the viewport and
(width - 1, height - 1) on the bottom-right one. The returned point is in
camera space; the ray direction is ``normalize(P - origin)``.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.config import RenderConfig
    >>> from src.raycaster.camera.projector import Projector
    >>> projector = Projector(RenderConfig(image_width=64, image_height=36))
    >>>
    >>> @ti.kernel
    ... def center() -> ti.math.vec3:
    ...     return projector.project(32, 18)
"""

import numpy as np
import taichi as ti
import taichi.math as tm

from src.raycaster.config import RenderConfig

vec3 = tm.vec3


@ti.data_oriented
class Projector:
    """Maps pixel coordinates to points on the viewport plane.

    Attributes:
        config: The render configuration the viewport is derived from.
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, config: RenderConfig) -> None:
        self.config = config
        self.width = config.image_width
        self.height = config.image_height

        self._lower_left = ti.Vector.field(3, dtype=ti.f32, shape=())
        self._horizontal = ti.Vector.field(3, dtype=ti.f32, shape=())
        self._vertical = ti.Vector.field(3, dtype=ti.f32, shape=())

        # Viewport vectors (host-side computation)
        horizontal = np.array([config.viewport_width, 0.0, 0.0], dtype=np.float32)
        vertical = np.array([0.0, config.viewport_height, 0.0], dtype=np.float32)
        lower_left = np.array(
            [
                -config.viewport_width / 2.0,
                -config.viewport_height / 2.0,
                -config.focal_length,
            ],
            dtype=np.float32,
        )

        self._lower_left[None] = lower_left.tolist()
        self._horizontal[None] = horizontal.tolist()
        self._vertical[None] = vertical.tolist()

    @ti.func
    def project(self, x: ti.i32, y: ti.i32) -> vec3:
        """Map pixel (x, y) to a point on the viewport plane.

        Args:
            x: Pixel column, 0 at the left.
            y: Pixel row, 0 at the top.

        Returns:
            The camera-space point on the viewport.
        """
        u = ti.cast(x, ti.f32) / float(self.width - 1)
        v = 1.0 - ti.cast(y, ti.f32) / float(self.height - 1)
        return self._lower_left[None] + u * self._horizontal[None] + v * self._vertical[None]

    def get_info(self) -> dict[str, tuple[float, float, float]]:
        """Get the viewport vectors for debugging.

        Returns:
            Dictionary with lower_left, horizontal, vertical, top_left and
            bottom_right.
        """
        ll = self._lower_left.to_numpy()
        h = self._horizontal.to_numpy()
        v = self._vertical.to_numpy()

        def _tuple(vec) -> tuple[float, float, float]:
            return (float(vec[0]), float(vec[1]), float(vec[2]))

        return {
            "lower_left": _tuple(ll),
            "horizontal": _tuple(h),
            "vertical": _tuple(v),
            "top_left": _tuple(ll + v),
            "bottom_right": _tuple(ll + h),
        }
