"""Render configuration.

All resolution, viewport and ray-window settings live in one immutable
value that is passed to the Projector and the Renderer. The defaults
produce a 1280x720 image with a 2-unit-high viewport one unit in front of
a camera at the origin, written to ``out.bmp``.

Example:
    >>> from src.raycaster.config import RenderConfig
    >>> config = RenderConfig()
    >>> round(config.viewport_width, 4)
    3.5556
    >>> small = RenderConfig(image_width=64, image_height=36)
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for a single render.

    Attributes:
        image_width: Output width in pixels (>= 2).
        image_height: Output height in pixels (>= 2).
        viewport_height: Height of the viewport in camera space.
        focal_length: Distance from the camera to the viewport plane.
        camera_origin: Camera position; the camera looks down -z.
        t_min: Exclusive lower bound on t for primary rays. The default of
            1.0 skips anything between the camera and the viewport plane.
        t_max: Exclusive upper bound on t for primary rays.
        output_path: Image file written by render_to_file.

    Raises:
        ValueError: If any setting is out of range.
    """

    image_width: int = 1280
    image_height: int = 720
    viewport_height: float = 2.0
    focal_length: float = 1.0
    camera_origin: tuple[float, float, float] = (0.0, 0.0, 0.0)
    t_min: float = 1.0
    t_max: float = math.inf
    output_path: str = "out.bmp"

    def __post_init__(self) -> None:
        # u = x / (width - 1) and v = y / (height - 1) need at least 2 pixels
        if self.image_width < 2 or self.image_height < 2:
            raise ValueError(
                f"Image dimensions ({self.image_width}x{self.image_height}) "
                "must be at least 2x2"
            )
        if self.viewport_height <= 0.0:
            raise ValueError(f"Viewport height = {self.viewport_height} must be positive.")
        if self.focal_length <= 0.0:
            raise ValueError(f"Focal length = {self.focal_length} must be positive.")
        if self.t_min >= self.t_max:
            raise ValueError(f"t_min = {self.t_min} must be less than t_max = {self.t_max}.")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height of the output image."""
        return self.image_width / self.image_height

    @property
    def viewport_width(self) -> float:
        """Width of the viewport, matching the image aspect ratio."""
        return self.aspect_ratio * self.viewport_height
