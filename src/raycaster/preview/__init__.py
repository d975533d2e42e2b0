"""Preview module for render output.

Components:
    framebuffer: Owned 8-bit RGB pixel buffer with a bounds-checked writer
    export: Image file writing via Pillow (BMP by default)

Example:
    >>> from src.raycaster.preview import FrameBuffer, save_image
    >>> fb = FrameBuffer(1280, 720)
    >>> # ... render into fb ...
    >>> save_image(fb, "out.bmp")
"""

from src.raycaster.preview.export import (
    DEFAULT_OUTPUT_PATH,
    save_image,
    save_image_from_array,
)
from src.raycaster.preview.framebuffer import CHANNELS, FrameBuffer

__all__ = [
    "FrameBuffer",
    "CHANNELS",
    "save_image",
    "save_image_from_array",
    "DEFAULT_OUTPUT_PATH",
]
