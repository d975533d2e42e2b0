"""Packed 8-bit RGB pixel buffer.

The buffer holds ``width * height * 3`` bytes, row-major with the top row
first, R, G and B interleaved per pixel. It is written only through
``put_pixel``, which computes the offset ``3 * (y * width + x)`` and ignores
coordinates outside the image.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.preview.framebuffer import FrameBuffer
    >>> fb = FrameBuffer(4, 3)
    >>> fb.to_numpy().shape
    (3, 4, 3)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

# Number of interleaved color channels per pixel
CHANNELS = 3


@ti.data_oriented
class FrameBuffer:
    """Owned pixel buffer for one rendered image.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        pixels: Flat Taichi field of ``width * height * 3`` bytes.

    Raises:
        ValueError: If either dimension is not positive.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Frame buffer dimensions ({width}x{height}) must be positive")
        self.width = width
        self.height = height
        self.pixels = ti.field(dtype=ti.u8, shape=width * height * CHANNELS)

    @ti.func
    def put_pixel(self, x: ti.i32, y: ti.i32, intensity: ti.f32):
        """Write a grayscale sample to pixel (x, y).

        The value ``intensity * 255`` is truncated to a byte and replicated
        to the R, G and B channels.

        Args:
            x: Pixel column, 0 at the left.
            y: Pixel row, 0 at the top.
            intensity: Sample value in [0, 1].
        """
        if 0 <= x < self.width and 0 <= y < self.height:
            offset = CHANNELS * (y * self.width + x)
            value = ti.cast(intensity * 255.0, ti.u8)
            self.pixels[offset] = value
            self.pixels[offset + 1] = value
            self.pixels[offset + 2] = value

    def clear(self) -> None:
        """Reset every byte to zero (black)."""
        self.pixels.fill(0)

    def to_numpy(self) -> npt.NDArray[np.uint8]:
        """Get the image as a (height, width, 3) uint8 array, top row first."""
        return self.pixels.to_numpy().reshape(self.height, self.width, CHANNELS)

    def to_bytes(self) -> bytes:
        """Get the packed row-major RGB bytes."""
        return self.pixels.to_numpy().tobytes()
