"""Image export for rendered frames.

Supported formats:
    - Anything Pillow can write from 8-bit RGB, chosen by file extension
      (BMP by default)

A failed write is reported, not raised: the error is logged and the save
functions return False so the caller can finish normally.

Example:
    >>> from src.raycaster.preview.export import save_image
    >>> if not save_image(framebuffer, "out.bmp"):
    ...     print("ERROR: Failed to write out to image file!")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from src.raycaster.preview.framebuffer import FrameBuffer

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = "out.bmp"


def save_image(framebuffer: FrameBuffer, filepath: str = DEFAULT_OUTPUT_PATH) -> bool:
    """Save a frame buffer as an image file.

    Args:
        framebuffer: The FrameBuffer holding the rendered bytes.
        filepath: Output file path; the extension selects the format.

    Returns:
        True if the file was written, False if writing failed.
    """
    return save_image_from_array(framebuffer.to_numpy(), filepath)


def save_image_from_array(
    image: npt.NDArray[np.uint8],
    filepath: str = DEFAULT_OUTPUT_PATH,
) -> bool:
    """Save a (height, width, 3) uint8 array as an image file.

    Args:
        image: Packed RGB image, top row first.
        filepath: Output file path; the extension selects the format.

    Returns:
        True if the file was written, False if writing failed.

    Raises:
        ValueError: If the array does not have shape (height, width, 3).
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (height, width, 3), got {image.shape}")

    pil_image = PILImage.fromarray(np.ascontiguousarray(image, dtype=np.uint8))
    try:
        pil_image.save(filepath)
    except (OSError, ValueError) as e:
        logger.error("Failed to write out to image file %s: %s", filepath, e)
        return False

    logger.info("Wrote %dx%d image to %s", image.shape[1], image.shape[0], filepath)
    return True
