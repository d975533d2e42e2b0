#!/usr/bin/env python3
"""Render the default scene to out.bmp.

This script builds the default scene (one shiny sphere, one point light and
an ambient term), casts one ray per pixel of a 1280x720 image and writes the
result to ``out.bmp`` in the current directory. It takes no options.

Usage:
    python -m examples.render_scene

If the image cannot be written an error is printed, but the script still
exits normally.
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import taichi as ti


def render_scene() -> bool:
    """Render the default scene and save it.

    Returns:
        True if the image file was written.
    """
    # Lazy imports to allow Taichi initialization first
    from src.raycaster.config import RenderConfig
    from src.raycaster.core.render import render_to_file
    from src.raycaster.scene.default_scene import create_default_world

    config = RenderConfig()

    print(f"Creating default scene ({config.image_width}x{config.image_height})...")
    world = create_default_world()

    start_time = time.time()
    written = render_to_file(world, config)
    print(f"Rendered in {time.time() - start_time:.2f}s")

    if not written:
        print("ERROR: Failed to write out to image file!")
        return False

    print(f"Saved to: {Path(config.output_path).absolute()}")
    return True


def main() -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    ti.init(arch=ti.cpu)

    render_scene()
    return 0


if __name__ == "__main__":
    sys.exit(main())
