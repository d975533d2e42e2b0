"""Camera module for primary ray generation.

Components:
    projector: Pixel-to-viewport projection for a fixed camera at the
        configured origin looking down -z

Projection uses normalized image coordinates:
    u in [0, 1]: left to right across image
    v in [0, 1]: bottom to top across image (pixel rows are flipped)
"""

from .projector import Projector

__all__ = [
    "Projector",
]
